"""
gitpreview - code previews for git forge links in chat messages.
"""

__version__ = "0.1.0"
