"""Message hooks and the preview plugin."""

from gitpreview.hooks.events import MessageEvents, MessageObject
from gitpreview.hooks.plugin import GitPreviewPlugin

__all__ = ["MessageEvents", "MessageObject", "GitPreviewPlugin"]
