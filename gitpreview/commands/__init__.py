"""Text commands."""

from gitpreview.commands.base import Command
from gitpreview.commands.gitcat import GitCatCommand
from gitpreview.commands.registry import CommandRegistry

__all__ = ["Command", "CommandRegistry", "GitCatCommand"]
