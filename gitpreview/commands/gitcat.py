"""The gitcat command: reply with a preview of one git file link."""

from typing import Any

from gitpreview.commands.base import Command
from gitpreview.preview.pipeline import PreviewPipeline


class GitCatCommand(Command):
    """Send lines of code from a git link as a code block."""

    def __init__(self, pipeline: PreviewPipeline):
        self._pipeline = pipeline

    @property
    def name(self) -> str:
        return "gitcat"

    @property
    def description(self) -> str:
        return "Send lines of code from a git link as a code block."

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "message": {
                    "type": "string",
                    "minLength": 1,
                    "description": "Link to a file on a git forge, optionally with #L<n>-L<m>",
                },
            },
            "required": ["message"],
        }

    async def execute(self, message: str, **kwargs: Any) -> str:
        preview = await self._pipeline.preview_url(message)
        return preview.text
