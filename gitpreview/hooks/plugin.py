"""Plugin wiring the preview pipeline into message hooks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from gitpreview.hooks.events import MessageEvents, MessageObject
from gitpreview.preview.pipeline import PreviewPipeline

if TYPE_CHECKING:
    from gitpreview.config.schema import Config


class GitPreviewPlugin:
    """Sends a preview of a git file when a message links to it."""

    name = "GitPreview"
    description = "Sends a preview of a Git file when you send a link to it"

    def __init__(
        self,
        events: MessageEvents,
        config: "Config | None" = None,
        pipeline: PreviewPipeline | None = None,
    ):
        self.events = events
        self.pipeline = pipeline or PreviewPipeline(config)
        self._started = False

    @property
    def config(self) -> "Config":
        return self.pipeline.config

    def start(self) -> None:
        if self._started:
            return
        if self.config.preview.send_file:
            logger.info("sendFile is reserved; previews are sent inline")
        self.events.add_pre_send_listener(self._on_pre_send)
        self.events.add_pre_edit_listener(self._on_pre_edit)
        self._started = True
        logger.debug("{} started", self.name)

    def stop(self) -> None:
        if not self._started:
            return
        self.events.remove_pre_send_listener(self._on_pre_send)
        self.events.remove_pre_edit_listener(self._on_pre_edit)
        self._started = False
        logger.debug("{} stopped", self.name)

    async def code_preview(self, msg: MessageObject) -> None:
        """Rewrite the message body in place."""
        msg.content = await self.pipeline.process(msg.content)

    async def _on_pre_send(self, _channel_id: str, msg: MessageObject) -> None:
        await self.code_preview(msg)

    async def _on_pre_edit(self, _channel_id: str, _message_id: str, msg: MessageObject) -> None:
        await self.code_preview(msg)
