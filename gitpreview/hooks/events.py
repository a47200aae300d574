"""Message interception hooks exposed to plugins."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from loguru import logger


@dataclass
class MessageObject:
    """Outgoing or edited message whose body listeners may rewrite."""

    content: str
    channel_id: str = ""
    message_id: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


PreSendListener = Callable[[str, MessageObject], Awaitable[None]]
PreEditListener = Callable[[str, str, MessageObject], Awaitable[None]]


class MessageEvents:
    """Registry of listeners run before a message is sent or edited."""

    def __init__(self):
        self._pre_send: list[PreSendListener] = []
        self._pre_edit: list[PreEditListener] = []

    def add_pre_send_listener(self, listener: PreSendListener) -> PreSendListener:
        self._pre_send.append(listener)
        return listener

    def remove_pre_send_listener(self, listener: PreSendListener) -> bool:
        if listener in self._pre_send:
            self._pre_send.remove(listener)
            return True
        return False

    def add_pre_edit_listener(self, listener: PreEditListener) -> PreEditListener:
        self._pre_edit.append(listener)
        return listener

    def remove_pre_edit_listener(self, listener: PreEditListener) -> bool:
        if listener in self._pre_edit:
            self._pre_edit.remove(listener)
            return True
        return False

    async def dispatch_pre_send(self, channel_id: str, msg: MessageObject) -> MessageObject:
        """Run pre-send listeners in registration order."""
        for listener in list(self._pre_send):
            try:
                await listener(channel_id, msg)
            except Exception as e:
                logger.exception("Pre-send listener failed: {}", e)
        return msg

    async def dispatch_pre_edit(
        self, channel_id: str, message_id: str, msg: MessageObject
    ) -> MessageObject:
        """Run pre-edit listeners in registration order."""
        for listener in list(self._pre_edit):
            try:
                await listener(channel_id, message_id, msg)
            except Exception as e:
                logger.exception("Pre-edit listener failed: {}", e)
        return msg
