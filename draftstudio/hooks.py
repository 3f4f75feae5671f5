"""Named notification hooks."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)

HookHandler = Callable[..., Awaitable[None] | None]

DOCUMENT_UPDATED = "studio:draft:document:updated"
MEDIA_UPDATED = "studio:draft:media:updated"
PREVIEW_RERENDER = "studio:preview:rerender"
PUBLISH_COMPLETED = "studio:publish:completed"


class Hooks:
    """Registry of named async notification hooks.

    Handlers receive keyword metadata and are awaited one after another in
    registration order. Plain functions are accepted too.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[HookHandler]] = {}

    def hook(self, name: str, handler: HookHandler) -> Callable[[], None]:
        """Register a handler.

        Returns:
            A callable that unregisters the handler.
        """
        self._handlers.setdefault(name, []).append(handler)

        def unregister() -> None:
            handlers = self._handlers.get(name, [])
            if handler in handlers:
                handlers.remove(handler)

        return unregister

    async def call_hook(self, name: str, **meta: Any) -> None:
        """Invoke every handler registered for name."""
        handlers = list(self._handlers.get(name, []))
        logger.debug(f"Calling hook {name} ({len(handlers)} handlers)")
        for handler in handlers:
            result = handler(**meta)
            if inspect.isawaitable(result):
                await result

    def handler_count(self, name: str) -> int:
        return len(self._handlers.get(name, []))
