#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandoc_filter/hooks.py
"""Tag-dispatched filter actions.

Most filters only care about a handful of element kinds. ``TagActions``
collects one or more handlers per tag and is itself a filter action, so the
usual ``if elem["t"] == ...`` ladder can be written as registrations:

    >>> from pandoc_filter import Str, to_json_filter
    >>> from pandoc_filter.hooks import TagActions
    >>> actions = TagActions()
    >>>
    >>> @actions.on("Str")
    ... def caps(elem, fmt, meta):
    ...     return Str(elem["c"].upper())
    >>>
    >>> @actions.on("Image", "Link")
    ... def drop(elem, fmt, meta):
    ...     return []
    >>>
    >>> to_json_filter(actions)  # doctest: +SKIP

Handlers for the same tag run in priority order (lower first, then
registration order); the first one returning something other than None
decides the result. Elements with no handler are left unchanged.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable

from pandoc_filter.ast.nodes import ActionResult, Element, PandocMetaMap
from pandoc_filter.constants import TAG_KEY
from pandoc_filter.exceptions import ValidationError

logger = logging.getLogger(__name__)

Handler = Callable[[Element, str, PandocMetaMap], Any]


class TagActions:
    """Registry of per-tag handlers usable as a synchronous filter action.

    Handlers are called as ``handler(element, format, meta)`` and return
    what any action returns: None, an element, or a list to splice.
    Exceptions raised by a handler propagate and abort the walk.

    Notes
    -----
    Instances are NOT thread-safe while handlers are being registered.

    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._handlers: dict[str, list[tuple[int, Handler]]] = {}

    def register(self, tag: str, handler: Handler, priority: int = 100) -> None:
        """Register a handler for elements tagged ``tag``.

        Parameters
        ----------
        tag : str
            Element kind, e.g. ``"Header"``
        handler : callable
            ``(element, format, meta) -> ActionResult``
        priority : int, default = 100
            Execution priority (lower runs first)

        Raises
        ------
        ValidationError
            If ``handler`` is not callable

        """
        if not callable(handler):
            raise ValidationError(
                f"Handler for '{tag}' must be callable, got {type(handler).__name__}",
                parameter_name="handler",
                parameter_value=handler,
            )
        self._check_handler(tag, handler)
        handlers = self._handlers.setdefault(tag, [])
        handlers.append((priority, handler))
        handlers.sort(key=lambda entry: entry[0])
        logger.debug(f"Registered handler for '{tag}' with priority {priority}")

    def unregister(self, tag: str, handler: Handler) -> bool:
        """Remove a handler; return True if it was registered."""
        if tag not in self._handlers:
            return False
        initial_len = len(self._handlers[tag])
        self._handlers[tag] = [(p, h) for p, h in self._handlers[tag] if h != handler]
        return len(self._handlers[tag]) < initial_len

    def on(self, *tags: str, priority: int = 100) -> Callable[[Handler], Handler]:
        """Register the decorated function for each of ``tags``."""

        def decorator(handler: Handler) -> Handler:
            for tag in tags:
                self.register(tag, handler, priority=priority)
            return handler

        return decorator

    def handlers_for(self, tag: str) -> list[Handler]:
        """Return the handlers registered for ``tag``, in execution order."""
        return [h for _, h in self._handlers.get(tag, [])]

    @property
    def tags(self) -> list[str]:
        """Tags that have at least one handler."""
        return [tag for tag, handlers in self._handlers.items() if handlers]

    def _check_handler(self, tag: str, handler: Handler) -> None:
        if inspect.iscoroutinefunction(handler):
            raise ValidationError(
                f"Handler for '{tag}' is a coroutine function; register it on AsyncTagActions",
                parameter_name="handler",
                parameter_value=handler,
            )

    def __call__(self, elem: Element, format: str, meta: PandocMetaMap) -> ActionResult:
        for handler in self.handlers_for(elem[TAG_KEY]):
            result = handler(elem, format, meta)
            if result is not None:
                return result
        return None


class AsyncTagActions(TagActions):
    """Registry of per-tag handlers usable as an asynchronous filter action.

    Handlers may be coroutine functions or plain callables. They are awaited
    one at a time.
    """

    def _check_handler(self, tag: str, handler: Handler) -> None:
        pass

    async def __call__(self, elem: Element, format: str, meta: PandocMetaMap) -> ActionResult:  # type: ignore[override]
        for handler in self.handlers_for(elem[TAG_KEY]):
            result = handler(elem, format, meta)
            if inspect.isawaitable(result):
                result = await result
            if result is not None:
                return result
        return None


__all__ = ["TagActions", "AsyncTagActions", "Handler"]
