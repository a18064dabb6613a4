#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for tag-dispatched actions."""
import pytest

from pandoc_filter import AsyncTagActions, Emph, Image, Para, Space, Str, TagActions, walk, walk_async
from pandoc_filter.exceptions import ValidationError


@pytest.mark.unit
class TestTagActions:
    """Test the synchronous registry."""

    def test_dispatches_by_tag(self) -> None:
        """Test only registered kinds reach their handlers."""
        actions = TagActions()
        actions.register("Str", lambda e, f, m: Str(e["c"].upper()))
        actions.register("Space", lambda e, f, m: [])

        result = walk([Para([Str("a"), Space(), Emph([Str("b")])])], actions, "", {})

        assert result == [Para([Str("A"), Emph([Str("B")])])]

    def test_unregistered_tag_is_identity(self) -> None:
        """Test elements without a handler are kept."""
        assert TagActions()(Str("x"), "", {}) is None

    def test_decorator_registers_several_tags(self) -> None:
        """Test on() registers one handler for each tag."""
        actions = TagActions()

        @actions.on("Image", "Emph")
        def drop(elem, fmt, meta):
            return []

        assert drop(Str("x"), "", {}) == []
        assert set(actions.tags) == {"Image", "Emph"}
        result = walk([Para([Image(["", [], []], [], ["a.png", ""]), Emph([]), Str("k")])], actions, "", {})
        assert result == [Para([Str("k")])]

    def test_priority_and_first_result_wins(self) -> None:
        """Test lower priority runs first and the first non-None result is used."""
        actions = TagActions()
        calls = []
        actions.register("Str", lambda e, f, m: calls.append("late") or Str("late"), priority=200)
        actions.register("Str", lambda e, f, m: calls.append("pass"), priority=50)
        actions.register("Str", lambda e, f, m: calls.append("early") or Str("early"), priority=100)

        assert actions(Str("x"), "", {}) == Str("early")
        assert calls == ["pass", "early"]

    def test_handler_receives_context(self) -> None:
        """Test handlers get format and meta."""
        actions = TagActions()
        received = []
        actions.register("Str", lambda e, f, m: received.append((f, m)))
        meta = {"a": {"t": "MetaBool", "c": False}}

        walk([Str("x")], actions, "rst", meta)

        assert received == [("rst", meta)]

    def test_unregister(self) -> None:
        """Test handlers can be removed."""
        actions = TagActions()

        def handler(e, f, m):
            return []

        actions.register("Str", handler)

        assert actions.unregister("Str", handler) is True
        assert actions.unregister("Str", handler) is False
        assert actions.unregister("Para", handler) is False
        assert actions.handlers_for("Str") == []

    def test_rejects_non_callable(self) -> None:
        """Test registering a non-callable raises ValidationError."""
        with pytest.raises(ValidationError):
            TagActions().register("Str", "not callable")

    def test_rejects_coroutine_handler(self) -> None:
        """Test coroutine handlers must go to AsyncTagActions."""

        async def handler(e, f, m):
            return None

        with pytest.raises(ValidationError, match="AsyncTagActions"):
            TagActions().register("Str", handler)

    def test_handler_errors_propagate(self) -> None:
        """Test exceptions from handlers are not swallowed."""
        actions = TagActions()

        @actions.on("Str")
        def fail(elem, fmt, meta):
            raise ZeroDivisionError

        with pytest.raises(ZeroDivisionError):
            walk([Str("x")], actions, "", {})


@pytest.mark.unit
class TestAsyncTagActions:
    """Test the asynchronous registry."""

    @pytest.mark.asyncio
    async def test_mixes_sync_and_async_handlers(self) -> None:
        """Test coroutine and plain handlers are both awaited as needed."""
        actions = AsyncTagActions()

        @actions.on("Str")
        async def caps(elem, fmt, meta):
            return Str(elem["c"].upper())

        actions.register("Space", lambda e, f, m: [])

        result = await walk_async([Para([Str("a"), Space(), Str("b")])], actions, "", {})

        assert result == [Para([Str("A"), Str("B")])]

    @pytest.mark.asyncio
    async def test_falls_through_none(self) -> None:
        """Test a None result moves on to the next handler."""
        actions = AsyncTagActions()

        async def skip(elem, fmt, meta):
            return None

        actions.register("Str", skip)
        actions.register("Str", lambda e, f, m: Str("second"))

        assert await actions(Str("x"), "", {}) == Str("second")
        assert await actions(Emph([]), "", {}) is None
