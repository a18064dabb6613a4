#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for resolving filter actions from specifications."""
import sys
import textwrap
from unittest.mock import MagicMock, patch

import pytest

from pandoc_filter.exceptions import ActionLoadError, ValidationError
from pandoc_filter.hooks import AsyncTagActions, TagActions
from pandoc_filter.registry import is_async_action, load_action


@pytest.fixture
def filter_file(tmp_path):
    """Write a small filter module to a temporary file."""
    path = tmp_path / "myfilter.py"
    path.write_text(
        textwrap.dedent(
            """
            from pandoc_filter import Str

            def caps(elem, fmt, meta):
                if elem["t"] == "Str":
                    return Str(elem["c"].upper())

            class Filters:
                @staticmethod
                def drop(elem, fmt, meta):
                    return []

            NOT_CALLABLE = 3
            """
        )
    )
    return path


@pytest.mark.unit
class TestLoadAction:
    """Test load_action."""

    def test_load_from_file(self, filter_file) -> None:
        """Test file.py:attr loads a function from a path."""
        action = load_action(f"{filter_file}:caps")

        assert action({"t": "Str", "c": "a"}, "", {}) == {"t": "Str", "c": "A"}

    def test_dotted_attribute_path(self, filter_file) -> None:
        """Test nested attributes are resolved."""
        action = load_action(f"{filter_file}:Filters.drop")

        assert action({"t": "Str"}, "", {}) == []

    def test_load_from_module(self, filter_file, monkeypatch) -> None:
        """Test module:attr imports an importable module."""
        monkeypatch.syspath_prepend(str(filter_file.parent))
        monkeypatch.delitem(sys.modules, "myfilter", raising=False)

        action = load_action("myfilter:caps")

        assert action.__name__ == "caps"

    def test_load_stdlib_callable(self) -> None:
        """Test any importable callable is accepted."""
        import json

        assert load_action("json:dumps") is json.dumps

    @pytest.mark.parametrize("spec", ["", "   ", ":caps", "module:"])
    def test_malformed_specs(self, spec) -> None:
        """Test empty and half-empty specifications are rejected."""
        with pytest.raises(ActionLoadError):
            load_action(spec)

    def test_missing_module(self) -> None:
        """Test an unimportable module raises ActionLoadError."""
        with pytest.raises(ActionLoadError) as exc_info:
            load_action("no_such_module_for_pandoc_filter:caps")

        assert isinstance(exc_info.value.original_error, ImportError)
        assert exc_info.value.action_spec == "no_such_module_for_pandoc_filter:caps"

    def test_missing_file(self, tmp_path) -> None:
        """Test a nonexistent filter file raises ActionLoadError."""
        with pytest.raises(ActionLoadError, match="does not exist"):
            load_action(f"{tmp_path / 'absent.py'}:caps")

    def test_missing_attribute(self, filter_file) -> None:
        """Test an unknown attribute raises ActionLoadError."""
        with pytest.raises(ActionLoadError, match="nope"):
            load_action(f"{filter_file}:nope")

    def test_not_callable(self, filter_file) -> None:
        """Test a non-callable target raises ActionLoadError."""
        with pytest.raises(ActionLoadError, match="not callable"):
            load_action(f"{filter_file}:NOT_CALLABLE")

    def test_broken_file(self, tmp_path) -> None:
        """Test errors while executing the file are wrapped."""
        path = tmp_path / "broken.py"
        path.write_text("raise RuntimeError('import time failure')\n")

        with pytest.raises(ActionLoadError) as exc_info:
            load_action(f"{path}:anything")

        assert isinstance(exc_info.value.original_error, RuntimeError)

    def test_is_validation_error(self) -> None:
        """Test load failures belong to the validation family."""
        with pytest.raises(ValidationError):
            load_action("no_such_module_for_pandoc_filter:x")


@pytest.mark.unit
class TestEntryPoints:
    """Test named actions from entry points."""

    def test_entry_point_lookup(self) -> None:
        """Test a bare name is loaded from the entry point group."""
        ep = MagicMock()
        ep.load.return_value = len
        eps = MagicMock()
        eps.select.return_value = [ep]

        with patch("importlib.metadata.entry_points", return_value=eps):
            assert load_action("smallcaps") is len

        eps.select.assert_called_once_with(group="pandoc_filter.actions", name="smallcaps")

    def test_unknown_entry_point(self) -> None:
        """Test an unregistered name raises ActionLoadError."""
        eps = MagicMock()
        eps.select.return_value = []

        with patch("importlib.metadata.entry_points", return_value=eps):
            with pytest.raises(ActionLoadError, match="No filter action named"):
                load_action("unknown")

    def test_failing_entry_point(self) -> None:
        """Test errors raised while loading the entry point are wrapped."""
        ep = MagicMock()
        ep.load.side_effect = ImportError("missing dependency")
        eps = MagicMock()
        eps.select.return_value = [ep]

        with patch("importlib.metadata.entry_points", return_value=eps):
            with pytest.raises(ActionLoadError, match="missing dependency"):
                load_action("broken")


@pytest.mark.unit
class TestIsAsyncAction:
    """Test async detection."""

    def test_coroutine_function(self) -> None:
        """Test coroutine functions are async."""

        async def action(e, f, m):
            return None

        assert is_async_action(action) is True

    def test_plain_function(self) -> None:
        """Test plain functions are not async."""
        assert is_async_action(lambda e, f, m: None) is False

    def test_callable_objects(self) -> None:
        """Test objects are judged by their __call__."""
        assert is_async_action(AsyncTagActions()) is True
        assert is_async_action(TagActions()) is False
