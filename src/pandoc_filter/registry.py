#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandoc_filter/registry.py
"""Resolution of filter actions from string specifications.

The command line driver names its actions as strings. Three forms are
accepted:

- ``package.module:attr`` - import ``package.module`` and take ``attr``
  (dotted attribute paths such as ``module:Filters.caps`` work too)
- ``path/to/file.py:attr`` - load a Python file by path and take ``attr``
- ``name`` - an entry point registered by an installed package under the
  ``pandoc_filter.actions`` group, e.g. in its ``pyproject.toml``::

      [project.entry-points."pandoc_filter.actions"]
      smallcaps = "mypkg.filters:smallcaps"

"""

from __future__ import annotations

import importlib
import importlib.metadata
import importlib.util
import inspect
import logging
from pathlib import Path
from typing import Any, Callable

from pandoc_filter.constants import ACTION_ENTRY_POINT_GROUP
from pandoc_filter.exceptions import ActionLoadError

logger = logging.getLogger(__name__)


def _load_module_from_path(path: Path, spec: str) -> Any:
    if not path.is_file():
        raise ActionLoadError(spec, f"Filter file does not exist: {path}")
    module_name = f"_pandoc_filter_action_{path.stem}"
    module_spec = importlib.util.spec_from_file_location(module_name, path)
    if module_spec is None or module_spec.loader is None:
        raise ActionLoadError(spec, f"Cannot load filter file: {path}")
    module = importlib.util.module_from_spec(module_spec)
    try:
        module_spec.loader.exec_module(module)
    except Exception as e:
        raise ActionLoadError(spec, f"Error executing filter file {path}: {e}", original_error=e) from e
    return module


def _resolve_attr(obj: Any, attr_path: str, spec: str) -> Any:
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ActionLoadError(spec, f"'{attr_path}' not found in {spec.rsplit(':', 1)[0]}", original_error=e) from e
    return obj


def _load_entry_point(name: str) -> Any:
    for ep in importlib.metadata.entry_points().select(group=ACTION_ENTRY_POINT_GROUP, name=name):
        try:
            return ep.load()
        except Exception as e:
            raise ActionLoadError(name, f"Failed to load entry point '{name}': {e}", original_error=e) from e
    raise ActionLoadError(name, f"No filter action named '{name}' in entry point group '{ACTION_ENTRY_POINT_GROUP}'")


def load_action(spec: str) -> Callable[..., Any]:
    """Resolve a filter action from its string specification.

    Parameters
    ----------
    spec : str
        ``module:attr``, ``file.py:attr``, or an entry point name

    Returns
    -------
    Callable
        The action

    Raises
    ------
    ActionLoadError
        If the module, file, attribute or entry point cannot be loaded, or
        the resolved object is not callable

    Examples
    --------
    >>> action = load_action("myfilters.caps:action")  # doctest: +SKIP

    """
    spec = spec.strip()
    if not spec:
        raise ActionLoadError(spec, "Empty filter action specification")

    if ":" in spec:
        target, attr_path = spec.rsplit(":", 1)
        if not target or not attr_path:
            raise ActionLoadError(spec, f"Malformed filter action specification: {spec!r}")
        if target.endswith(".py"):
            module = _load_module_from_path(Path(target), spec)
        else:
            try:
                module = importlib.import_module(target)
            except ImportError as e:
                raise ActionLoadError(spec, f"Cannot import module '{target}': {e}", original_error=e) from e
        action = _resolve_attr(module, attr_path, spec)
    else:
        action = _load_entry_point(spec)

    if not callable(action):
        raise ActionLoadError(spec, f"Filter action '{spec}' is not callable (got {type(action).__name__})")

    logger.debug(f"Loaded filter action '{spec}'")
    return action


def is_async_action(action: Callable[..., Any]) -> bool:
    """Return True if calling ``action`` produces an awaitable.

    Recognizes coroutine functions and objects whose ``__call__`` is one.
    """
    if inspect.iscoroutinefunction(action):
        return True
    call = getattr(action, "__call__", None)
    return call is not None and inspect.iscoroutinefunction(call)


__all__ = ["load_action", "is_async_action"]
