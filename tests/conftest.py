# topmark:header:start
#
#   project      : SharpShape
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the SharpShape test suite.

This file sets up global fixtures, typed wrappers around pytest decorators and
small builders for IR graphs and configs shared by the test modules.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `sharpshape.config.MutableConfig` (mutable), then
      `freeze()` into a `sharpshape.config.Config` for rendering.
    - Do **not** mutate a frozen `Config`. If you need to tweak one,
      call `Config.thaw()`, edit the returned `MutableConfig`,
      then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from sharpshape.config import MutableConfig
from sharpshape.config import logging as sharpshape_logging
from sharpshape.constants import LOG_LEVEL_ENV_VAR
from sharpshape.ir.graph import ClassDefinition, Graph
from sharpshape.ir.types import ClassType

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sharpshape.config import Config
    from sharpshape.ir.types import IRType

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_sharpshape_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure SharpShape's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    SHARPSHAPE_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    sharpshape_logging.setup_logging(level=sharpshape_logging.TRACE_LEVEL)


def make_class(
    ref: str,
    properties: Mapping[str, IRType] | None = None,
    *,
    names: tuple[str, ...] | None = None,
) -> ClassDefinition:
    """Return a class definition whose candidate names default to ``(ref,)``.

    Args:
        ref (str): Class reference.
        properties (Mapping[str, IRType] | None): Property types by raw JSON key.
        names (tuple[str, ...] | None): Candidate display names.

    Returns:
        ClassDefinition: The class definition.
    """
    return ClassDefinition(
        ref=ref,
        names=names if names is not None else (ref,),
        properties=dict(properties or {}),
    )


def make_graph(*classes: ClassDefinition, top_level: IRType | None = None) -> Graph:
    """Return a graph of ``classes``; the top level defaults to the first class.

    Args:
        *classes (ClassDefinition): Class definitions in declaration order.
        top_level (IRType | None): Root type of the document.

    Returns:
        Graph: The IR graph.
    """
    if top_level is None:
        top_level = ClassType(classes[0].ref)
    return Graph(classes={cls.ref: cls for cls in classes}, top_level=top_level)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Keyword overrides applied to the mutable builder before freezing.

    Returns:
        Config: An immutable configuration snapshot for use in tests.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()
