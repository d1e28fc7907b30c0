# topmark:header:start
#
#   project      : SharpShape
#   file         : registry.py
#   file_relpath : src/sharpshape/naming/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Name allocation registry.

A [`NameRegistry`][sharpshape.naming.registry.NameRegistry] owns a set of
[`NameScope`][sharpshape.naming.registry.NameScope] objects. Each scope maps
semantic keys (a class reference, a union, a JSON property key) to the unique
identifier chosen for them, and tracks the identifiers already taken in that
scope.

Lifecycle:
    The registry is populated in a single planning pass and then frozen with
    [`NameRegistry.freeze`][sharpshape.naming.registry.NameRegistry.freeze].
    Rendering only ever reads from it; allocating after the freeze raises
    `RegistryFrozenError`, looking up a key that was never allocated raises
    `UnregisteredNameError`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from sharpshape.config.logging import get_logger
from sharpshape.constants import COLLISION_PREFIX
from sharpshape.core.errors import RegistryFrozenError, UnregisteredNameError

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Mapping

    from sharpshape.config.logging import SharpShapeLogger

logger: SharpShapeLogger = get_logger(__name__)

RetryFn = Callable[[str], str]


def prefix_other(name: str) -> str:
    """Default retry transform: prefix ``name`` with ``"Other"``."""
    return COLLISION_PREFIX + name


def dedupe(candidate: str, taken: Iterable[str], retry: RetryFn = prefix_other) -> str:
    """Apply ``retry`` to ``candidate`` until it is absent from ``taken``.

    Args:
        candidate (str): Preferred name.
        taken (Iterable[str]): Names that must not be returned.
        retry (RetryFn): Deterministic transform producing the next candidate. It must
            eventually produce a name outside ``taken``; prefixing does, since ``taken``
            is finite.

    Returns:
        str: The first candidate not in ``taken``.
    """
    taken_set = set(taken)
    while candidate in taken_set:
        candidate = retry(candidate)
    return candidate


class NameScope:
    """One namespace of unique identifiers.

    Attributes:
        label (str): Human-readable scope label used in log and error messages.
    """

    def __init__(self, label: str, forbidden: Iterable[str] = ()) -> None:
        self.label = label
        self._taken: set[str] = set(forbidden)
        self._names: dict[Hashable, str] = {}
        self._frozen = False

    def __repr__(self) -> str:
        return f"NameScope({self.label!r}, names={len(self._names)})"

    def __contains__(self, key: Hashable) -> bool:
        return key in self._names

    @property
    def names(self) -> Mapping[Hashable, str]:
        """Allocated names by key (read-only view)."""
        return dict(self._names)

    def is_taken(self, name: str) -> bool:
        """Return True if ``name`` is already used or forbidden in this scope."""
        return name in self._taken

    def allocate(
        self,
        key: Hashable,
        preferred: str,
        *,
        forbidden: Iterable[str] = (),
        retry: RetryFn = prefix_other,
    ) -> str:
        """Allocate a unique name for ``key``, or return the one it already has.

        Args:
            key (Hashable): Semantic key the name is allocated for.
            preferred (str): Preferred identifier (already styled).
            forbidden (Iterable[str]): Extra names to avoid for this allocation only.
            retry (RetryFn): Transform applied on collision.

        Returns:
            str: The allocated identifier.

        Raises:
            RegistryFrozenError: If the scope has been frozen.
        """
        if key in self._names:
            return self._names[key]
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot allocate '{preferred}' in frozen scope '{self.label}'"
            )
        name = dedupe(preferred, self._taken | set(forbidden), retry)
        if name != preferred:
            logger.trace("Scope '%s': '%s' taken, using '%s'", self.label, preferred, name)
        self._taken.add(name)
        self._names[key] = name
        return name

    def lookup(self, key: Hashable) -> str:
        """Return the name allocated for ``key``.

        Raises:
            UnregisteredNameError: If no name was allocated for ``key``.
        """
        try:
            return self._names[key]
        except KeyError:
            raise UnregisteredNameError(
                f"No name registered for {key!r} in scope '{self.label}'"
            ) from None

    def freeze(self) -> None:
        """Reject any further allocation in this scope."""
        self._frozen = True


class NameRegistry:
    """Collection of name scopes populated once, then frozen.

    Args:
        forbidden (Iterable[str]): Global forbidden identifiers. They seed the ``types``
            scope so generated top-level types never collide with helper types.

    Attributes:
        types (NameScope): Scope shared by classes and unions.
    """

    TYPES_SCOPE = "types"

    def __init__(self, forbidden: Iterable[str] = ()) -> None:
        self.global_forbidden: frozenset[str] = frozenset(forbidden)
        self.types = NameScope(self.TYPES_SCOPE, self.global_forbidden)
        self._scopes: dict[Hashable, NameScope] = {self.TYPES_SCOPE: self.types}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        """Whether the registry has been frozen."""
        return self._frozen

    def scope(
        self,
        scope_key: Hashable,
        *,
        label: str = "",
        forbidden: Iterable[str] = (),
    ) -> NameScope:
        """Return the scope for ``scope_key``, creating it on first use.

        ``forbidden`` only applies when the scope is created.

        Raises:
            RegistryFrozenError: If the scope does not exist and the registry is frozen.
        """
        existing = self._scopes.get(scope_key)
        if existing is not None:
            return existing
        if self._frozen:
            raise RegistryFrozenError(f"Cannot create scope {scope_key!r} in a frozen registry")
        created = NameScope(label or str(scope_key), forbidden)
        self._scopes[scope_key] = created
        return created

    def allocate(
        self,
        preferred: str,
        scope_key: Hashable,
        key: Hashable,
        *,
        forbidden: Iterable[str] = (),
        retry: RetryFn = prefix_other,
    ) -> str:
        """Allocate a unique name for ``key`` inside the scope ``scope_key``."""
        return self.scope(scope_key).allocate(key, preferred, forbidden=forbidden, retry=retry)

    def lookup(self, scope_key: Hashable, key: Hashable) -> str:
        """Return the name allocated for ``key`` inside the scope ``scope_key``.

        Raises:
            UnregisteredNameError: If the scope or the key is unknown.
        """
        scope = self._scopes.get(scope_key)
        if scope is None:
            raise UnregisteredNameError(f"No name scope registered for {scope_key!r}")
        return scope.lookup(key)

    def freeze(self) -> None:
        """Freeze the registry and every scope it owns."""
        for scope in self._scopes.values():
            scope.freeze()
        self._frozen = True
        logger.debug("Name registry frozen with %d scope(s)", len(self._scopes))
