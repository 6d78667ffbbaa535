"""Definition Cache

Memoizes compiled definitions so a schema declared once is built once,
and so a recursive schema can refer to itself while it is being built.

Keys are either an explicit, caller-assigned schema name or the builder
callable itself. Inline lambdas are new objects on every evaluation of the
enclosing code, so they only hit the cache when given an explicit key;
declare reused or recursive schemas as named functions.

Usage:
    def tree_schema(node: ValidateDefinition) -> None:
        node.properties().validate("label", lambda label: label.value()
            .match(bool).description("must not be empty"))
        node.properties().validate("children", lambda children: children.elements(
            cached_definition(tree_schema)))

    validate_cached(root_node, tree_schema)
"""
from __future__ import annotations

import threading
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any

from validscope.config import get_settings
from validscope.definition import Builder, ValidateDefinition
from validscope.errors import ErrorCode, definition_error
from validscope.logging import get_logger

log = get_logger("validscope.cache")


@dataclass(frozen=True, slots=True)
class CacheStats:
    """Snapshot of cache activity."""
    size: int
    hits: int
    misses: int
    compilations: int


class ValidatorCache:
    """Thread-safe memo of compiled definitions.

    Compilation runs under a re-entrant lock. The definition is registered
    as in-progress before its builder runs, so a recursive lookup from the
    same thread receives that same instance, while other threads wait for
    it to be published. Published entries are read without taking the
    compilation lock; hits are counted under a separate short lock.
    """

    def __init__(self, max_entries: int | None = None):
        self.max_entries = get_settings().MAX_CACHED_DEFINITIONS if max_entries is None else max_entries
        self._definitions: dict[Hashable, ValidateDefinition] = {}
        self._building: dict[Hashable, ValidateDefinition] = {}
        self._lock = threading.RLock()
        self._stats_lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._compilations = 0
        self._full_reported = False

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._definitions

    @property
    def stats(self) -> CacheStats:
        with self._lock, self._stats_lock:
            return CacheStats(
                size=len(self._definitions),
                hits=self._hits,
                misses=self._misses,
                compilations=self._compilations,
            )

    def get_or_build(self, builder: Builder, key: Hashable | None = None) -> ValidateDefinition:
        """Return the definition cached for `key` (or `builder`), building it on first use."""
        if isinstance(builder, ValidateDefinition):
            return builder
        cache_key = builder if key is None else key
        _ensure_hashable(cache_key)

        definition = self._definitions.get(cache_key)
        if definition is not None:
            self._count_hit()
            return definition

        with self._lock:
            definition = self._definitions.get(cache_key) or self._building.get(cache_key)
            if definition is not None:
                self._count_hit()
                return definition

            self._misses += 1
            definition = ValidateDefinition(name=_key_name(cache_key))
            self._building[cache_key] = definition
            try:
                definition.apply_builder(builder).seal()
            finally:
                del self._building[cache_key]
            self._compilations += 1

            if self._has_room():
                self._definitions[cache_key] = definition
                log.debug("definition_compiled", key=_key_name(cache_key), cache_size=len(self._definitions))
            elif not self._full_reported:
                self._full_reported = True
                log.warning("definition_cache_full", key=_key_name(cache_key), max_entries=self.max_entries)
            return definition

    def clear(self) -> None:
        """Drop every published definition and reset statistics."""
        with self._lock:
            dropped = len(self._definitions)
            self._definitions.clear()
            with self._stats_lock:
                self._hits = 0
            self._misses = self._compilations = 0
            self._full_reported = False
        log.debug("definition_cache_cleared", dropped=dropped)

    def _count_hit(self) -> None:
        with self._stats_lock:
            self._hits += 1

    def _has_room(self) -> bool:
        return self.max_entries <= 0 or len(self._definitions) < self.max_entries


def _ensure_hashable(key: Any) -> None:
    try:
        hash(key)
    except TypeError as exc:
        raise definition_error(
            f"Cache key of type {type(key).__name__} is not hashable",
            code=ErrorCode.E2101_INVALID_BUILDER,
            key_type=type(key).__name__,
        ) from exc


def _key_name(key: Any) -> str:
    if isinstance(key, str):
        return key
    return getattr(key, "__qualname__", None) or getattr(key, "__name__", None) or repr(key)


default_cache = ValidatorCache()
