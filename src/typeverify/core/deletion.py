"""
Key deletion helpers for dict records.

By default the record passed in is mutated and returned (the caller keeps
ownership). Pass ``inplace=False`` to prune a deep copy instead and leave the
caller's record untouched.
"""

from __future__ import annotations

import copy
import inspect
from typing import Any, Callable, Hashable, MutableMapping, Optional

from typeverify.core.logger import get_logger
from typeverify.core.predicates import is_empty, is_object

logger = get_logger(__name__)

DeletePredicate = Callable[..., bool]
KeyedTest = Callable[[Any, Hashable], bool]


def _accepts_key(predicate: DeletePredicate) -> bool:
    try:
        params = inspect.signature(predicate).parameters.values()
    except (TypeError, ValueError):
        return False
    positional = 0
    for p in params:
        if p.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            positional += 1
    return positional >= 2


def _as_keyed(predicate: DeletePredicate) -> KeyedTest:
    """Normalize a ``(value)`` or ``(value, key)`` predicate to ``(value, key)``."""
    if _accepts_key(predicate):
        return predicate
    return lambda value, key: predicate(value)


def _prepare(record: MutableMapping, inplace: bool) -> MutableMapping:
    return record if inplace else copy.deepcopy(record)


def _delete_matching(record: MutableMapping, test: KeyedTest) -> MutableMapping:
    for key in list(record):
        if test(record[key], key):
            logger.debug("Deleting key %r", key)
            del record[key]
    return record


def _delete_matching_recursive(record: MutableMapping, test: KeyedTest) -> MutableMapping:
    for key in list(record):
        value = record[key]
        if is_object(value):
            _delete_matching_recursive(value, test)
        elif test(value, key):
            logger.debug("Deleting key %r", key)
            del record[key]
            continue

        # Second test sees the pruned value, so a nested dict emptied above
        # is removed when the predicate matches empty records.
        if test(record[key], key):
            logger.debug("Deleting key %r after pruning", key)
            del record[key]
    return record


def delete_matching_keys(
    record: MutableMapping, predicate: DeletePredicate, *, inplace: bool = True
) -> MutableMapping:
    """Delete every top-level entry whose value matches ``predicate``.

    Nested dicts are not descended into.
    """
    return _delete_matching(_prepare(record, inplace), _as_keyed(predicate))


def delete_matching_keys_recursive(
    record: MutableMapping, predicate: DeletePredicate, *, inplace: bool = True
) -> MutableMapping:
    """Delete matching entries depth first, through nested dicts.

    Each nested dict is pruned before the predicate is tested against it, so
    an emptiness predicate also removes dicts that only became empty during
    the pass. Lists are treated as leaf values.
    """
    return _delete_matching_recursive(_prepare(record, inplace), _as_keyed(predicate))


def _empty_or(predicate: Optional[DeletePredicate]) -> KeyedTest:
    extra = _as_keyed(predicate) if predicate is not None else None

    def test(value: Any, key: Hashable) -> bool:
        return is_empty(value) or (extra is not None and bool(extra(value, key)))

    return test


def delete_empty_keys(
    record: MutableMapping, predicate: Optional[DeletePredicate] = None, *, inplace: bool = True
) -> MutableMapping:
    """Delete entries that are empty (None, undefined, "", [] or {}) or match ``predicate``."""
    return _delete_matching(_prepare(record, inplace), _empty_or(predicate))


def delete_empty_keys_recursive(
    record: MutableMapping, predicate: Optional[DeletePredicate] = None, *, inplace: bool = True
) -> MutableMapping:
    return _delete_matching_recursive(_prepare(record, inplace), _empty_or(predicate))
