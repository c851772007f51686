from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, List, Mapping, MutableMapping, Optional

EntryTransform = Callable[[Any, Hashable], Any]
EntryVisitor = Callable[[Any, Hashable], None]


def _entry(value: Any, key: Hashable) -> Dict[Hashable, Any]:
    return {key: value}


def _noop(value: Any, key: Hashable) -> None:
    return None


def map_entries(
    source: Mapping[Hashable, Any],
    transform: EntryTransform = _entry,
    destination: Optional[MutableMapping[Hashable, Any]] = None,
) -> MutableMapping[Hashable, Any]:
    """Build a mapping from the entries ``transform`` returns for each entry of ``source``.

    ``transform(value, key)`` returns a mapping (or iterable of pairs), usually
    a single ``{new_key: new_value}``. Results are merged into ``destination``
    with ``update`` semantics, so later keys overwrite earlier ones.
    """
    out = {} if destination is None else destination
    for key, value in list(source.items()):
        out.update(transform(value, key))
    return out


def for_each_entry(source: Mapping[Hashable, Any], visitor: EntryVisitor = _noop) -> None:
    for key, value in list(source.items()):
        visitor(value, key)


def entries_to_list(source: Mapping[Hashable, Any], transform: EntryTransform = _entry) -> List[Any]:
    """Collect ``transform(value, key)`` for every entry, in key order."""
    return [transform(value, key) for key, value in list(source.items())]
