"""typeverify.

Runtime type predicates (is this an object, a string, a list, a number...) and
a few dict/list traversal helpers: entry mapping, recursive key deletion and
concurrent async mapping.
"""

from typeverify.core.deletion import (
    delete_empty_keys,
    delete_empty_keys_recursive,
    delete_matching_keys,
    delete_matching_keys_recursive,
)
from typeverify.core.logger import configure_logging, get_logger
from typeverify.core.objects import entries_to_list, for_each_entry, map_entries
from typeverify.core.predicates import (
    can_be_number,
    is_array,
    is_async_function,
    is_defined,
    is_empty,
    is_empty_array,
    is_empty_object,
    is_empty_string,
    is_function,
    is_null,
    is_number,
    is_object,
    is_regex,
    is_string,
)
from typeverify.core.sentinels import UNDEFINED, Undefined
from typeverify.core.sequences import map_async
from typeverify.models.settings import LibrarySettings

__version__ = "0.1.0"

__all__ = [
    "UNDEFINED",
    "Undefined",
    "LibrarySettings",
    "configure_logging",
    "get_logger",
    # predicates
    "is_defined",
    "is_object",
    "is_string",
    "is_function",
    "is_array",
    "is_number",
    "is_regex",
    "is_null",
    "is_async_function",
    "is_empty_object",
    "is_empty_string",
    "is_empty_array",
    "is_empty",
    "can_be_number",
    # traversal
    "map_entries",
    "for_each_entry",
    "entries_to_list",
    "delete_matching_keys",
    "delete_matching_keys_recursive",
    "delete_empty_keys",
    "delete_empty_keys_recursive",
    "map_async",
]
