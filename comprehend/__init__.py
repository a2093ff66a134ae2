r"""
'   ___ ___  _ __ ___  _ __  _ __ ___| |__   ___ _ __   __| |
'  / __/ _ \| '_ ` _ \| '_ \| '__/ _ \ '_ \ / _ \ '_ \ / _` |
' | (_| (_) | | | | | | |_) | | |  __/ | | |  __/ | | | (_| |
'  \___\___/|_| |_| |_| .__/|_|  \___|_| |_|\___|_| |_|\__,_|
'                     |_|
"""

# expose the shallow comprehensions
from .comprehensions import each, array, object, reduce, find

# expose the deep comprehensions
from .deep import deep_each, deep_map, map

# expose the engine pieces
from .iterate import iterate
from .normalize import normalize_call, normalize_body
from .classify import (
    classify,
    is_comprehension_iterable,
    is_fully_supported_comprehension_iterable,
)

# expose the container helpers
from .extensions.merge import merge, merge_into, deep_merge, deep_merge_into
from .extensions.flatten import compact, flatten, compact_flatten
from .extensions.strip import strip_nulls, deep_strip_nulls
from .extensions.objects import object_without, object_has_keys, object_key_count
from .extensions.lists import insert_into_array, array_with_inserted_at, array_with, peek

# expose supporting types
from .types import (
    ContainerKind,
    CanonicalCall,
    UnsupportedSourceType,
)

# define what `import *` does
__all__ = [
    "each",
    "array",
    "object",
    "reduce",
    "find",
    "deep_each",
    "deep_map",
    "map",
    "iterate",
    "normalize_call",
    "normalize_body",
    "classify",
    "is_comprehension_iterable",
    "is_fully_supported_comprehension_iterable",
    "merge",
    "merge_into",
    "deep_merge",
    "deep_merge_into",
    "compact",
    "flatten",
    "compact_flatten",
    "strip_nulls",
    "deep_strip_nulls",
    "object_without",
    "object_has_keys",
    "object_key_count",
    "insert_into_array",
    "array_with_inserted_at",
    "array_with",
    "peek",
    "ContainerKind",
    "CanonicalCall",
    "UnsupportedSourceType",
]
