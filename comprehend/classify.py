"""
container classification.

every traversal resolves the shape of its source here, once per call. the
predicates are ordered: a value is tested as sequential before keyed, keyed
before map-like, and so on, and the first match decides its kind.
"""
from collections.abc import Iterable as _Iterable, Mapping as _Mapping, Set as _Set

import numpy as np
import pandas as pd
from .types import *

_TEXT_TYPES = (str, bytes, bytearray)
_PANDAS_TYPES = (pd.Series, pd.DataFrame)


def is_array_iterable(source: Any) -> bool:
    """index-addressable with a length: lists, tuples, ranges, 1-d+ ndarrays"""
    if source is None or isinstance(source, _TEXT_TYPES + (type,)):
        return False
    if isinstance(source, (_Mapping, _Set) + _PANDAS_TYPES):
        return False
    if isinstance(source, np.ndarray):
        return source.ndim > 0
    source_type = type(source)
    return hasattr(source_type, '__len__') and hasattr(source_type, '__getitem__')


def is_plain_object(source: Any) -> bool:
    return isinstance(source, dict)


def is_map_like(source: Any) -> bool:
    """ordered key/value stores other than plain dicts, including pandas objects"""
    if isinstance(source, _PANDAS_TYPES):
        return True
    return isinstance(source, _Mapping) and not isinstance(source, dict)


def is_set_like(source: Any) -> bool:
    return isinstance(source, _Set)


def is_of_iterable(source: Any) -> bool:
    """anything exposing the iterator protocol that isn't text or a 0-d array"""
    if isinstance(source, _TEXT_TYPES):
        return False
    if isinstance(source, np.ndarray) and source.ndim == 0:
        return False
    return isinstance(source, _Iterable)


def classify(source: Any) -> ContainerKind:
    """assign a source exactly one ContainerKind"""
    if source is None: return ContainerKind.ABSENT
    if is_array_iterable(source): return ContainerKind.SEQUENTIAL
    if is_plain_object(source): return ContainerKind.KEYED
    if is_map_like(source): return ContainerKind.MAP_LIKE
    if is_set_like(source): return ContainerKind.SET_LIKE
    if is_of_iterable(source): return ContainerKind.EXTERNAL_ITERABLE
    return ContainerKind.UNSUPPORTED


def is_comprehension_iterable(source: Any) -> bool:
    """
    true for anything the comprehensions can iterate over.
    text is never a comprehension iterable.
    """
    return classify(source) not in (ContainerKind.ABSENT, ContainerKind.UNSUPPORTED)


def is_fully_supported_comprehension_iterable(source: Any) -> bool:
    """
    true only for containers the comprehensions can both iterate and build:
    sequential and keyed sources. map-like and set-like are iterable but not rebuilt.
    """
    return classify(source) in (ContainerKind.SEQUENTIAL, ContainerKind.KEYED)
