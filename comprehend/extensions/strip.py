from __future__ import annotations
from ..types import *
from ..classify import is_array_iterable, is_plain_object, is_fully_supported_comprehension_iterable
from ..comprehensions import array, object
from ..deep import deep_map


def _is_present(value: Any) -> bool:
    return value is not None


def strip_nulls(data: Any) -> Any:
    """
    shallowly drop None from a dict's values or a list's items.
    nested containers are left as they are; non-containers are returned unchanged.
    """
    if is_plain_object(data): return object(data, {'when': _is_present})
    if isinstance(data, (list, tuple)): return array(data, {'when': _is_present})
    return data


def deep_strip_nulls(data: Any) -> Any:
    """
    recursively drop None from nested dicts and lists.
    None itself stays None; any other leaf is returned unchanged.
    """
    if not is_fully_supported_comprehension_iterable(data): return data
    # ndarrays, ranges and other sequences are leaves at the top level
    if is_array_iterable(data) and not isinstance(data, (list, tuple)): return data
    return deep_map(data, {'when': _is_present})
