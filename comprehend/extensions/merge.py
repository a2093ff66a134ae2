"""
shallow and deep merging of dicts.

later sources win. a source of None is skipped. a value of None is kept, so
it can erase an earlier value; only a missing key leaves the earlier value alone.
"""
from __future__ import annotations
from ..types import *
from ..classify import is_plain_object
from ..comprehensions import each, array, object


class _Missing:
    """marks a key absent from one side of a deep merge"""

    def __repr__(self) -> str:
        return '<missing>'


MISSING = _Missing()


def merge_into(into: Dict[Any, Any], *sources: Optional[Mapping[Any, Any]]) -> Dict[Any, Any]:
    """merge sources into `into` in order, mutating and returning it"""
    for source in sources:
        if source is None: continue
        object(source, into, {})
    return into


def merge(*sources: Optional[Mapping[Any, Any]]) -> Dict[Any, Any]:
    """shallow merge into a new dict. whole nested values are replaced, not merged."""
    return merge_into({}, *sources)


def _deep_merge_items(a: Any, b: Any) -> Any:
    if b is MISSING: return a
    if isinstance(a, list) and isinstance(b, list): return _deep_merge_lists(a, b)
    if is_plain_object(a) and is_plain_object(b): return _deep_merge_objects(a, b)
    return b


def _deep_merge_lists(a: List[Any], b: List[Any]) -> List[Any]:
    # the result is as long as b; items pair up by index
    return array(b, lambda item, index: _deep_merge_items(a[index] if index < len(a) else MISSING, item))


def _deep_merge_objects(a: Optional[Dict[Any, Any]], b: Optional[Dict[Any, Any]],
                        into: Optional[Dict[Any, Any]] = None) -> Dict[Any, Any]:
    a = a or {}
    b = b or {}
    result = {} if into is None else into
    keys = array(b, array(a, [], {'with': lambda v, k: k}), {'with': lambda v, k: k, 'when': lambda v, k: k not in a})

    def assign(key):
        result[key] = _deep_merge_items(a.get(key, MISSING), b.get(key, MISSING))

    each(keys, assign)
    return result


def deep_merge_into(into: Dict[Any, Any], *sources: Optional[Dict[Any, Any]]) -> Dict[Any, Any]:
    """
    deep merge sources into `into` in order, mutating and returning it.
    dicts merge key by key, lists merge index by index, anything else is replaced.
    """
    for source in sources:
        _deep_merge_objects(into, source, into)
    return into


def deep_merge(*sources: Optional[Dict[Any, Any]]) -> Dict[Any, Any]:
    """deep merge into a new dict"""
    return deep_merge_into({}, *sources)
