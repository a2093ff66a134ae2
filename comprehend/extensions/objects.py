from __future__ import annotations
from ..types import *
from ..comprehensions import object, reduce, find
from .flatten import compact_flatten


def object_has_keys(obj: Optional[Mapping[Any, Any]]) -> bool:
    # find without when stops on the first element, whatever it is
    return find(obj, lambda: True) is True


def object_key_count(obj: Optional[Mapping[Any, Any]]) -> int:
    return reduce(obj, 0, lambda count: count + 1)


def object_without(obj: Optional[Dict[Any, Any]], *keys: Any) -> Dict[Any, Any]:
    """
    copy of obj without the given keys (nested lists of keys are flattened).
    returns obj itself when none of the keys are present.
    """
    if obj is None: return {}
    to_remove = compact_flatten(list(keys))
    if find(to_remove, {'when': lambda key: key in obj, 'with': lambda: True}) is None: return obj
    return object(obj, {'when': lambda v, k: k not in to_remove})
