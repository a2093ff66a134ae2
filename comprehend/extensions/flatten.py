from __future__ import annotations
from ..types import *
from ..comprehensions import each, array, find


def _is_nested(item: Any) -> bool:
    return isinstance(item, (list, tuple))


def _is_present(item: Any) -> bool:
    return item is not None


def _is_nested_or_absent(item: Any) -> bool:
    return item is None or _is_nested(item)


def _found(*args: Any) -> bool:
    return True


def compact(seq: Optional[Sequence[Any]]) -> List[Any]:
    """
    remove None values from a sequence.
    returns seq itself when there is nothing to remove.
    """
    if seq is None: return []
    if not find(seq, {'when': lambda v: v is None, 'with': _found}): return seq
    return array(seq, {'when': _is_present})


def flatten(seq: Optional[Sequence[Any]], into: Optional[List[Any]] = None) -> List[Any]:
    """
    recursively flatten nested lists and tuples.
    returns seq itself when it is already flat.
    """
    if seq is None: return []
    if into is None:
        if not find(seq, {'when': _is_nested, 'with': _found}): return seq
        into = []

    def add(item):
        if _is_nested(item): flatten(item, into)
        else: into.append(item)

    each(seq, add)
    return into


def compact_flatten(seq: Any, into: Optional[List[Any]] = None) -> List[Any]:
    """
    flatten and drop None in one pass. a non-sequence value becomes a one-item list.
    returns seq itself when it is already flat and has no None values.
    """
    if seq is None: return []
    if not _is_nested(seq): return [seq]
    if into is None:
        if not find(seq, {'when': _is_nested_or_absent, 'with': _found}): return seq
        into = []

    def add(item):
        if _is_nested(item): compact_flatten(item, into)
        else: into.append(item)

    each(seq, {'when': _is_present, 'with': add})
    return into
