from __future__ import annotations
from ..types import *
from ..comprehensions import array


def insert_into_array(seq: Optional[List[T]], index: int, item: T) -> List[T]:
    """insert item at index, mutating seq. negative indexes count from the end, -1 appends."""
    if seq is None: return [item]
    if index < 0: index = len(seq) + index + 1
    seq.insert(index, item)
    return seq


def array_with_inserted_at(seq: Optional[List[T]], index: int, item: T) -> List[T]:
    """like insert_into_array but on a copy"""
    return insert_into_array(array(seq), index, item)


def array_with(seq: Optional[Iterable[T]], *items: T) -> List[T]:
    """new list of seq's items followed by items"""
    return array(items, array(seq), {})


def peek(seq: Optional[Sequence[T]]) -> Optional[T]:
    """last item, or None for an empty or absent sequence"""
    return seq[-1] if seq else None
