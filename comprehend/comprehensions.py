"""
the five shallow comprehensions: each, array, object, reduce, find.

every one accepts the same call shapes:

    op(source)
    op(source, with_fn)
    op(source, options)
    op(source, into, with_fn)
    op(source, into, options)

options is a dict with any of: with, when, stop_when, key / with_key
(object only) and the seed under into, inject or returning.
"""
from .types import *
from .iterate import iterate
from .normalize import (
    normalize_call, normalize_body, normalize_key_function, value_function, reducer_function
)


def _each(source: Any, with_fn: Callable[[Any, Any], Any], options: Mapping[str, Any]) -> None:
    iterate(source, normalize_body(with_fn, options))


def each(source: Any, a: Any = None, b: Any = None) -> Any:
    """
    iterate source for side effects.
    returns the into/inject/returning value untouched if one was given, otherwise None.
    """
    call = normalize_call(source, a, b)
    _each(source, value_function(call.with_fn), call.options)
    return call.into


def array(source: Any, a: Any = None, b: Any = None) -> List[Any]:
    """
    build a list from source, appending with_fn(value, key) for every element
    that passes the when/stop_when clauses. a supplied into list is appended to
    in place and returned.
    """
    call = normalize_call(source, a, b)
    into = [] if call.into is None else call.into
    with_fn = value_function(call.with_fn)

    def append(v, k):
        into.append(with_fn(v, k))

    _each(source, append, call.options)
    return into


def object(source: Any, a: Any = None, b: Any = None) -> Dict[Any, Any]:
    """
    build a dict from source: into[key(value, key)] = with_fn(value, key).

    without an explicit key/with_key, sequential sources use each value as its
    own key and every other kind keeps the source key. later keys overwrite
    earlier ones.
    """
    call = normalize_call(source, a, b)
    into = {} if call.into is None else call.into
    with_fn = value_function(call.with_fn)
    with_key = normalize_key_function(source, call)

    def assign(v, k):
        out_key = with_key(v, k)
        into[out_key] = with_fn(v, k)

    _each(source, assign, call.options)
    return into


def reduce(source: Any, a: Any = None, b: Any = None) -> Any:
    """
    fold source with with_fn(accumulator, value, key).

    without a seed the first element passing the clauses becomes the
    accumulator as-is and folding starts from the next one; an empty pass
    returns None. with a seed every passing element is folded into it.
    """
    call = normalize_call(source, a, b)
    with_fn = reducer_function(call.with_fn)
    accumulator = call.into
    first = accumulator is None

    def fold(v, k):
        nonlocal accumulator, first
        if first:
            first = False
            accumulator = v
        else:
            accumulator = with_fn(accumulator, v, k)

    _each(source, fold, call.options)
    return accumulator


def find(source: Any, a: Any = None, b: Any = None) -> Any:
    """
    return with_fn(value, key) for the first element where when(value, key) is true,
    or None when nothing matches.

    without a when clause the very first element is the match, whatever
    with_fn returns for it. with_fn runs at most once. stop_when is not used.
    """
    call = normalize_call(source, a, b)
    with_fn = value_function(call.with_fn)
    when = value_function(call.when)
    found = None

    if when:
        def body(v, k):
            nonlocal found
            if when(v, k):
                found = with_fn(v, k)
                return True
            return False
    else:
        def body(v, k):
            nonlocal found
            found = with_fn(v, k)
            return True

    iterate(source, body)
    return found
