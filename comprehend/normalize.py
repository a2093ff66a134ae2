"""
call-shape and per-element normalization.

normalize_call collapses the (source), (source, a) and (source, a, b) call
shapes into one CanonicalCall. it never raises: malformed combinations degrade
to "no transform" or "no options".

normalize_body turns a transform plus the when/stop_when clauses into the
single body function the traversal adapter drives.
"""
import inspect

from .types import *
from .classify import is_array_iterable

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def return_first_arg(first: Any = None, *rest: Any) -> Any:
    return first


def return_second_arg(first: Any = None, second: Any = None, *rest: Any) -> Any:
    return second


def fit_arity(fn: Callable, max_args: int, fallback: int) -> Callable:
    """
    adapt fn so it can always be called with max_args positional arguments.
    fn only receives as many leading arguments as its signature accepts;
    fallback is used when the signature can't be inspected.
    """
    if isinstance(fn, type):
        count = fallback
    else:
        try:
            params = inspect.signature(fn).parameters.values()
        except (ValueError, TypeError):
            count = fallback
        else:
            count = 0
            for param in params:
                if param.kind is inspect.Parameter.VAR_POSITIONAL:
                    count = max_args
                    break
                if param.kind in _POSITIONAL:
                    count += 1

    if count >= max_args: return fn
    if count <= 0: return lambda *args: fn()
    return lambda *args: fn(*args[:count])


def value_function(fn: Optional[Callable]) -> Optional[Callable]:
    """fit a (value, key) function; absent stays absent"""
    return None if fn is None else fit_arity(fn, 2, 1)


def reducer_function(fn: Callable) -> Callable:
    """fit an (accumulator, value, key) function"""
    return fit_arity(fn, 3, 2)


def _first_present(*values: Any) -> Any:
    for value in values:
        if value is not None: return value
    return None


def is_options_record(value: Any) -> bool:
    return isinstance(value, dict)


def normalize_call(source: Any, a: Any = None, b: Any = None) -> CanonicalCall:
    """
    canonical form of a comprehension call.

    with b present, a is the into seed and b is "the rest"; otherwise a is the rest.
    the rest may be an options record, a transform function, or absent.
    """
    if b is not None:
        # (source, reducer, seed) reads as (source, seed, reducer)
        if callable(a) and not callable(b) and not is_options_record(b):
            a, b = b, a
        into, rest = a, b
    else:
        into, rest = None, a

    if is_options_record(rest):
        into = _first_present(into, *(rest.get(alias) for alias in INTO_ALIASES))
        with_fn = rest.get('with')
        return CanonicalCall(source, into, return_first_arg if with_fn is None else with_fn, rest)

    if callable(rest):
        return CanonicalCall(source, into, rest, EMPTY_OPTIONS)

    return CanonicalCall(source, into, return_first_arg, EMPTY_OPTIONS)


def normalize_body(with_fn: Callable[[Any, Any], Any], options: Mapping[str, Any]) -> Body:
    """
    combine with_fn with the when/stop_when clauses.

    stop_when is always checked first and the element it fires on never reaches
    with_fn. when only decides whether with_fn is called; it never stops iteration.
    """
    when = value_function(options.get('when'))
    stop_when = value_function(options.get('stop_when'))

    if when and stop_when:
        def body(v, k):
            if stop_when(v, k): return True
            if when(v, k): with_fn(v, k)
            return False
        return body

    if when:
        def body(v, k):
            if when(v, k): with_fn(v, k)
            return False
        return body

    if stop_when:
        def body(v, k):
            if stop_when(v, k): return True
            with_fn(v, k)
            return False
        return body

    def body(v, k):
        with_fn(v, k)
        return False
    return body


def normalize_key_function(source: Any, call: CanonicalCall) -> Callable[[Any, Any], Any]:
    """
    explicit key/with_key if given, else sequential sources key by value
    and every other kind keeps its own key.
    """
    with_key = value_function(call.with_key)
    if with_key is not None: return with_key
    return return_first_arg if is_array_iterable(source) else return_second_arg
