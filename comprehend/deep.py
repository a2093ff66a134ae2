from __future__ import annotations
import logging
from .types import *
from .classify import (
    is_array_iterable, is_plain_object, is_comprehension_iterable,
    is_fully_supported_comprehension_iterable
)
from .comprehensions import each, array, object
from .normalize import return_first_arg, value_function

logger = logging.getLogger(__name__)


def _always(*args: Any) -> bool:
    return True


def normalize_deep_options(options: Union[WithFunction, Options, None]) -> DeepOptions:
    """accept a bare with-function or a {when, with} record"""
    if callable(options):
        return DeepOptions(_always, value_function(options))
    options = options if isinstance(options, dict) else {}
    with_fn = options.get('with') or return_first_arg
    when = options.get('when') or _always
    return DeepOptions(value_function(when), value_function(with_fn))


def _map(source: Any, options: DeepOptions) -> Union[List[Any], Dict[Any, Any]]:
    if is_array_iterable(source): return array(source, options.as_options())
    if is_plain_object(source): return object(source, options.as_options())
    raise UnsupportedSourceType(type(source).__name__)


def _deep_each(source: Any, options: DeepOptions) -> None:
    # when has already been applied by each() by the time visit runs
    def visit(value, key):
        if is_comprehension_iterable(value):
            _deep_each(value, options)
        else:
            options.with_fn(value, key)

    each(source, {'when': options.when, 'with': visit})


def _deep_map(source: Any, options: DeepOptions) -> Union[List[Any], Dict[Any, Any]]:
    def visit(value, key):
        if is_fully_supported_comprehension_iterable(value):
            return _deep_map(value, options)
        if is_comprehension_iterable(value):
            logger.debug("deep_map treating %s at key %r as a leaf", type(value).__name__, key)
        return options.with_fn(value, key)

    return _map(source, DeepOptions(options.when, visit))


def map(source: Any, options: Union[WithFunction, Options, None] = None) -> Union[List[Any], Dict[Any, Any]]:
    """
    shallow map that keeps the container type: a sequential source yields a list,
    a dict yields a dict. nested containers are handed to with as-is.
    any other source raises UnsupportedSourceType.
    """
    return _map(source, normalize_deep_options(options))


def deep_each(source: Any, options: Union[WithFunction, Options, None] = None) -> None:
    """
    iterate source and every nested comprehension iterable inside it.

    with is called for each value that is not itself a comprehension iterable.
    when is checked on every value, container or leaf; a container that fails
    it is skipped without being entered.
    """
    _deep_each(source, normalize_deep_options(options))


def deep_map(source: Any, options: Union[WithFunction, Options, None] = None) -> Union[List[Any], Dict[Any, Any]]:
    """
    map source into a new structure of the same shape, recursing through nested
    lists and dicts only. every reachable leaf goes through with exactly once;
    map-like and set-like values are leaves too and go through with unchanged.
    values failing when are dropped, containers included.
    """
    return _deep_map(source, normalize_deep_options(options))
