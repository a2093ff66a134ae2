from enum import Enum
from types import MappingProxyType
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Mapping, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[..., Any]
WithFunction = Callable[..., Any]
KeyFunction = Callable[..., Any]
Reducer = Callable[..., Any]
# returns true to stop the traversal
Body = Callable[[Any, Any], bool]

Options = Dict[str, Any]
WithOrOptions = Union[WithFunction, Options, None]

# option names accepted in an options record
INTO_ALIASES = ('into', 'inject', 'returning')
KEY_ALIASES = ('key', 'with_key')

EMPTY_OPTIONS: Mapping[str, Any] = MappingProxyType({})


class ContainerKind(Enum):
    """the shape a source is traversed as"""
    ABSENT = 'absent'
    SEQUENTIAL = 'sequential'
    KEYED = 'keyed'
    MAP_LIKE = 'map-like'
    SET_LIKE = 'set-like'
    EXTERNAL_ITERABLE = 'external-iterable'
    UNSUPPORTED = 'unsupported'


class UnsupportedSourceType(TypeError):
    """raised when a non-absent source is none of the recognised container kinds"""

    def __init__(self, type_name: str):
        super().__init__(f"unsupported source type: {type_name}")
        self.type_name = type_name


class CanonicalCall:
    """the single normalized form of every (source), (source, a), (source, a, b) call"""

    __slots__ = ('source', 'into', 'with_fn', 'options')

    def __init__(self, source: Any, into: Any, with_fn: WithFunction, options: Mapping[str, Any]):
        self.source = source
        self.into = into
        self.with_fn = with_fn
        self.options = options

    @property
    def when(self) -> Optional[Predicate]: return self.options.get('when')

    @property
    def stop_when(self) -> Optional[Predicate]: return self.options.get('stop_when')

    @property
    def with_key(self) -> Optional[KeyFunction]:
        for alias in KEY_ALIASES:
            if self.options.get(alias) is not None:
                return self.options[alias]
        return None

    def __repr__(self) -> str:
        return f"CanonicalCall(source={type(self.source).__name__}, into={self.into!r}, options={sorted(self.options)})"


class DeepOptions:
    """normalized {when, with} pair for the deep traversal layer"""

    __slots__ = ('when', 'with_fn')

    def __init__(self, when: Predicate, with_fn: WithFunction):
        self.when = when
        self.with_fn = with_fn

    def as_options(self) -> Options:
        return {'when': self.when, 'with': self.with_fn}

    def __repr__(self) -> str:
        return f"DeepOptions(when={self.when!r}, with_fn={self.with_fn!r})"
