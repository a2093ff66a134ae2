import logging

from .types import *
from .classify import classify

logger = logging.getLogger(__name__)


def iterate(source: Any, body: Body) -> None:
    """
    drive a single forward pass over source, calling body(value, key) per element.
    stops as soon as body returns true. returns nothing; results are side effects of body.
    """
    kind = classify(source)

    if kind is ContainerKind.ABSENT:
        return

    if kind is ContainerKind.SEQUENTIAL:
        # length is read once; appends during the pass are not visited
        for key in range(len(source)):
            if body(source[key], key): break

    elif kind in (ContainerKind.KEYED, ContainerKind.MAP_LIKE):
        for key, value in source.items():
            if body(value, key): break

    elif kind in (ContainerKind.SET_LIKE, ContainerKind.EXTERNAL_ITERABLE):
        # break leaves a lazy source unconsumed past the stop point
        for value in source:
            if body(value, value): break

    else:
        type_name = type(source).__name__
        logger.debug("rejecting source of type %s", type_name)
        raise UnsupportedSourceType(type_name)
