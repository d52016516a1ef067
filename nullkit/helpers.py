from __future__ import annotations
from collections.abc import Sequence, Sized
from typing import Callable, Collection, Optional, TypeVar

from .chain import ChainAfterAbsent, ChainAfterPresent
from .errors import check_not_none
from .logger import get_logger

T = TypeVar("T")


def absent() -> None:
    return None


def is_absent(value: object) -> bool:
    return value is None


def is_present(value: object) -> bool:
    return not is_absent(value)


def is_present_and_non_empty(collection: Optional[Sized]) -> bool:
    return is_present(collection) and len(collection) > 0  # type: ignore[arg-type]


def value_or(input: Optional[T], fallback: T) -> T:
    """Return ``input`` unless it is ``None``, else ``fallback``.

    ``fallback`` must itself be present, otherwise ``InvalidArgument`` is raised
    regardless of ``input``.
    """
    check_not_none(fallback, "The default value can not be None", "fallback")
    if is_absent(input):
        return fallback
    return input  # type: ignore[return-value]


def or_empty_string(input: Optional[str]) -> str:
    return value_or(input, "")


def or_zero(input: Optional[int]) -> int:
    return value_or(input, 0)


def or_false(input: Optional[bool]) -> bool:
    return value_or(input, False)


def when_present(value: Optional[T], on_present: Callable[[T], object]) -> ChainAfterPresent[T]:
    """Call ``on_present(value)`` now if ``value`` is present.

    The returned wrapper lets the caller attach an absent branch:

        when_present(user, greet).when_absent(ask_login)
    """
    check_not_none(on_present, "The callback can not be None", "on_present")
    if is_present(value):
        get_logger().debug("present branch fired")
        on_present(value)  # type: ignore[arg-type]
    return ChainAfterPresent(value)


def when_absent(value: Optional[T], on_absent: Callable[[], object]) -> ChainAfterAbsent[T]:
    """Call ``on_absent()`` now if ``value`` is absent; chain the present branch."""
    check_not_none(on_absent, "The callback can not be None", "on_absent")
    if is_absent(value):
        get_logger().debug("absent branch fired")
        on_absent()
    return ChainAfterAbsent(value)


def _first(collection: Collection[T]) -> Optional[T]:
    if isinstance(collection, Sequence):
        return collection[0]
    return next(iter(collection), None)


def when_first_present(collection: Optional[Collection[T]], on_present: Callable[[T], object]) -> ChainAfterPresent[T]:
    """Call ``on_present`` with the first element when there is a present one.

    The wrapper holds that first element, or ``None`` when the collection is
    absent, empty, or starts with ``None``.
    """
    check_not_none(on_present, "The on_present callback can not be None", "on_present")
    first: Optional[T] = absent()
    if is_present_and_non_empty(collection):  # type: ignore[arg-type]
        first = _first(collection)  # type: ignore[arg-type]
        if is_present(first):
            get_logger().debug("first element present")
            on_present(first)  # type: ignore[arg-type]
    return ChainAfterPresent(first)
