"""Chain wrappers returned by the branching helpers.

The first branch runs eagerly inside the helper; the wrapper only carries the
value so the complementary branch can be attached afterwards.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from .errors import check_not_none
from .logger import get_logger

T = TypeVar("T")


@dataclass(frozen=True)
class _Held(Generic[T]):
    value: Optional[T]

    def is_present(self) -> bool: return self.value is not None
    def is_absent(self) -> bool: return self.value is None


@dataclass(frozen=True)
class ChainAfterPresent(_Held[T]):
    """Held value after the present branch ran; attach the absent branch."""

    def when_absent(self, on_absent: Callable[[], object]) -> None:
        check_not_none(on_absent, "The callback can not be None", "on_absent")
        if self.is_absent():
            get_logger().debug("chained absent branch fired")
            on_absent()


@dataclass(frozen=True)
class ChainAfterAbsent(_Held[T]):
    """Held value after the absent branch ran; attach the present branch."""

    def when_present(self, on_present: Callable[[T], object]) -> None:
        check_not_none(on_present, "The callback can not be None", "on_present")
        if self.is_present():
            get_logger().debug("chained present branch fired")
            on_present(self.value)  # type: ignore[arg-type]
