from __future__ import annotations
from typing import Any, Optional
from .logger import get_logger


class InvalidArgument(ValueError):
    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message); self.argument = argument


def check_not_none(o: Any, message: str, argument: Optional[str] = None) -> None:
    # get_logger() is looked up per call so configure() takes effect immediately
    if o is None:
        get_logger().warn(message, argument=argument)
        raise InvalidArgument(message, argument)
