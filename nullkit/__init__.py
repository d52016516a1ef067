from .helpers import (
    absent,
    is_absent,
    is_present,
    is_present_and_non_empty,
    value_or,
    when_present,
    when_absent,
    when_first_present,
    or_empty_string,
    or_zero,
    or_false,
)
from .chain import ChainAfterPresent, ChainAfterAbsent
from .errors import InvalidArgument
from .logger import ConsoleLogger, configure, get_logger
from .config import Settings
