"""Common utilities shared across input, quiz and output processing."""

from leapquiz.common.utils import (
    parse_leading_int,
    unique_preserve_order,
    _load_env_file,
    ensure_dir,
)
from leapquiz.common.logging import (
    log_debug,
    log_info,
    log_warning,
    log_error,
)
from leapquiz.common.errors import (
    QuizError,
    SourceUnavailable,
    MalformedInput,
    InvalidRangeInput,
    EmptySelection,
    UnknownPartition,
    PersistenceFailure,
)

__all__ = [
    # utils
    "parse_leading_int",
    "unique_preserve_order",
    "_load_env_file",
    "ensure_dir",
    # logging
    "log_debug",
    "log_info",
    "log_warning",
    "log_error",
    # errors
    "QuizError",
    "SourceUnavailable",
    "MalformedInput",
    "InvalidRangeInput",
    "EmptySelection",
    "UnknownPartition",
    "PersistenceFailure",
]
