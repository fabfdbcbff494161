"""
tie: feedback details for coding exercises.
"""

from importlib.metadata import PackageNotFoundError, version  # pragma: no cover

from tie.common.logging_config import get_logger, setup_logging
from tie.config import Settings, settings
from tie.domain import (
    FEEDBACK_CATEGORIES,
    FeedbackCategory,
    FeedbackCategoryMismatchError,
    FeedbackDetails,
    FeedbackDetailsError,
    InvalidFeedbackCategoryError,
    MessageIndexError,
    TestCase,
    create_buggy_output_feedback_details,
    create_incorrect_output_feedback_details,
    create_memory_limit_error_feedback_details,
    create_performance_feedback_details,
    create_runtime_error_feedback_details,
    create_server_error_feedback_details,
    create_stack_exceeded_feedback_details,
    create_success_feedback_details,
    create_suite_level_feedback_details,
    create_syntax_error_feedback_details,
    create_time_limit_error_feedback_details,
    parse_feedback_details,
)
from tie.util.enum_util import describe_feedback_categories

try:
    dist_name = "tie-feedback"
    __version__ = version(dist_name)
except PackageNotFoundError:  # pragma: no cover
    __version__ = "unknown"
finally:
    del version, PackageNotFoundError

__all__ = [
    # Domain
    "FeedbackCategory",
    "FEEDBACK_CATEGORIES",
    "FeedbackDetails",
    "TestCase",
    "parse_feedback_details",
    "describe_feedback_categories",
    # Factories
    "create_time_limit_error_feedback_details",
    "create_stack_exceeded_feedback_details",
    "create_memory_limit_error_feedback_details",
    "create_server_error_feedback_details",
    "create_runtime_error_feedback_details",
    "create_syntax_error_feedback_details",
    "create_buggy_output_feedback_details",
    "create_suite_level_feedback_details",
    "create_incorrect_output_feedback_details",
    "create_performance_feedback_details",
    "create_success_feedback_details",
    # Errors
    "FeedbackDetailsError",
    "InvalidFeedbackCategoryError",
    "FeedbackCategoryMismatchError",
    "MessageIndexError",
    # Configuration
    "Settings",
    "settings",
    "setup_logging",
    "get_logger",
]
