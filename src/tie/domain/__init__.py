from tie.domain.errors import (
    FeedbackCategoryMismatchError,
    FeedbackDetailsError,
    InvalidFeedbackCategoryError,
    MessageIndexError,
)
from tie.domain.feedback_category import FEEDBACK_CATEGORIES, FeedbackCategory
from tie.domain.feedback_details import (
    FEEDBACK_DETAILS_VARIANTS,
    FeedbackDetails,
    IncorrectOutputFeedbackDetails,
    KnownBugFeedbackDetails,
    LanguageErrorFeedbackDetails,
    MemoryLimitErrorFeedbackDetails,
    PerformanceFeedbackDetails,
    RuntimeErrorFeedbackDetails,
    ServerErrorFeedbackDetails,
    SpecificTestFeedbackDetails,
    StackExceededErrorFeedbackDetails,
    SuccessFeedbackDetails,
    SuiteLevelFeedbackDetails,
    SyntaxErrorFeedbackDetails,
    TimeLimitErrorFeedbackDetails,
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
    resolve_feedback_category,
)
from tie.domain.test_case import TestCase
