from enum import Enum
from typing import Dict


class FeedbackCategory(str, Enum):
    """
    The reason a submission failed, or that it succeeded.

    TIME_LIMIT_ERROR: The code took too long to run
    STACK_EXCEEDED_ERROR: The code exceeded the maximum recursion depth
    MEMORY_LIMIT_ERROR: The code used more memory than allowed
    SERVER_ERROR: The code could not be evaluated because of a server problem
    RUNTIME_ERROR: The code raised an error while running
    SYNTAX_ERROR: The code could not be parsed
    KNOWN_BUG_FAILURE: The output matches a known buggy output
    SUITE_LEVEL_FAILURE: A pattern of failures across a test suite was detected
    INCORRECT_OUTPUT_FAILURE: A test case produced the wrong output
    PERFORMANCE_TEST_FAILURE: The code is correct but does not scale as expected
    SUCCESSFUL: All tests passed
    """

    TIME_LIMIT_ERROR = "TIME_LIMIT_ERROR"
    STACK_EXCEEDED_ERROR = "STACK_EXCEEDED_ERROR"
    MEMORY_LIMIT_ERROR = "MEMORY_LIMIT_ERROR"
    SERVER_ERROR = "SERVER_ERROR"
    RUNTIME_ERROR = "RUNTIME_ERROR"
    SYNTAX_ERROR = "SYNTAX_ERROR"
    KNOWN_BUG_FAILURE = "KNOWN_BUG_FAILURE"
    SUITE_LEVEL_FAILURE = "SUITE_LEVEL_FAILURE"
    INCORRECT_OUTPUT_FAILURE = "INCORRECT_OUTPUT_FAILURE"
    PERFORMANCE_TEST_FAILURE = "PERFORMANCE_TEST_FAILURE"
    SUCCESSFUL = "SUCCESSFUL"


# name -> category, for callers that look categories up by identifier
FEEDBACK_CATEGORIES: Dict[str, FeedbackCategory] = {
    category.name: category for category in FeedbackCategory
}
