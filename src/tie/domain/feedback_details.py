"""
Feedback shown to a student after their code submission has been evaluated.

Each feedback category has its own frozen model carrying only the payload
that category needs. The accessors live on the shared base class; any accessor
a category does not override raises FeedbackCategoryMismatchError.
"""

import copy
import json
from abc import ABC
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple, Type, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    computed_field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from tie.common.logging_config import get_logger
from tie.config import settings
from tie.domain.errors import (
    FeedbackCategoryMismatchError,
    InvalidFeedbackCategoryError,
    MessageIndexError,
)
from tie.domain.feedback_category import FEEDBACK_CATEGORIES, FeedbackCategory
from tie.domain.test_case import TestCase
from tie.util.json_util import ensure_json_shaped

logger = get_logger(__name__)


def resolve_feedback_category(feedback_category: Any) -> FeedbackCategory:
    """Return the FeedbackCategory for an enum member, name or value, or raise."""
    if isinstance(feedback_category, FeedbackCategory):
        return feedback_category
    if isinstance(feedback_category, str) and feedback_category in FEEDBACK_CATEGORIES:
        return FEEDBACK_CATEGORIES[feedback_category]
    logger.warning("Rejected unknown feedback category %r", feedback_category)
    raise InvalidFeedbackCategoryError(feedback_category)


class FeedbackDetails(BaseModel, ABC):
    """Base class for the feedback of every category."""

    FEEDBACK_CATEGORY: ClassVar[FeedbackCategory]

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    language_unfamiliarity_feedback_is_needed: bool = Field(
        False,
        description="Whether to prompt the student to consult language-specific references.",
    )

    @computed_field(alias="feedbackCategory")
    @property
    def feedback_category(self) -> FeedbackCategory:
        return self.FEEDBACK_CATEGORY

    @classmethod
    def create(
        cls,
        feedback_category: Union[FeedbackCategory, str],
        error_string: Optional[str] = None,
        language: Optional[str] = None,
        error_input: Any = None,
        language_unfamiliarity_feedback_is_needed: Optional[bool] = False,
        task_index: Optional[int] = None,
        specific_test_index: Optional[int] = None,
        test_messages: Optional[Sequence[str]] = None,
        message_index: Optional[int] = None,
        test_case: Optional[TestCase] = None,
        test_suite_id: Optional[str] = None,
        test_case_index: Optional[int] = None,
        observed_output: Any = None,
        expected_performance: Optional[str] = None,
    ) -> "FeedbackDetails":
        """
        Build feedback of the given category from any combination of fields.

        Fields that do not belong to the category are dropped.

        Raises:
            InvalidFeedbackCategoryError: if the category is not recognized.
        """
        category = resolve_feedback_category(feedback_category)
        variant = FEEDBACK_DETAILS_VARIANTS[category]
        candidates = {
            "error_string": error_string,
            "language": language,
            "error_input": error_input,
            "language_unfamiliarity_feedback_is_needed": bool(
                language_unfamiliarity_feedback_is_needed
            ),
            "task_index": task_index,
            "specific_test_index": specific_test_index,
            "test_messages": test_messages,
            "message_index": message_index,
            "test_case": test_case,
            "test_suite_id": test_suite_id,
            "test_case_index": test_case_index,
            "observed_output": observed_output,
            "expected_performance": expected_performance,
        }
        fields = {
            name: value
            for name, value in candidates.items()
            if name in variant.model_fields
        }
        logger.debug("Creating %s feedback details", category.value)
        return variant(**fields)

    def to_dict(self) -> Dict[str, Any]:
        """Dump to a JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)

    def __hash__(self) -> int:
        # payloads may hold lists and dicts; hash their JSON form instead
        return hash((type(self), json.dumps(self.to_dict(), sort_keys=True)))

    def _mismatch(self, message: str) -> FeedbackCategoryMismatchError:
        return FeedbackCategoryMismatchError(message, self.FEEDBACK_CATEGORY.value)

    def get_feedback_category(self) -> FeedbackCategory:
        return self.FEEDBACK_CATEGORY

    def get_error_string(self) -> Optional[str]:
        raise self._mismatch("Non-syntax or runtime errors have no error string.")

    def get_language(self) -> Optional[str]:
        raise self._mismatch("Non-syntax or runtime errors have no language property.")

    def get_error_input(self) -> Any:
        raise self._mismatch("Non-runtime errors have no error input.")

    def is_language_unfamiliarity_feedback_needed(self) -> bool:
        """Whether to append a prompt to consult language-specific references."""
        return self.language_unfamiliarity_feedback_is_needed

    def get_task_index(self) -> Optional[int]:
        raise self._mismatch("Non-specific errors have no task index.")

    def get_specific_test_index(self) -> Optional[int]:
        raise self._mismatch("Non-specific errors have no specific test index.")

    def get_message_index(self) -> Optional[int]:
        raise self._mismatch("Non-specific errors have no feedback message index.")

    def get_message(self) -> str:
        raise self._mismatch("Non-specific errors have no feedback message.")

    def get_test_case(self) -> Optional[TestCase]:
        raise self._mismatch("Non-incorrect-output errors have no test case.")

    def get_test_suite_id(self) -> Optional[str]:
        raise self._mismatch("Non-incorrect-output errors have no test suite ID.")

    def get_test_case_index(self) -> Optional[int]:
        raise self._mismatch("Non-incorrect-output errors have no test case index.")

    def get_observed_output(self) -> Any:
        raise self._mismatch("Non-incorrect-output errors have no observed output.")

    def get_expected_performance(self) -> Optional[str]:
        raise self._mismatch(
            "Non-performance-failure errors have no expected performance."
        )


class TimeLimitErrorFeedbackDetails(FeedbackDetails):
    FEEDBACK_CATEGORY: ClassVar[FeedbackCategory] = FeedbackCategory.TIME_LIMIT_ERROR


class StackExceededErrorFeedbackDetails(FeedbackDetails):
    FEEDBACK_CATEGORY: ClassVar[FeedbackCategory] = FeedbackCategory.STACK_EXCEEDED_ERROR


class MemoryLimitErrorFeedbackDetails(FeedbackDetails):
    FEEDBACK_CATEGORY: ClassVar[FeedbackCategory] = FeedbackCategory.MEMORY_LIMIT_ERROR


class ServerErrorFeedbackDetails(FeedbackDetails):
    FEEDBACK_CATEGORY: ClassVar[FeedbackCategory] = FeedbackCategory.SERVER_ERROR


class SuccessFeedbackDetails(FeedbackDetails):
    FEEDBACK_CATEGORY: ClassVar[FeedbackCategory] = FeedbackCategory.SUCCESSFUL


class LanguageErrorFeedbackDetails(FeedbackDetails, ABC):
    """Shared payload of syntax and runtime errors."""

    error_string: Optional[str] = Field(
        None,
        description="The error message.",
        examples=["SyntaxError: invalid syntax"],
    )
    language: Optional[str] = Field(
        None,
        description="The language that the student's code is written in.",
        examples=["python"],
    )

    @model_validator(mode="after")
    def _warn_on_unsupported_language(self):
        if self.language is not None and self.language not in settings.supported_languages:
            logger.warning(
                "Feedback for %s refers to unsupported language %r",
                self.FEEDBACK_CATEGORY.value,
                self.language,
            )
        return self

    def get_error_string(self) -> Optional[str]:
        return self.error_string

    def get_language(self) -> Optional[str]:
        return self.language


class SyntaxErrorFeedbackDetails(LanguageErrorFeedbackDetails):
    FEEDBACK_CATEGORY: ClassVar[FeedbackCategory] = FeedbackCategory.SYNTAX_ERROR


class RuntimeErrorFeedbackDetails(LanguageErrorFeedbackDetails):
    FEEDBACK_CATEGORY: ClassVar[FeedbackCategory] = FeedbackCategory.RUNTIME_ERROR

    error_input: JsonValue = Field(
        None, description="The specific input that caused the error."
    )

    @field_validator("error_input", mode="before")
    @classmethod
    def _copy_error_input(cls, v: Any) -> Any:
        return copy.deepcopy(ensure_json_shaped(v))

    def get_error_input(self) -> Any:
        return copy.deepcopy(self.error_input)


class SpecificTestFeedbackDetails(FeedbackDetails, ABC):
    """Shared payload of buggy-output and suite-level feedback."""

    task_index: Optional[int] = Field(
        None, ge=0, description="The index of the task that failed.", examples=[0]
    )
    specific_test_index: Optional[int] = Field(
        None,
        ge=0,
        description="The index of the specific test that caused the check to fail.",
        examples=[1],
    )
    test_messages: Optional[Tuple[str, ...]] = Field(
        None,
        description="Messages for the specific feedback, shown one at a time.",
        examples=[["Are you handling empty strings?"]],
    )
    message_index: Optional[int] = Field(
        None,
        ge=0,
        description="The index of the message in test_messages to show.",
        examples=[0],
    )

    def get_task_index(self) -> Optional[int]:
        return self.task_index

    def get_specific_test_index(self) -> Optional[int]:
        return self.specific_test_index

    def get_message_index(self) -> Optional[int]:
        return self.message_index

    def get_message(self) -> str:
        messages = self.test_messages or ()
        if self.message_index is None or self.message_index >= len(messages):
            raise MessageIndexError(
                f"No feedback message at index {self.message_index} "
                f"({len(messages)} available)."
            )
        return messages[self.message_index]


class KnownBugFeedbackDetails(SpecificTestFeedbackDetails):
    FEEDBACK_CATEGORY: ClassVar[FeedbackCategory] = FeedbackCategory.KNOWN_BUG_FAILURE


class SuiteLevelFeedbackDetails(SpecificTestFeedbackDetails):
    FEEDBACK_CATEGORY: ClassVar[FeedbackCategory] = FeedbackCategory.SUITE_LEVEL_FAILURE


class IncorrectOutputFeedbackDetails(FeedbackDetails):
    FEEDBACK_CATEGORY: ClassVar[FeedbackCategory] = FeedbackCategory.INCORRECT_OUTPUT_FAILURE

    test_case: Optional[TestCase] = Field(None, description="The first failing test case.")
    test_suite_id: Optional[str] = Field(
        None,
        description="The ID of the test suite containing the first failing test case.",
        examples=["GENERAL_CASE"],
    )
    # relative to its test suite
    test_case_index: Optional[int] = Field(None, ge=0, examples=[2])
    observed_output: JsonValue = Field(
        None,
        description="Actual output from running the student's code on the failing test case.",
    )

    @field_validator("observed_output", mode="before")
    @classmethod
    def _copy_observed_output(cls, v: Any) -> Any:
        return copy.deepcopy(ensure_json_shaped(v))

    def get_test_case(self) -> Optional[TestCase]:
        return self.test_case

    def get_test_suite_id(self) -> Optional[str]:
        return self.test_suite_id

    def get_test_case_index(self) -> Optional[int]:
        return self.test_case_index

    def get_observed_output(self) -> Any:
        return copy.deepcopy(self.observed_output)


class PerformanceFeedbackDetails(FeedbackDetails):
    FEEDBACK_CATEGORY: ClassVar[FeedbackCategory] = FeedbackCategory.PERFORMANCE_TEST_FAILURE

    expected_performance: Optional[str] = Field(
        None,
        description="The expected performance of the code.",
        examples=["linear"],
    )

    def get_expected_performance(self) -> Optional[str]:
        return copy.deepcopy(self.expected_performance)


FEEDBACK_DETAILS_VARIANTS: Dict[FeedbackCategory, Type[FeedbackDetails]] = {
    variant.FEEDBACK_CATEGORY: variant
    for variant in (
        TimeLimitErrorFeedbackDetails,
        StackExceededErrorFeedbackDetails,
        MemoryLimitErrorFeedbackDetails,
        ServerErrorFeedbackDetails,
        RuntimeErrorFeedbackDetails,
        SyntaxErrorFeedbackDetails,
        KnownBugFeedbackDetails,
        SuiteLevelFeedbackDetails,
        IncorrectOutputFeedbackDetails,
        PerformanceFeedbackDetails,
        SuccessFeedbackDetails,
    )
}


def parse_feedback_details(data: Dict[str, Any]) -> FeedbackDetails:
    """
    Validate a dict, as produced by FeedbackDetails.to_dict(), into the matching variant.

    The category is read from "feedbackCategory" (or "feedback_category").
    """
    payload = dict(data)
    raw_category = payload.pop("feedbackCategory", payload.pop("feedback_category", None))
    category = resolve_feedback_category(raw_category)
    return FEEDBACK_DETAILS_VARIANTS[category].model_validate(payload)


def create_time_limit_error_feedback_details() -> TimeLimitErrorFeedbackDetails:
    return TimeLimitErrorFeedbackDetails()


def create_stack_exceeded_feedback_details() -> StackExceededErrorFeedbackDetails:
    return StackExceededErrorFeedbackDetails()


def create_memory_limit_error_feedback_details() -> MemoryLimitErrorFeedbackDetails:
    return MemoryLimitErrorFeedbackDetails()


def create_server_error_feedback_details() -> ServerErrorFeedbackDetails:
    return ServerErrorFeedbackDetails()


def create_runtime_error_feedback_details(
    error_string: Optional[str],
    language: Optional[str],
    error_input: Any,
    language_unfamiliarity_feedback_is_needed: Optional[bool] = False,
) -> RuntimeErrorFeedbackDetails:
    return RuntimeErrorFeedbackDetails(
        error_string=error_string,
        language=language,
        error_input=error_input,
        language_unfamiliarity_feedback_is_needed=bool(
            language_unfamiliarity_feedback_is_needed
        ),
    )


def create_syntax_error_feedback_details(
    error_string: Optional[str],
    language: Optional[str],
    language_unfamiliarity_feedback_is_needed: Optional[bool] = False,
) -> SyntaxErrorFeedbackDetails:
    return SyntaxErrorFeedbackDetails(
        error_string=error_string,
        language=language,
        language_unfamiliarity_feedback_is_needed=bool(
            language_unfamiliarity_feedback_is_needed
        ),
    )


def create_buggy_output_feedback_details(
    task_index: Optional[int],
    specific_test_index: Optional[int],
    test_messages: Optional[List[str]],
    message_index: Optional[int],
) -> KnownBugFeedbackDetails:
    return KnownBugFeedbackDetails(
        task_index=task_index,
        specific_test_index=specific_test_index,
        test_messages=test_messages,
        message_index=message_index,
    )


def create_suite_level_feedback_details(
    task_index: Optional[int],
    specific_test_index: Optional[int],
    test_messages: Optional[List[str]],
    message_index: Optional[int],
) -> SuiteLevelFeedbackDetails:
    return SuiteLevelFeedbackDetails(
        task_index=task_index,
        specific_test_index=specific_test_index,
        test_messages=test_messages,
        message_index=message_index,
    )


def create_incorrect_output_feedback_details(
    test_case: Optional[TestCase],
    test_suite_id: Optional[str],
    test_case_index: Optional[int],
    observed_output: Any,
) -> IncorrectOutputFeedbackDetails:
    return IncorrectOutputFeedbackDetails(
        test_case=test_case,
        test_suite_id=test_suite_id,
        test_case_index=test_case_index,
        observed_output=observed_output,
    )


def create_performance_feedback_details(
    expected_performance: Optional[str],
) -> PerformanceFeedbackDetails:
    return PerformanceFeedbackDetails(expected_performance=expected_performance)


def create_success_feedback_details() -> SuccessFeedbackDetails:
    return SuccessFeedbackDetails()
