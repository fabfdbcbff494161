from enum import Enum

from tie.domain.feedback_category import FeedbackCategory
from tie.util.enum_util import (
    describe_feedback_categories,
    get_enum_values_with_descriptions,
)


class Color(Enum):
    """
    Colors for testing.

    RED: The color of fire
    """

    RED = "red"
    DARK_BLUE = "dark_blue"


def test_descriptions_from_docstring() -> None:
    result = get_enum_values_with_descriptions(Color)

    assert result["RED"] == {"value": "red", "description": "The color of fire"}


def test_missing_description_falls_back_to_name() -> None:
    result = get_enum_values_with_descriptions(Color)

    assert result["DARK_BLUE"]["description"] == "Dark Blue"


def test_every_feedback_category_is_described() -> None:
    result = describe_feedback_categories()

    assert set(result) == {category.name for category in FeedbackCategory}
    assert result["SYNTAX_ERROR"] == {
        "value": FeedbackCategory.SYNTAX_ERROR,
        "description": "The code could not be parsed",
    }
