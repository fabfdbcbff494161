from enum import Enum
from typing import Any, Dict, Type

from tie.domain.feedback_category import FeedbackCategory


def get_enum_values_with_descriptions(
    enum_class: Type[Enum],
) -> Dict[str, Dict[str, Any]]:
    """
    Extract enum values with their descriptions from the enum's docstring.

    The docstring is expected to hold one line per member:

    ENUM_VALUE: Description of the enum value

    Members without such a line are described by their title-cased name.

    Returns:
        A dictionary mapping enum names to a dictionary containing 'value' and 'description'
    """
    member_names = {member.name for member in enum_class}

    descriptions = {}
    for line in (enum_class.__doc__ or "").split("\n"):
        name, sep, description = line.strip().partition(":")
        if sep and name.strip() in member_names:
            descriptions[name.strip()] = description.strip()

    return {
        member.name: {
            "value": member.value,
            "description": descriptions.get(
                member.name, member.name.replace("_", " ").title()
            ),
        }
        for member in enum_class
    }


def describe_feedback_categories() -> Dict[str, Dict[str, Any]]:
    """Human-readable descriptions of every feedback category, keyed by name."""
    return get_enum_values_with_descriptions(FeedbackCategory)
