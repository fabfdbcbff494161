from typing import Optional


class FeedbackDetailsError(Exception):
    """Base class for contract violations raised by feedback details."""


class InvalidFeedbackCategoryError(FeedbackDetailsError, ValueError):
    """Raised when feedback is built or parsed with an unknown category."""

    def __init__(self, feedback_category):
        super().__init__(f"Invalid feedback category: {feedback_category}")
        self.feedback_category = feedback_category


class FeedbackCategoryMismatchError(FeedbackDetailsError):
    """Raised when an accessor is called on feedback of a category it does not belong to."""

    def __init__(self, message: str, feedback_category: Optional[str] = None):
        super().__init__(message)
        self.feedback_category = feedback_category


class MessageIndexError(FeedbackDetailsError, IndexError):
    """Raised when the selected feedback message does not exist."""
