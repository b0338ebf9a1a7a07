from enum import Enum


class Status(str, Enum):
    """Outcome returned by the validation-style techniques; compared by value."""

    SUCCESS = "success"
    FAILURE = "failure"
