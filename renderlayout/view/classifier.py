"""
Error Classifier
Splits data provider failures into user-facing and internal-only
"""
from dataclasses import dataclass
from typing import Optional, Union

from renderlayout.exceptions import UserFacingError


@dataclass(frozen=True)
class UserFacing:
    """Failure whose message is shown to the user"""
    message: str


@dataclass(frozen=True)
class Internal:
    """Failure that is only logged; the user sees at most a generic message"""
    cause: BaseException


Classified = Union[UserFacing, Internal]


def capitalize_first(text: str) -> str:
    """Lower-case the text, then upper-case its first character"""
    text = text.lower()
    if not text:
        return ''
    first = text[0].upper()
    # Some characters upper-case to several ('ß' -> 'SS'); keep those as they are
    if len(first) != 1:
        first = text[0]
    return first + text[1:]


def classify(error: Optional[BaseException]) -> Optional[Classified]:
    """
    Classify a data provider failure

    Only UserFacingError is displayable. Any other exception, even one
    chained with ``raise ... from``, is internal.

    Example:
        classify(UserFacingError("in dashboard", cause=ValueError("a wrapped message")))
        # UserFacing(message='A wrapped message')
        classify(OSError("disk full"))
        # Internal(cause=OSError('disk full'))
    """
    if error is None:
        return None

    if isinstance(error, UserFacingError):
        return UserFacing(capitalize_first(error.user_message))

    return Internal(error)
