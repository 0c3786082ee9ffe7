"""
Renderer Exception Classes
Construction-time failures and the data provider failure tags
"""
from typing import Optional, Dict, Any, Mapping


class RenderLayoutException(Exception):
    """Base exception for all renderer exceptions"""
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.__class__.message
        super().__init__(self.message)


class ConfigurationError(RenderLayoutException):
    """
    Invalid renderer configuration

    Raised when an override names an unknown field or carries an invalid value

    Example:
        raise ConfigurationError("Unknown option 'extention'")
    """
    message = "Invalid renderer configuration"


class PartialDiscoveryError(RenderLayoutException):
    """
    Partials directory could not be listed

    Raised from renderer construction. The OSError is kept as __cause__.

    Example:
        raise PartialDiscoveryError("templates/partials", errno.ENOENT) from exc
    """
    message = "Unable to read partials directory"

    def __init__(self, directory: str, reason: Optional[str] = None):
        self.directory = directory
        detail = f"{self.__class__.message}: {directory}"
        if reason:
            detail = f"{detail} ({reason})"
        super().__init__(detail)


class ProviderError(RenderLayoutException):
    """
    Data provider failure that is only logged

    The client never sees this message. Partial data attached through
    ``data`` is still merged into the view context.

    Example:
        raise ProviderError("profile query timed out", data={'user': user})
    """
    message = "Data provider failed"

    def __init__(
        self,
        message: Optional[str] = None,
        data: Optional[Mapping[str, Any]] = None
    ):
        super().__init__(message)
        self.data: Dict[str, Any] = dict(data or {})


class UserFacingError(ProviderError):
    """
    Data provider failure whose message is shown to the user

    When a cause is wrapped (``cause=`` or ``raise ... from cause``) the
    cause's message is displayed, otherwise the error's own message.

    Example:
        raise UserFacingError(
            "error in dashboard",
            cause=ValueError("a wrapped error which is shown to the user"),
        )
    """
    message = "Request could not be completed"

    def __init__(
        self,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
        data: Optional[Mapping[str, Any]] = None
    ):
        super().__init__(message, data)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def user_message(self) -> str:
        """Raw text to display, before case normalisation"""
        cause = self.cause if self.cause is not None else self.__cause__
        if cause is not None:
            return str(cause)
        return self.message
