"""
Custom exception classes for the profile update handler and services.
"""
from typing import Optional, List, TYPE_CHECKING

if TYPE_CHECKING:
    from models import UpdateProfileResponse


class ProfileServiceError(Exception):
    """Base class for profile service errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProfileValidationError(ProfileServiceError):
    """Exception raised when a profile fails validation."""

    def __init__(self, reasons: List[str]):
        """
        Initialize validation error.

        Args:
            reasons: Human-readable reason for every violated rule, in
                rule order
        """
        super().__init__(
            'profile validation failed: ' + '; '.join(reasons)
        )
        self.reasons = list(reasons)


class ClientConfigError(ProfileServiceError):
    """Exception raised when the DynamoDB client cannot be constructed."""


class InvalidArgument(ProfileServiceError):
    """Exception raised for malformed request input."""


class NoFieldsToUpdate(ProfileServiceError):
    """Exception raised when an update carries nothing but the timestamp."""


class RecordServiceFailure(ProfileServiceError):
    """Exception raised for record service (AT Protocol) errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        description: Optional[str] = None
    ):
        """
        Initialize record service error.

        Args:
            message: Error message
            status_code: HTTP status code if a response was received
            description: Status line or transport error description
        """
        super().__init__(message)
        self.status_code = status_code
        self.description = description


class StoreWriteFailure(ProfileServiceError):
    """Exception raised when the DynamoDB update fails."""

    def __init__(
        self,
        message: str,
        table_name: Optional[str] = None,
        user_id: Optional[str] = None
    ):
        super().__init__(message)
        self.table_name = table_name
        self.user_id = user_id


class ProfileUpdateError(ProfileServiceError):
    """
    Invocation-level error raised by the orchestrator.

    The message is generic and safe to return to the caller; the
    underlying cause is chained and logged, never exposed.
    """

    def __init__(self, message: str, response: 'UpdateProfileResponse'):
        super().__init__(message)
        self.response = response
