"""Shared exceptions module."""

from typing import Iterable, Optional


class BastionException(Exception):
    """Base exception for Bastion services."""

    pass


class PermissionException(BastionException):
    """Exception raised when a user does not have the necessary permissions to perform an action."""

    def __init__(
        self,
        message: Optional[str] = "User does not have the right to perform this action",
    ):
        """Create a new PermissionException instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class NotFoundException(BastionException):
    """Exception raised when an object is not found.

    Also raised for objects that exist but are not visible to the actor, so
    that their existence is not leaked.
    """

    def __init__(self, message: Optional[str] = "Object not found"):
        """Create a new NotFoundException instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class InvalidStateError(Exception):
    """Exception raised when an object is in an invalid state.

    Used when the aggregate state of an organization (quota usage, counts)
    does not allow the requested change.
    """

    def __init__(self, message: Optional[str] = "Object is in an invalid state"):
        """Create a new InvalidStateError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class PolicyNotRegisteredError(BastionException):
    """Raised at wiring time when resource kinds have no access policy."""

    def __init__(self, kinds: Iterable[str], message: Optional[str] = None):
        """Create a new PolicyNotRegisteredError instance.

        Args:
        ----
            kinds (Iterable[str]): The resource kinds without a policy.
            message (str, optional): Custom error message.

        """
        self.kinds = sorted(kinds)
        if message is None:
            message = f"No access policy registered for: {', '.join(self.kinds)}"
        self.message = message
        super().__init__(self.message)


class FilterTranslationError(BastionException):
    """Raised when a visibility filter cannot be translated to a query clause."""

    def __init__(self, message: Optional[str] = "Filter could not be translated"):
        """Create a new FilterTranslationError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)
