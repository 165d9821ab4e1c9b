"""Validation domain exceptions."""

from typing import Any, Optional

from bastion.core.exceptions import BastionException
from bastion.domains.validation.types import ERROR_MESSAGES, ErrorCode


class TranslatedValidationError(BastionException):
    """A validation failure classified into a user-facing error code."""

    def __init__(
        self,
        code: ErrorCode,
        detail: Any = None,
        kind: Optional[str] = None,
        message: Optional[str] = None,
    ) -> None:
        """Initialize with the error code and the value the message refers to."""
        if message is None:
            if isinstance(detail, (list, tuple)):
                detail = ", ".join(str(d) for d in detail)
            message = ERROR_MESSAGES[code].format(detail if detail is not None else "")
        self.code = code
        self.detail = detail
        self.kind = kind
        self.message = message
        super().__init__(self.message)
