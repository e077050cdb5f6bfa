"""
Error types raised by the receipt extractor
"""

from typing import Any, Optional


class ReceiptExtractorError(Exception):
    """Base class for all receipt extractor errors"""


class ConfigurationError(ReceiptExtractorError):
    """Required credentials are missing from the environment"""


class ValidationError(ReceiptExtractorError):
    """An input image is missing, unreadable or has an unsupported format"""


class EnvironmentValidationError(ReceiptExtractorError):
    """The backend project lacks the tables this client needs"""


class TransportError(ReceiptExtractorError):
    """A request failed, timed out or returned an unusable response"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        message = super().__str__()
        if self.status_code is not None:
            message = f"{message} (status {self.status_code})"
        return message
