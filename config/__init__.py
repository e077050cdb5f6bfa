"""
Configuration, logging and error types for the receipt extractor
"""

from .exceptions import (
    ReceiptExtractorError,
    ConfigurationError,
    ValidationError,
    TransportError,
    EnvironmentValidationError,
)
from .settings import Settings, load_settings, API_BASE_URL, REQUEST_TIMEOUT
from .logging_config import setup_logging

__all__ = [
    'ReceiptExtractorError',
    'ConfigurationError',
    'ValidationError',
    'TransportError',
    'EnvironmentValidationError',
    'Settings',
    'load_settings',
    'API_BASE_URL',
    'REQUEST_TIMEOUT',
    'setup_logging',
]
