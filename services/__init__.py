"""
Receipt processing services
"""

from .models import ExtractionResult, BatchResultEntry, ReceiptOutcome, NOT_AVAILABLE
from .receipt_processor import ReceiptProcessor, SUPPORTED_EXTENSIONS, is_supported_image

__all__ = [
    'ExtractionResult',
    'BatchResultEntry',
    'ReceiptOutcome',
    'NOT_AVAILABLE',
    'ReceiptProcessor',
    'SUPPORTED_EXTENSIONS',
    'is_supported_image',
]
