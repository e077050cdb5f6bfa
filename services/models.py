"""
Result records produced by the receipt processor
"""

from dataclasses import dataclass, asdict
from typing import Dict, Optional

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class ExtractionResult:
    """Fields extracted from one receipt image"""
    shop_name: str = NOT_AVAILABLE
    total: str = NOT_AVAILABLE

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class BatchResultEntry:
    """Extraction result together with the file it came from"""
    filename: str
    shop_name: str
    total: str

    @classmethod
    def from_result(cls, filename: str, result: ExtractionResult) -> "BatchResultEntry":
        return cls(filename=filename, shop_name=result.shop_name, total=result.total)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class ReceiptOutcome:
    """Either an extraction result or the error that prevented it"""
    filename: str
    result: Optional[ExtractionResult] = None
    error: Optional[str] = None

    def __post_init__(self):
        if (self.result is None) == (self.error is None):
            raise ValueError("ReceiptOutcome needs exactly one of result or error")

    @property
    def ok(self) -> bool:
        return self.result is not None

    @classmethod
    def success(cls, filename: str, result: ExtractionResult) -> "ReceiptOutcome":
        return cls(filename=filename, result=result)

    @classmethod
    def failure(cls, filename: str, error: str) -> "ReceiptOutcome":
        return cls(filename=filename, error=error)
