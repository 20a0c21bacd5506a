from .base import DomainException
from .rounding import (
    MalformedPrecisionTagError,
    NestingTooDeepError,
    NotANumberError,
    RoundingError,
)

__all__ = [
    "DomainException",
    "MalformedPrecisionTagError",
    "NestingTooDeepError",
    "NotANumberError",
    "RoundingError",
]
