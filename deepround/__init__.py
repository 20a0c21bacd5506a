from deepround.app import transform
from deepround.domain.exceptions import (
    DomainException,
    MalformedPrecisionTagError,
    NestingTooDeepError,
    NotANumberError,
    RoundingError,
)
from deepround.domain.services import RoundingPolicy, StructuralWalker, decimal_round
from deepround.domain.values import PrecisionTag, Ref, RoundingContext, precision

__all__ = [
    "DomainException",
    "MalformedPrecisionTagError",
    "NestingTooDeepError",
    "NotANumberError",
    "PrecisionTag",
    "Ref",
    "RoundingContext",
    "RoundingError",
    "RoundingPolicy",
    "StructuralWalker",
    "decimal_round",
    "precision",
    "transform",
]
