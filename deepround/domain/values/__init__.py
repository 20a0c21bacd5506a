from .precision_tag import PERCENT_SUFFIX, PRECISION_TAG_KEY, PrecisionTag, precision
from .path_segment import format_key
from .ref import Ref
from .rounding_context import RoundingContext

__all__ = [
    "PERCENT_SUFFIX",
    "PRECISION_TAG_KEY",
    "PrecisionTag",
    "Ref",
    "RoundingContext",
    "format_key",
    "precision",
]
