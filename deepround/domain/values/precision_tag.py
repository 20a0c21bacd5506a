import dataclasses
import re
from dataclasses import dataclass
from typing import Any, Optional

from .rounding_context import RoundingContext

PRECISION_TAG_KEY = "precision"
PERCENT_SUFFIX = ",percent"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class PrecisionTag:
    """
    Parsed form of a member annotation, ``<integer>[,percent]``.

    An empty integer part keeps the inherited precision, so ``",percent"``
    on its own only switches the percent modifier on.
    """

    precision: Optional[int] = None
    percent: bool = False

    @classmethod
    def parse(cls, raw: str) -> "PrecisionTag":
        """
        :param raw: Tag text, e.g. ``"3"`` or ``"2,percent"``
        :return: PrecisionTag

        :raises ValueError: if the integer part is not a plain signed integer
            or does not fit in 64 bits
        """
        percent = raw.endswith(PERCENT_SUFFIX)
        if percent:
            raw = raw[: -len(PERCENT_SUFFIX)]

        if raw == "":
            return cls(precision=None, percent=percent)

        if not _INTEGER.fullmatch(raw):
            raise ValueError(f'parsing "{raw}": invalid syntax')

        value = int(raw)
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise ValueError(f'parsing "{raw}": value out of range')

        return cls(precision=value, percent=percent)

    def apply_to(self, context: RoundingContext) -> RoundingContext:
        precision = context.precision if self.precision is None else self.precision
        return RoundingContext(
            precision=precision, percent=context.percent or self.percent
        )


def precision(tag: Any, *, key: str = PRECISION_TAG_KEY, **kwargs: Any) -> Any:
    """
    Declare a dataclass field carrying a precision tag.

        @dataclass
        class Report:
            rate: float = precision("2,percent", default=0.0)

    :param tag: Tag text (non-string values are rendered with ``str``)
    :param key: Metadata key the walker reads the tag from
    :param kwargs: Forwarded to ``dataclasses.field``
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[key] = str(tag)
    return dataclasses.field(metadata=metadata, **kwargs)
