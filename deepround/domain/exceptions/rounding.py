from .base import DomainException


class RoundingError(DomainException):
    """
    Raised when a value cannot be rounded.

    The message is ``path + reason``: ``path`` is the trail of ``.Member``,
    ``[index]`` and ``[key]`` segments leading to the fault, prepended
    segment by segment while the walk unwinds.
    """

    def __init__(self, reason: str, path: str = ""):
        self.reason = reason
        self.path = path

        super().__init__(str(self))

    def prepend(self, segment: str) -> "RoundingError":
        self.path = segment + self.path
        self.args = (str(self),)
        return self

    def __str__(self) -> str:
        return f"{self.path}{self.reason}"


class NotANumberError(RoundingError):
    """Raised when a leaf holds NaN. Infinities are not an error."""

    def __init__(self):
        super().__init__(" is not a number (but should be)")


class MalformedPrecisionTagError(RoundingError):
    """Raised when a member's precision tag cannot be parsed."""

    def __init__(self, member: str, tag: str, cause: Exception):
        self.member = member
        self.tag = tag

        super().__init__(
            f": failed to parse precision tag: {cause}",
            path=f".{member}",
        )


class NestingTooDeepError(RoundingError):
    """Raised when the value graph nests deeper than the policy allows."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth

        super().__init__(f": nesting deeper than {max_depth} levels")
