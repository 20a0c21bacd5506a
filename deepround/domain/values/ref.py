from typing import Any


class Ref:
    """
    A mutable single-value box.
    It plays the role of a pointer: the walker rewrites ``value`` in place,
    and a box holding ``None`` points to nothing.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any = None):
        self.value = value

    def is_nil(self) -> bool:
        return self.value is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ref):
            return NotImplemented
        return self.value == other.value

    def __repr__(self) -> str:
        return f"Ref({self.value!r})"
