import math
from collections.abc import MutableMapping, MutableSequence
from dataclasses import dataclass
from typing import Any

from deepround.domain.exceptions import (
    MalformedPrecisionTagError,
    NestingTooDeepError,
    NotANumberError,
    RoundingError,
)
from deepround.domain.values import (
    PRECISION_TAG_KEY,
    PrecisionTag,
    Ref,
    RoundingContext,
    format_key,
)
from deepround.shared.logging import get_logger

from .decimal_rounder import decimal_round
from .members import Member, composite_members

logger = get_logger(__name__)


@dataclass(frozen=True)
class RoundingPolicy:
    """Policy defining how the walker reads tags and how deep it may go."""

    tag_key: str = PRECISION_TAG_KEY
    max_depth: int = 256

    def __post_init__(self):
        if not self.tag_key:
            raise ValueError("Tag key must not be empty")

        if self.max_depth <= 0:
            raise ValueError(f"Max depth must be positive: {self.max_depth}")


class StructuralWalker:
    """
    Domain service rounding every float reachable from a value, in place.

    Dispatch is on the shape of each node:

    - ``Ref``: followed, a nil box is terminal
    - dataclass / pydantic model: settable members, in declaration order,
      each one possibly overriding the context through its precision tag
    - mutable mapping: values rewritten under the same key
    - mutable sequence: elements rewritten at the same index
    - tuple: rebuilt with rounded elements, same type and length
    - ``float``: rounded with the active context
    - anything else: left alone

    The walk stops at the first fault; whatever was already rounded stays
    rounded.
    """

    def __init__(self, policy: RoundingPolicy = None):
        self._policy = policy or RoundingPolicy()

    @property
    def policy(self) -> RoundingPolicy:
        return self._policy

    def transform(self, root: Any, base_precision: int) -> None:
        """
        Round every float reachable from root.

        :param root: A mutable handle: Ref, dataclass / model instance,
            mutable mapping or mutable sequence
        :param base_precision: Precision used until a tag overrides it

        :raises TypeError: if root cannot be mutated in place
        :raises RoundingError: on the first NaN leaf or malformed tag
        """
        if not self.is_handle(root):
            raise TypeError(
                f"root must be a mutable reference, got {type(root).__name__}"
            )

        context = RoundingContext(precision=base_precision)

        logger.debug(
            "rounding_walk_started",
            root_type=type(root).__name__,
            precision=base_precision,
        )

        try:
            self._walk(root, context, depth=0)
        except RoundingError as e:
            logger.debug("rounding_walk_failed", path=e.path, error=str(e))
            raise

        logger.debug("rounding_walk_completed", root_type=type(root).__name__)

    def is_handle(self, root: Any) -> bool:
        if isinstance(root, (Ref, MutableMapping)) or _is_sequence(root):
            return True
        return composite_members(root, self._policy.tag_key) is not None

    def _walk(self, node: Any, context: RoundingContext, depth: int) -> Any:
        if depth > self._policy.max_depth:
            raise NestingTooDeepError(self._policy.max_depth)

        if isinstance(node, float):
            return self._round_leaf(node, context)

        if isinstance(node, Ref):
            if not node.is_nil():
                node.value = self._walk(node.value, context, depth + 1)
            return node

        members = composite_members(node, self._policy.tag_key)
        if members is not None:
            self._walk_members(node, members, context, depth)
            return node

        if isinstance(node, MutableMapping):
            self._walk_mapping(node, context, depth)
            return node

        if _is_sequence(node):
            self._walk_sequence(node, context, depth)
            return node

        if isinstance(node, tuple):
            return self._walk_tuple(node, context, depth)

        return node

    def _walk_members(
        self,
        node: Any,
        members: list[Member],
        context: RoundingContext,
        depth: int,
    ) -> None:
        for member in members:
            member_context = self._member_context(member, context)

            try:
                value = self._walk(
                    getattr(node, member.name), member_context, depth + 1
                )
            except RoundingError as e:
                e.prepend(f".{member.name}")
                raise

            setattr(node, member.name, value)

    @staticmethod
    def _member_context(member: Member, context: RoundingContext) -> RoundingContext:
        if member.tag is None:
            return context

        try:
            tag = PrecisionTag.parse(member.tag)
        except ValueError as e:
            raise MalformedPrecisionTagError(member.name, member.tag, e) from e

        return tag.apply_to(context)

    def _walk_mapping(
        self, node: MutableMapping, context: RoundingContext, depth: int
    ) -> None:
        # Values are read out and stored back, keys are never touched.
        for key in list(node.keys()):
            try:
                value = self._walk(node[key], context, depth + 1)
            except RoundingError as e:
                e.prepend(f"[{format_key(key)}]")
                raise

            node[key] = value

    def _walk_sequence(
        self, node: MutableSequence, context: RoundingContext, depth: int
    ) -> None:
        for index in range(len(node)):
            try:
                value = self._walk(node[index], context, depth + 1)
            except RoundingError as e:
                e.prepend(f"[{index}]")
                raise

            node[index] = value

    def _walk_tuple(
        self, node: tuple, context: RoundingContext, depth: int
    ) -> tuple:
        # Tuples cannot be written to, so a rebuilt one replaces the original.
        items = []
        for index, item in enumerate(node):
            try:
                items.append(self._walk(item, context, depth + 1))
            except RoundingError as e:
                e.prepend(f"[{index}]")
                raise

        if hasattr(node, "_make"):
            return type(node)._make(items)
        return type(node)(items)

    @staticmethod
    def _round_leaf(value: float, context: RoundingContext) -> float:
        if math.isnan(value):
            raise NotANumberError()

        if math.isinf(value):
            return value

        if context.percent:
            value *= 100

        return decimal_round(value, context.precision)


def _is_sequence(node: Any) -> bool:
    return isinstance(node, MutableSequence) and not isinstance(node, bytearray)
