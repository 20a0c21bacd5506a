from functools import lru_cache
from typing import Any

from deepround.domain.services import StructuralWalker
from deepround.shared.di import get_container


@lru_cache()
def get_walker() -> StructuralWalker:
    return get_container().structural_walker()


def transform(root: Any, base_precision: int) -> None:
    """
    Round every float reachable from root in place.

    Untagged members use ``base_precision``; a member tagged ``"<n>"`` or
    ``"<n>,percent"`` sets the precision (and percent modifier) for itself
    and everything below it.

    :param root: A mutable handle (Ref, dataclass / model, dict, list)
    :param base_precision: Number of decimal places, may be negative

    :raises TypeError: if root cannot be mutated in place
    :raises RoundingError: on the first NaN leaf or malformed tag, with the
        path to it
    """
    get_walker().transform(root, base_precision)
