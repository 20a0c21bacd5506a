from .decimal_rounder import decimal_round
from .members import Member, composite_members
from .structural_walker import RoundingPolicy, StructuralWalker

__all__ = [
    "Member",
    "RoundingPolicy",
    "StructuralWalker",
    "composite_members",
    "decimal_round",
]
