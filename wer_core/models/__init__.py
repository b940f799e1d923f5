"""Data models shared by the alignment and scoring stages."""
from .edit_operation import EditOperation, OP_DELETION, OP_INSERTION, OP_MATCH, OP_SUBSTITUTION
from .alignment_result import AlignmentResult, InvariantViolation, WerCounts
from .report import WerCountsModel, WerResponse

__all__ = [
    "EditOperation",
    "OP_MATCH",
    "OP_SUBSTITUTION",
    "OP_INSERTION",
    "OP_DELETION",
    "AlignmentResult",
    "InvariantViolation",
    "WerCounts",
    "WerCountsModel",
    "WerResponse",
]
