"""Alignment output and the fatal consistency-failure variant."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from .edit_operation import EditOperation


@dataclass(frozen=True)
class WerCounts:
    """Aggregate error counts for one hypothesis/reference pair."""
    substitutions: int = 0
    insertions: int = 0
    deletions: int = 0
    reference_words: int = 0

    @property
    def total_errors(self) -> int:
        return self.substitutions + self.insertions + self.deletions

    def as_dict(self) -> Dict[str, int]:
        return {
            "sub": self.substitutions,
            "ins": self.insertions,
            "del": self.deletions,
            "nw": self.reference_words,
        }


@dataclass(frozen=True)
class AlignmentResult:
    """Edit operations in left-to-right order plus their aggregate counts.

    Attributes:
        ops: Classified operations, one per backtrace step
        counts: Substitution/insertion/deletion totals and reference length
        distance: Minimum edit distance read from the last matrix cell
        hyp_words: The hypothesis sequence that was aligned
        ref_words: The reference sequence that was aligned
    """
    ops: Tuple[EditOperation, ...]
    counts: WerCounts
    distance: int
    hyp_words: Tuple[str, ...] = field(default_factory=tuple)
    ref_words: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class InvariantViolation:
    """Returned in place of a result when the engine contradicts itself.

    Carries enough context to log the failure. None of it is meant for the
    caller of the HTTP API.
    """
    reason: str
    hyp_words: Tuple[str, ...] = field(default_factory=tuple)
    ref_words: Tuple[str, ...] = field(default_factory=tuple)
    rows: int = 0
    cols: int = 0

    def describe(self) -> str:
        return (
            f"{self.reason} (matrix {self.rows}x{self.cols}, "
            f"hyp={list(self.hyp_words)!r}, ref={list(self.ref_words)!r})"
        )
