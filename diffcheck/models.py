from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class DiffKind(str, Enum):
    """Classification of a single line in a diff."""
    EQUAL = "equal"
    ADDED = "add"
    REMOVED = "remove"


@dataclass(frozen=True)
class DiffRecord:
    """
    Represents a single classified line.

    Attributes:
        kind (DiffKind): Whether the line is unchanged, added or removed.
        text (str): The original, unmodified line content.
        line_number (int): 1-based line number in the document the line came
            from (left for EQUAL/REMOVED, right for ADDED).
    """
    kind: DiffKind
    text: str
    line_number: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind.value,
            "value": self.text,
            "lineNumber": self.line_number,
        }


@dataclass(frozen=True)
class Statistics:
    """Summary counts for a diff."""
    added: int
    removed: int
    changes: int
    similarity: int
    unchanged: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "additions": self.added,
            "deletions": self.removed,
            "changes": self.changes,
            "unchanged": self.unchanged,
            "similarity": self.similarity,
        }


@dataclass(frozen=True)
class DiffResult:
    """Ordered diff records plus their statistics."""
    records: List[DiffRecord] = field(default_factory=list)
    stats: Statistics = field(default_factory=lambda: Statistics(0, 0, 0, 100))

    @property
    def identical(self) -> bool:
        return self.stats.changes == 0

    def original_lines(self) -> List[str]:
        """Lines of the left document, rebuilt from EQUAL and REMOVED records."""
        return [r.text for r in self.records if r.kind is not DiffKind.ADDED]

    def modified_lines(self) -> List[str]:
        """
        Lines of the right document, rebuilt from EQUAL and ADDED records.

        EQUAL records carry the left text, so the rebuild is exact only when
        no case folding or whitespace collapsing applied; otherwise it matches
        the right document up to the normalized comparison key.
        """
        return [r.text for r in self.records if r.kind is not DiffKind.REMOVED]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "diff": [r.to_dict() for r in self.records],
            "stats": self.stats.to_dict(),
        }
