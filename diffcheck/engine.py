import logging
from typing import Sequence

from .models import DiffKind, DiffRecord, DiffResult, Statistics
from .options import ComparisonOptions, OptionsLike, parse_options
from .utils import normalize, round_half_up, split_lines

logger = logging.getLogger(__name__)


def align(left: Sequence[str], right: Sequence[str],
          options: ComparisonOptions) -> DiffResult:
    """
    Aligns two documents with a sequential positional scan.

    This is not an LCS diff. When the lines under both cursors differ, the
    left line is always reported as removed first; there is no look-ahead.
    A single line inserted in the middle therefore shows every following
    line as removed and re-added.

    Args:
        left: Lines of the original document.
        right: Lines of the modified document.
        options: Validated comparison options.

    Returns:
        DiffResult: Classified records and their statistics.
    """
    left_keys = [normalize(line, options) for line in left]
    right_keys = [normalize(line, options) for line in right]

    records = []
    i = j = 0
    while i < len(left) or j < len(right):
        if i < len(left) and j < len(right) and left_keys[i] == right_keys[j]:
            records.append(DiffRecord(DiffKind.EQUAL, left[i], i + 1))
            i += 1
            j += 1
        elif i < len(left):
            records.append(DiffRecord(DiffKind.REMOVED, left[i], i + 1))
            i += 1
        else:
            records.append(DiffRecord(DiffKind.ADDED, right[j], j + 1))
            j += 1

    stats = summarize(records, len(left), len(right))
    logger.debug("Aligned %d/%d lines into %d records (+%d -%d, %d%% similar)",
                 len(left), len(right), len(records),
                 stats.added, stats.removed, stats.similarity)
    return DiffResult(records=records, stats=stats)


def summarize(records: Sequence[DiffRecord], left_line_count: int,
              right_line_count: int) -> Statistics:
    """
    Derives counts and the similarity percentage from diff records.

    Similarity is the share of unchanged lines relative to the longer
    document, rounded half up. Two empty documents are 100% similar.
    """
    added = removed = unchanged = 0
    for record in records:
        if record.kind is DiffKind.ADDED:
            added += 1
        elif record.kind is DiffKind.REMOVED:
            removed += 1
        else:
            unchanged += 1

    total = max(left_line_count, right_line_count)
    if total <= 0:
        similarity = 100
    else:
        similarity = min(100, max(0, round_half_up(unchanged * 100, total)))

    return Statistics(
        added=added,
        removed=removed,
        changes=added + removed,
        similarity=similarity,
        unchanged=unchanged,
    )


class DiffEngine:
    """
    Compares text documents under one validated option set.

    The engine holds no state between calls; it only saves re-validating
    the options for every comparison.
    """

    def __init__(self, options: OptionsLike = None):
        self.options = parse_options(options)

    def compare(self, left_text: str, right_text: str) -> DiffResult:
        return align(split_lines(left_text), split_lines(right_text), self.options)

    def compare_lines(self, left: Sequence[str], right: Sequence[str]) -> DiffResult:
        return align(left, right, self.options)


def compare_texts(left_text: str, right_text: str,
                  options: OptionsLike = None) -> DiffResult:
    """
    Splits two texts into lines and aligns them.

    Raises:
        InvalidArgumentError: If options is malformed.
    """
    return DiffEngine(options).compare(left_text, right_text)
