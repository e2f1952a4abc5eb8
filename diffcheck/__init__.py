"""
diffcheck
=========

Line-by-line text comparison. Two documents are aligned with a sequential
positional scan, each line is classified as unchanged, added or removed,
and similarity statistics are derived from the result.

Modules:
    - engine: Alignment and statistics.
    - utils: Line splitting and the comparison-key normalizer.
    - options: ComparisonOptions and their validation.
    - models: Data structures (DiffRecord, Statistics, DiffResult).
    - input_controller: Loads documents from files, combined files or XML.
    - visualizer: Unified, JSON and HTML rendering.
"""
from .engine import DiffEngine, align, compare_texts, summarize
from .exceptions import DiffCheckError, InputError, InvalidArgumentError
from .models import DiffKind, DiffRecord, DiffResult, Statistics
from .options import ComparisonOptions, parse_options
from .utils import normalize, split_lines

__version__ = "1.0.0"

__all__ = [
    "ComparisonOptions",
    "DiffCheckError",
    "DiffEngine",
    "DiffKind",
    "DiffRecord",
    "DiffResult",
    "InputError",
    "InvalidArgumentError",
    "Statistics",
    "align",
    "compare_texts",
    "normalize",
    "parse_options",
    "split_lines",
    "summarize",
]
