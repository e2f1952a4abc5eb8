import re
from typing import List

from .options import ComparisonOptions

_WHITESPACE_RUN = re.compile(r"\s+")


def split_lines(text: str) -> List[str]:
    """
    Splits a document on newline characters.

    Only "\\n" separates lines, so an empty string yields [""] and a trailing
    newline yields a trailing empty line.
    """
    return text.split("\n")


def normalize(line: str, options: ComparisonOptions) -> str:
    """
    Builds the equality key for a line. The key is never displayed.

    Args:
        line (str): The raw line.
        options (ComparisonOptions): Case and whitespace handling.

    Returns:
        str: The comparison key.
    """
    if not options.case_sensitive:
        line = line.lower()
    if options.ignore_whitespace:
        line = _WHITESPACE_RUN.sub(" ", line).strip()
    return line


def round_half_up(numerator: int, denominator: int) -> int:
    """Rounds numerator / denominator to the nearest int, halves away from zero."""
    return (2 * numerator + denominator) // (2 * denominator)
