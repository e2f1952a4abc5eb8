import logging
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from .exceptions import InputError

logger = logging.getLogger(__name__)


class InputParser(ABC):
    """Abstract base class for input parsers."""

    @abstractmethod
    def parse(self, source_a: str, source_b: Optional[str] = None) -> Tuple[str, str]:
        """
        Reads the input source(s) into the two documents to compare.

        Args:
            source_a (str): The first source path.
            source_b (str, optional): The second source path.

        Returns:
            Tuple[str, str]: (original_text, modified_text)
        """

    def _open(self, filepath: str):
        try:
            return open(filepath, 'r', encoding='utf-8', errors='replace')
        except FileNotFoundError:
            raise InputError(f"File not found: {filepath}") from None
        except OSError as e:
            raise InputError(f"Cannot read {filepath}: {e.strerror}") from e


class RawFileParser(InputParser):
    """Reads two separate text files."""

    def parse(self, source_a: str, source_b: Optional[str] = None) -> Tuple[str, str]:
        if not source_b:
            raise InputError("RawFileParser requires two files.")
        return self._read_file(source_a), self._read_file(source_b)

    def _read_file(self, filepath: str) -> str:
        with self._open(filepath) as f:
            return f.read()


class CombinedFileParser(InputParser):
    """
    Reads a single file containing both versions separated by delimiters.

    Each section is split on "\\n" exactly like a standalone file, so a
    newline ending the NEW section becomes a trailing empty line.
    """
    DELIMITER_OLD = "--- OLD FILE ---"
    DELIMITER_NEW = "--- NEW FILE ---"

    def parse(self, source_a: str, source_b: Optional[str] = None) -> Tuple[str, str]:
        lines_a: List[str] = []
        lines_b: List[str] = []
        current_section = None
        found_old = False
        found_new = False

        with self._open(source_a) as f:
            text = f.read()

        # A trailing newline stays a final empty line, as in RawFileParser
        for line in text.split("\n"):
            stripped = line.strip()
            if stripped == self.DELIMITER_OLD:
                current_section = lines_a
                found_old = True
                continue
            elif stripped == self.DELIMITER_NEW:
                current_section = lines_b
                found_new = True
                continue

            if current_section is not None:
                current_section.append(line)

        if not found_old or not found_new:
            raise InputError(
                f"Missing delimiters in {source_a}. Found OLD: {found_old}, NEW: {found_new}")
        return "\n".join(lines_a), "\n".join(lines_b)


class XMLInputParser(InputParser):
    """
    Reads an XML file containing <old> and <new> elements.

    A single newline directly inside the element tags is not part of the
    document, so both of these forms give the same text:
    <old>line</old> and <old>\\nline\\n</old>.
    """

    def parse(self, source_a: str, source_b: Optional[str] = None) -> Tuple[str, str]:
        with self._open(source_a) as f:
            try:
                root = ET.parse(f).getroot()
            except ET.ParseError as e:
                raise InputError(f"Failed to parse XML file: {source_a} ({e})") from e

        old_elem = root.find(".//old")
        new_elem = root.find(".//new")
        if old_elem is None or new_elem is None:
            raise InputError(f"{source_a} must contain both <old> and <new> elements")
        return self._element_text(old_elem), self._element_text(new_elem)

    @staticmethod
    def _element_text(elem: ET.Element) -> str:
        text = elem.text or ""
        if text.startswith("\n"):
            text = text[1:]
        if text.endswith("\n"):
            text = text[:-1]
        return text


class InputController:
    """
    Chooses a parser for the given sources and loads both documents.
    """

    def parse(self, source_a: str, source_b: Optional[str] = None) -> Tuple[str, str]:
        """
        Loads the original and modified documents.

        Args:
            source_a (str): First source path, or a combined/XML file.
            source_b (str, optional): Second source path.

        Returns:
            Tuple[str, str]: (original_text, modified_text)

        Raises:
            InputError: If a source is missing or malformed.
        """
        parser = self._get_parser(source_a, source_b)
        logger.debug("Reading %s with %s", source_a, type(parser).__name__)
        return parser.parse(source_a, source_b)

    def _get_parser(self, source_a: str, source_b: Optional[str] = None) -> InputParser:
        if source_b: return RawFileParser()
        if source_a.endswith('.xml'): return XMLInputParser()
        return CombinedFileParser()
