import os
import tempfile
import unittest
from diffcheck.exceptions import InputError
from diffcheck.input_controller import (
    CombinedFileParser, InputController, RawFileParser, XMLInputParser)


class TestInputController(unittest.TestCase):
    def setUp(self):
        self.controller = InputController()
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.path_a = self._write("test_a.txt", "line 1\nline 2")
        self.path_b = self._write("test_b.txt", "line 1\nline 3\n")
        self.path_combined = self._write(
            "test_combined.txt", "--- OLD FILE ---\nold 1\n--- NEW FILE ---\nnew 1\nnew 2")
        self.path_xml = self._write(
            "test_pair.xml", "<pair><old>a\nb</old><new>\na\nc\n</new></pair>")

    def _write(self, name, content):
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_parser_selection(self):
        self.assertIsInstance(self.controller._get_parser(self.path_a, self.path_b), RawFileParser)
        self.assertIsInstance(self.controller._get_parser(self.path_xml), XMLInputParser)
        self.assertIsInstance(self.controller._get_parser(self.path_combined), CombinedFileParser)

    def test_raw_parsing(self):
        text_a, text_b = self.controller.parse(self.path_a, self.path_b)
        self.assertEqual(text_a, "line 1\nline 2")
        # Trailing newline is kept, so the document ends with an empty line
        self.assertEqual(text_b, "line 1\nline 3\n")

    def test_combined_parsing(self):
        text_a, text_b = self.controller.parse(self.path_combined)
        self.assertEqual(text_a, "old 1")
        self.assertEqual(text_b, "new 1\nnew 2")

    def test_combined_matches_separate_files(self):
        path = self._write(
            "trailing.txt",
            "--- OLD FILE ---\nline 1\nline 2\n--- NEW FILE ---\nline 1\nline 3\n")
        text_a, text_b = self.controller.parse(path)
        self.assertEqual((text_a, text_b), ("line 1\nline 2", "line 1\nline 3\n"))
        self.assertEqual((text_a, text_b), self.controller.parse(self.path_a, self.path_b))

    def test_combined_missing_delimiter(self):
        path = self._write("broken.txt", "--- OLD FILE ---\nold 1\n")
        with self.assertRaises(InputError):
            self.controller.parse(path)

    def test_xml_parsing(self):
        text_a, text_b = self.controller.parse(self.path_xml)
        self.assertEqual(text_a, "a\nb")
        self.assertEqual(text_b, "a\nc")

    def test_xml_missing_element(self):
        path = self._write("half.xml", "<pair><old>a</old></pair>")
        with self.assertRaises(InputError):
            self.controller.parse(path)

    def test_xml_malformed(self):
        path = self._write("bad.xml", "<pair><old>a</pair>")
        with self.assertRaises(InputError):
            self.controller.parse(path)

    def test_missing_file(self):
        missing = os.path.join(self.tmp.name, "non_existent_file.txt")
        with self.assertRaises(InputError) as ctx:
            self.controller.parse(missing, self.path_b)
        self.assertIn("File not found", str(ctx.exception))

    def test_raw_parser_requires_two_files(self):
        with self.assertRaises(InputError):
            RawFileParser().parse(self.path_a)

if __name__ == '__main__':
    unittest.main()
