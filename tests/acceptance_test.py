import json
import os
import subprocess
import sys
import tempfile
import unittest

import diffcheck.__main__ as cli

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class TestAcceptance(unittest.TestCase):
    """
    Acceptance Tests: Verify the application from the user's perspective (CLI).
    """

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _write(self, name, content):
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def _run(self, *args):
        return subprocess.run(
            [sys.executable, "-m", "diffcheck", *args],
            capture_output=True,
            text=True,
            cwd=ROOT,
        )

    def test_cli_help(self):
        """Test that --help runs without error."""
        result = self._run("--help")
        self.assertEqual(result.returncode, 0)
        self.assertIn("diffcheck", result.stdout)

    def test_usage_lists_every_flag(self):
        help_text = self._run("--help").stdout
        for flag in ("--case-sensitive", "--ignore-whitespace", "--format", "--output",
                     "--no-line-numbers", "--stats", "--verbose"):
            self.assertIn(flag, cli.__doc__)
            self.assertIn(flag, help_text)

    def test_cli_basic_flow(self):
        a = self._write("acc_test_a.txt", "line 1\nline 2")
        b = self._write("acc_test_b.txt", "line 1\nline 3")
        result = self._run(a, b)
        self.assertEqual(result.returncode, 1)
        self.assertEqual(result.stdout.splitlines(), ["  1 line 1", "- 2 line 2", "+ 2 line 3"])

    def test_cli_identical(self):
        a = self._write("a.txt", "Same\nText")
        b = self._write("b.txt", "same\ntext")
        self.assertEqual(self._run(a, b).returncode, 0)
        self.assertEqual(self._run(a, b, "--case-sensitive").returncode, 1)

    def test_cli_json_and_stats(self):
        a = self._write("a.txt", "a  b")
        b = self._write("b.txt", "a b")
        result = self._run(a, b, "--format", "json", "--ignore-whitespace", "--stats")
        self.assertEqual(result.returncode, 0)
        data = json.loads(result.stdout)
        self.assertEqual(data["diff"], [{"type": "equal", "value": "a  b", "lineNumber": 1}])
        self.assertIn("Similarity: 100%", result.stderr)

    def test_cli_html_output(self):
        combined = self._write("pair.txt", "--- OLD FILE ---\nold\n--- NEW FILE ---\nnew")
        out = os.path.join(self.tmp.name, "report.html")
        result = self._run(combined, "--format", "html", "--output", out)
        self.assertEqual(result.returncode, 1)
        self.assertTrue(os.path.exists(out))

    def test_cli_missing_file(self):
        """Test error handling for missing files."""
        result = self._run(os.path.join(self.tmp.name, "non_existent_file.txt"))
        self.assertEqual(result.returncode, 2)
        self.assertIn("Error: File not found", result.stderr)

if __name__ == '__main__':
    unittest.main()
