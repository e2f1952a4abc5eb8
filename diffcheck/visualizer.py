import html
import json
import logging
import os
from typing import List

from .models import DiffKind, DiffResult

logger = logging.getLogger(__name__)

PREFIXES = {
    DiffKind.ADDED: "+",
    DiffKind.REMOVED: "-",
    DiffKind.EQUAL: " ",
}


def format_unified(result: DiffResult, show_line_numbers: bool = False) -> str:
    """
    Renders records as a "+"/"-"/" " prefixed listing, one record per line.
    """
    width = len(str(max((r.line_number for r in result.records), default=0)))
    lines = []
    for record in result.records:
        prefix = PREFIXES[record.kind]
        if show_line_numbers:
            lines.append(f"{prefix} {record.line_number:>{width}} {record.text}")
        else:
            lines.append(f"{prefix} {record.text}")
    return "\n".join(lines)


def format_stats(result: DiffResult) -> str:
    s = result.stats
    return (f"Additions: {s.added}  Deletions: {s.removed}  "
            f"Changes: {s.changes}  Similarity: {s.similarity}%")


def format_json(result: DiffResult) -> str:
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)


class HTMLVisualizer:
    """
    Generates a standalone HTML diff report with side-by-side and unified views.
    """

    HEAD_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Text Diff Report</title>
    <style>
        :root {
            --bg-color: #f6f8fa; --container-bg: #ffffff; --text-color: #24292f;
            --border-color: #d0d7de; --line-num-text: #6e7781;
            --added-bg: #e6ffec; --added-num: #ccffd8;
            --removed-bg: #ffebe9; --removed-num: #ffd7d5;
            --empty-bg: #f6f8fa;
        }
        [data-theme="dark"] {
            --bg-color: #0d1117; --container-bg: #161b22; --text-color: #c9d1d9;
            --border-color: #30363d; --line-num-text: #8b949e;
            --added-bg: rgba(46, 160, 67, 0.15); --added-num: rgba(46, 160, 67, 0.4);
            --removed-bg: rgba(248, 81, 73, 0.15); --removed-num: rgba(248, 81, 73, 0.4);
            --empty-bg: #0d1117;
        }
        body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Helvetica, Arial, sans-serif; background-color: var(--bg-color); color: var(--text-color); margin: 0; padding: 20px; }
        .container { max-width: 1600px; margin: 0 auto 20px; background: var(--container-bg); border: 1px solid var(--border-color); border-radius: 6px; overflow: hidden; }
        .header { padding: 16px; border-bottom: 1px solid var(--border-color); display: flex; justify-content: space-between; align-items: center; }
        h2 { margin: 0; font-size: 16px; font-weight: 600; }
        .stats span { margin-right: 16px; font-size: 13px; }
        .toggle-btn { background: none; border: 1px solid var(--border-color); color: var(--text-color); padding: 5px 12px; border-radius: 6px; cursor: pointer; font-size: 12px; font-weight: 600; }
        table { width: 100%; border-collapse: collapse; table-layout: fixed; font-size: 12px; font-family: 'ui-monospace', 'SFMono-Regular', 'Menlo', 'Consolas', monospace; }
        td { padding: 0; vertical-align: top; line-height: 20px; }
        .line-num { width: 50px; text-align: right; padding-right: 10px; color: var(--line-num-text); user-select: none; border-right: 1px solid var(--border-color); }
        .prefix { width: 20px; text-align: center; user-select: none; }
        .code-content { padding-left: 10px; white-space: pre-wrap; word-break: break-all; }
        .row-add { background-color: var(--added-bg); }
        .row-add .line-num { background-color: var(--added-num); }
        .row-remove { background-color: var(--removed-bg); }
        .row-remove .line-num { background-color: var(--removed-num); }
        .empty { background-color: var(--empty-bg); }
    </style>
    <script>
        function toggleTheme() {
            const root = document.documentElement;
            root.setAttribute('data-theme', root.getAttribute('data-theme') === 'dark' ? 'light' : 'dark');
        }
    </script>
</head>
<body>
"""

    FOOT_TEMPLATE = """
<p style="text-align:center; color: #666; font-size: 12px;">Generated by diffcheck</p>
</body>
</html>
"""

    def __init__(self, show_line_numbers: bool = True):
        self.show_line_numbers = show_line_numbers

    def render(self, result: DiffResult) -> str:
        """Builds the complete HTML document for a diff result."""
        parts = [self.HEAD_TEMPLATE, self._render_header(result)]
        parts.append(self._render_side_by_side(result))
        parts.append(self._render_unified(result))
        parts.append(self.FOOT_TEMPLATE)
        return "\n".join(parts)

    def generate(self, result: DiffResult, output_path: str = "diff_report.html") -> str:
        """Writes the report to output_path and returns its absolute path."""
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.render(result))
        path = os.path.abspath(output_path)
        logger.info("Report generated at %s", path)
        return path

    def _render_header(self, result: DiffResult) -> str:
        s = result.stats
        return f"""<div class="container">
    <div class="header">
        <div>
            <h2>Comparison Statistics</h2>
            <div class="stats">
                <span>Additions: <strong>{s.added}</strong></span>
                <span>Deletions: <strong>{s.removed}</strong></span>
                <span>Changes: <strong>{s.changes}</strong></span>
                <span>Similarity: <strong>{s.similarity}%</strong></span>
            </div>
        </div>
        <button class="toggle-btn" onclick="toggleTheme()">Toggle Theme</button>
    </div>
</div>"""

    def _num(self, value) -> str:
        if not self.show_line_numbers:
            return ""
        return f'<td class="line-num">{value}</td>'

    def _render_side_by_side(self, result: DiffResult) -> str:
        rows: List[str] = []
        right_n = 0
        for record in result.records:
            text = html.escape(record.text)
            n = record.line_number
            if record.kind is DiffKind.EQUAL:
                right_n += 1
                left = f'{self._num(n)}<td class="code-content">{text}</td>'
                right = f'{self._num(right_n)}<td class="code-content">{text}</td>'
                row_class = ""
            elif record.kind is DiffKind.REMOVED:
                left = f'{self._num(n)}<td class="code-content">{text}</td>'
                right = f'{self._num("")}<td class="code-content empty"></td>'
                row_class = "row-remove"
            else:
                right_n = n
                left = f'{self._num("")}<td class="code-content empty"></td>'
                right = f'{self._num(n)}<td class="code-content">{text}</td>'
                row_class = "row-add"
            rows.append(f'<tr class="{row_class}">{left}{right}</tr>')

        return f"""<div class="container">
    <div class="header"><h2>Original Text / Modified Text</h2></div>
    <table>
{chr(10).join(rows)}
    </table>
</div>"""

    def _render_unified(self, result: DiffResult) -> str:
        rows: List[str] = []
        for record in result.records:
            row_class = "" if record.kind is DiffKind.EQUAL else f"row-{record.kind.value}"
            rows.append(
                f'<tr class="{row_class}"><td class="prefix">{PREFIXES[record.kind]}</td>'
                f'{self._num(record.line_number)}'
                f'<td class="code-content">{html.escape(record.text)}</td></tr>'
            )
        return f"""<div class="container">
    <div class="header"><h2>Unified Diff View</h2></div>
    <table>
{chr(10).join(rows)}
    </table>
</div>"""
