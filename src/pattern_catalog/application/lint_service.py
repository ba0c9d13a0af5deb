"""Linting of Python snippets embedded in a Markdown document.

Each fenced ``python`` block must parse, run on its own in a fresh
namespace, and, when it carries a ``# Output:`` comment section, print
exactly the commented lines.
"""

import ast
import contextlib
import io
from pathlib import Path
from typing import List, NamedTuple, Optional

from pattern_catalog.domain.exceptions import DocumentError
from pattern_catalog.domain.models import LintReport, SnippetLintResult
from pattern_catalog.infrastructure.execution.runner import describe_exception, normalize_output
from pattern_catalog.infrastructure.logging.logger import get_logger

PYTHON_LANGUAGES = ("python", "py", "python3")
OUTPUT_MARKER = "# Output:"


class CodeBlock(NamedTuple):
    language: str
    line: int
    code: str


def extract_code_blocks(text: str) -> List[CodeBlock]:
    """
    Find fenced code blocks (``` or ~~~) in Markdown text.

    An unclosed fence runs to the end of the document.
    """
    blocks: List[CodeBlock] = []
    lines = text.splitlines()
    index = 0
    while index < len(lines):
        stripped = lines[index].strip()
        fence_char = stripped[:1]
        if fence_char in ("`", "~") and stripped.startswith(fence_char * 3):
            fence_length = len(stripped) - len(stripped.lstrip(fence_char))
            info = stripped[fence_length:].strip()
            language = info.split()[0].lower() if info else ""
            start = index
            body: List[str] = []
            index += 1
            while index < len(lines):
                candidate = lines[index].strip()
                if (
                    candidate.startswith(fence_char * fence_length)
                    and not candidate.strip(fence_char)
                ):
                    break
                body.append(lines[index])
                index += 1
            blocks.append(CodeBlock(language=language, line=start + 1, code="\n".join(body)))
        index += 1
    return blocks


def extract_expected_output(code: str) -> Optional[List[str]]:
    """Return the commented output after the output marker, or None without a marker."""
    lines = code.splitlines()
    for position, line in enumerate(lines):
        if line.strip() == OUTPUT_MARKER:
            expected = []
            for comment in lines[position + 1:]:
                if not comment.startswith("#"):
                    break
                expected.append(comment[2:] if comment.startswith("# ") else comment[1:])
            return normalize_output("\n".join(expected))
    return None


class LintService:
    """Checks every Python snippet of a document."""

    def __init__(self):
        self.logger = get_logger(__name__)

    def lint_file(self, path: str) -> LintReport:
        """
        Lint a Markdown file.

        Raises:
            DocumentError: If the file cannot be read
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentError(str(path), str(e)) from e
        return self.lint_text(text, source=str(path))

    def lint_text(self, text: str, source: str = "<string>") -> LintReport:
        report = LintReport(source=source)
        python_blocks = [block for block in extract_code_blocks(text) if block.language in PYTHON_LANGUAGES]
        for index, block in enumerate(python_blocks, start=1):
            result = self.lint_block(block, index, source)
            report.results.append(result)
            if not result.passed:
                self.logger.warning("Snippet failed lint", source=source, line=block.line, error=result.error)

        self.logger.info("Lint finished", source=source, total=report.total, failed=report.failed)
        return report

    def lint_block(self, block: CodeBlock, index: int, source: str = "<string>") -> SnippetLintResult:
        expected = extract_expected_output(block.code)
        filename = f"<{source} snippet {index}>"

        try:
            tree = ast.parse(block.code, filename=filename)
        except SyntaxError as e:
            return SnippetLintResult(
                index=index,
                line=block.line,
                syntax_ok=False,
                expected=expected,
                error=describe_exception(e),
            )

        buffer = io.StringIO()
        namespace = {"__name__": "__snippet__"}
        error = None
        try:
            with contextlib.redirect_stdout(buffer):
                exec(compile(tree, filename, "exec"), namespace)
        except (Exception, SystemExit) as e:
            error = describe_exception(e)

        actual = normalize_output(buffer.getvalue())
        passed = error is None and (expected is None or actual == expected)
        if error is None and not passed:
            error = "output does not match the commented output"

        return SnippetLintResult(
            index=index,
            line=block.line,
            syntax_ok=True,
            executed=True,
            passed=passed,
            expected=expected,
            actual=actual,
            error=error,
        )
