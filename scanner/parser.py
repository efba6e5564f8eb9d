"""Parsers for extracting import specifiers from source files."""

import re
from pathlib import Path
from typing import Iterable, List, Tuple

from .lexer import mask_javascript, mask_python


# A quoted string literal on the masked text. Masked contents are spaces, so
# the body never holds a quote.
_LITERAL = r"""(?P<lit>(?P<q>['"])[^'"\n]*(?P=q))"""

# Import clause between `import`/`export` and `from`: default and namespace
# bindings, braces, `type` modifiers, `as` aliases.
_CLAUSE = r"[\w$*{},\s]*?"

JS_PATTERNS = [
    # import x from 'mod', import { a } from 'mod', import 'mod'
    re.compile(
        r"(?:^|[;}])\s*import\b\s*(?:" + _CLAUSE + r"\bfrom\s*)?" + _LITERAL,
        re.MULTILINE,
    ),
    # export * from 'mod', export { a } from 'mod'
    re.compile(
        r"(?:^|[;}])\s*export\b" + _CLAUSE + r"\bfrom\s*" + _LITERAL,
        re.MULTILINE,
    ),
    # require('mod'), import x = require('mod')
    re.compile(
        r"(?:^|[^.\w$])require\s*\(\s*" + _LITERAL + r"\s*\)",
        re.MULTILINE,
    ),
    # import('mod')
    re.compile(
        r"(?<![.\w$])import\s*\(\s*" + _LITERAL + r"\s*\)",
        re.MULTILINE,
    ),
]

PY_FROM_PATTERN = re.compile(
    r"(?:^|;)[ \t]*from[ \t]+(\.*[\w.]*?)(?:[ \t]+|(?<=\.))import\b",
    re.MULTILINE,
)
PY_IMPORT_PATTERN = re.compile(
    r"(?:^|;)[ \t]*import[ \t]+([\w.][\w., \t]*)",
    re.MULTILINE,
)
_PY_ALIAS = re.compile(r"\s+as\s+")
_PY_MODULE_NAME = re.compile(r"^[\w.]+$")


def _ordered_unique(found: Iterable[Tuple[int, str]]) -> List[str]:
    """Order (offset, specifier) pairs by offset and collapse duplicates."""
    seen = set()
    result: List[str] = []
    for _, specifier in sorted(found, key=lambda item: item[0]):
        if specifier and specifier not in seen:
            seen.add(specifier)
            result.append(specifier)
    return result


def parse_javascript(source: str) -> List[str]:
    """
    Extract import specifiers from JavaScript/TypeScript source.

    Handles static `import ... from`, side-effect `import`, `export ... from`,
    `require()` and dynamic `import()`. Matching runs on masked text so
    imports mentioned in comments or strings are ignored, while the specifier
    itself is read from the original text at the literal's position.

    Args:
        source: File contents.

    Returns:
        Specifiers in first-occurrence order, without duplicates.
    """
    masked, literals = mask_javascript(source)
    found: List[Tuple[int, str]] = []

    for pattern in JS_PATTERNS:
        for match in pattern.finditer(masked):
            start = match.start("lit")
            end = literals.get(start)
            if end is None:
                continue
            found.append((start, source[start + 1:end - 1]))

    return _ordered_unique(found)


def parse_python(source: str) -> List[str]:
    """
    Extract imported module names from Python source.

    Handles `import a, b as c` and `from .pkg.mod import x`. Aliases are
    stripped to the underlying module name.

    Args:
        source: File contents.

    Returns:
        Module names in first-occurrence order, without duplicates.
    """
    masked = mask_python(source)
    # Join backslash continuations; two characters in, two out.
    masked = masked.replace("\\\n", "  ")
    found: List[Tuple[int, str]] = []

    for match in PY_FROM_PATTERN.finditer(masked):
        module = match.group(1).strip()
        if module:
            found.append((match.start(1), module))

    for match in PY_IMPORT_PATTERN.finditer(masked):
        offset = match.start(1)
        for part in match.group(1).split(","):
            name = _PY_ALIAS.split(part.strip())[0].strip()
            if name and _PY_MODULE_NAME.match(name):
                found.append((offset, name))
            offset += len(part) + 1

    return _ordered_unique(found)


def read_source(file_path: Path) -> str:
    """
    Read a source file as text.

    Undecodable bytes are replaced rather than raised on, so a stray binary
    or mis-encoded file only degrades the scan.

    Raises:
        OSError: If the file cannot be read.
    """
    return Path(file_path).read_text(encoding="utf-8", errors="replace")
