"""
Lexical masking of source text before import matching.

Both maskers return text of exactly the same length as the input. Comments
are blanked out, string and template literal contents are replaced by spaces
while their delimiters are kept, and newlines are always preserved so that
line-anchored patterns and character offsets keep pointing at the original
source. The start offset of every quoted string literal is recorded so a
caller can read the real literal back once the surrounding import syntax has
matched on the masked text.
"""

from typing import Dict, List, Tuple


def _blank(text: str) -> str:
    """Replace every character except newlines with a space."""
    return "".join("\n" if ch == "\n" else " " for ch in text)


def _scan_quoted(source: str, start: int, quote: str) -> int:
    """
    Find the end of a single-line quoted string starting at *start*.

    Returns the offset just past the closing quote. An unterminated string
    stops at the end of its line.
    """
    i = start + 1
    n = len(source)
    while i < n:
        ch = source[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        if ch == "\n":
            return i
        i += 1
    return n


# Characters after which a `/` starts a regex literal rather than a division.
_REGEX_PRECEDERS = frozenset("(,=:[!&|?{};")
_REGEX_KEYWORDS = frozenset({"return", "typeof"})


def _scan_regex(source: str, start: int) -> int:
    """
    Find the end of a regex literal body starting at *start*.

    Returns the offset just past the closing slash, or -1 if the line ends
    first, in which case the slash was not a regex after all.
    """
    i = start + 1
    n = len(source)
    in_class = False
    while i < n:
        ch = source[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "\n":
            return -1
        if in_class:
            if ch == "]":
                in_class = False
        elif ch == "[":
            in_class = True
        elif ch == "/":
            return i + 1
        i += 1
    return -1


def mask_javascript(source: str) -> Tuple[str, Dict[int, int]]:
    """
    Mask comments and literal contents in JavaScript/TypeScript source.

    Regex literals are recognised from the preceding token, so a quote or
    `/*` inside a pattern does not open a string or comment.

    Args:
        source: File contents.

    Returns:
        Tuple of (masked text, mapping of string literal start offset to
        end offset). Template literals are masked but not recorded, since
        they never name a module.
    """
    out: List[str] = []
    literals: Dict[int, int] = {}
    i = 0
    n = len(source)
    # Last significant character and identifier emitted, for regex detection
    prev = ""
    word = ""
    in_word = False

    while i < n:
        ch = source[i]
        nxt = source[i + 1] if i + 1 < n else ""

        if ch == "/" and nxt == "/":
            end = source.find("\n", i)
            end = n if end == -1 else end
            out.append(_blank(source[i:end]))
            i = end
            in_word = False
            continue
        if ch == "/" and nxt == "*":
            end = source.find("*/", i + 2)
            end = n if end == -1 else end + 2
            out.append(_blank(source[i:end]))
            i = end
            in_word = False
            continue

        if ch == "/" and (not prev or prev in _REGEX_PRECEDERS or word in _REGEX_KEYWORDS):
            end = _scan_regex(source, i)
            if end != -1:
                out.append("/" + _blank(source[i + 1:end - 1]) + "/")
                i = end
                prev, word, in_word = "/", "", False
                continue

        if ch == "`":
            j = i + 1
            while j < n and source[j] != "`":
                j += 2 if source[j] == "\\" else 1
            end = min(j + 1, n)
            if end - i >= 2 and source[end - 1] == "`":
                out.append("`" + _blank(source[i + 1:end - 1]) + "`")
            else:
                out.append("`" + _blank(source[i + 1:end]))
            i = end
            prev, word, in_word = "`", "", False
        elif ch in ("'", '"'):
            end = _scan_quoted(source, i, ch)
            closed = end - i >= 2 and source[end - 1] == ch
            if closed:
                literals[i] = end
                out.append(ch + _blank(source[i + 1:end - 1]) + ch)
            else:
                out.append(ch + _blank(source[i + 1:end]))
            i = end
            prev, word, in_word = ch, "", False
        else:
            out.append(ch)
            i += 1
            if ch.isspace():
                in_word = False
            elif ch.isalnum() or ch in "_$":
                word = word + ch if in_word else ch
                in_word = True
                prev = ch
            else:
                prev, word, in_word = ch, "", False

    return "".join(out), literals


def mask_python(source: str) -> str:
    """
    Mask comments, docstrings and string contents in Python source.

    Triple-quoted strings may span lines; single-quoted ones end at the
    line end when unterminated.
    """
    out: List[str] = []
    i = 0
    n = len(source)

    while i < n:
        ch = source[i]

        if ch == "#":
            end = source.find("\n", i)
            end = n if end == -1 else end
            out.append(_blank(source[i:end]))
            i = end
        elif source.startswith(('"""', "'''"), i):
            quote = source[i:i + 3]
            j = i + 3
            while j < n and not source.startswith(quote, j):
                j += 2 if source[j] == "\\" else 1
            end = min(j + 3, n)
            out.append(_blank(source[i:end]))
            i = end
        elif ch in ("'", '"'):
            end = _scan_quoted(source, i, ch)
            out.append(_blank(source[i:end]))
            i = end
        else:
            out.append(ch)
            i += 1

    return "".join(out)
