"""Per-language scanning and resolution settings, selected by file extension."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union

from .classifier import classify_javascript, classify_python
from .parser import parse_javascript, parse_python


JAVASCRIPT = "javascript"
PYTHON = "python"


def _identity_path(specifier: str) -> str:
    return specifier


def python_module_to_path(specifier: str) -> str:
    """
    Turn a relative Python module name into a relative filesystem path.

    One leading dot is the current package, each further dot one level up:
    `.a.b` -> `./a/b`, `..a` -> `../a`, `.` -> `.`, `...` -> `../..`.
    Absolute module names only have their dots turned into separators.
    """
    stripped = specifier.lstrip(".")
    dots = len(specifier) - len(stripped)
    parts: List[str] = []
    if dots:
        parts.append(".")
        parts.extend([".."] * (dots - 1))
    if stripped:
        parts.extend(stripped.split("."))
    return "/".join(parts)


@dataclass(frozen=True)
class Language:
    """
    Everything the builder needs to know about one source language.

    Attributes:
        name: Language name recorded on graph nodes.
        extensions: Recognised file extensions, in resolution order.
        index_name: Stem of the file that stands for a directory.
        scan: Extracts raw specifiers from source text.
        classify: Maps a specifier to local, builtin or external.
        to_path: Turns a local specifier into a relative path.
    """

    name: str
    extensions: Tuple[str, ...]
    index_name: str
    scan: Callable[[str], List[str]]
    classify: Callable[[str], str]
    to_path: Callable[[str], str] = _identity_path


LANGUAGES: Dict[str, Language] = {
    JAVASCRIPT: Language(
        name=JAVASCRIPT,
        extensions=(".js", ".mjs", ".cjs", ".jsx", ".ts", ".tsx", ".mts", ".cts"),
        index_name="index",
        scan=parse_javascript,
        classify=classify_javascript,
    ),
    PYTHON: Language(
        name=PYTHON,
        extensions=(".py",),
        index_name="__init__",
        scan=parse_python,
        classify=classify_python,
        to_path=python_module_to_path,
    ),
}

_BY_EXTENSION: Dict[str, Language] = {
    ext: lang for lang in LANGUAGES.values() for ext in lang.extensions
}


def detect_language(file_path: Union[str, Path]) -> Optional[Language]:
    """Return the language for a file's extension, or None if unrecognised."""
    return _BY_EXTENSION.get(Path(file_path).suffix.lower())
