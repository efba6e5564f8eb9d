"""Path resolution utilities for mapping local specifiers to actual files."""

import os
from pathlib import Path
from typing import Optional, Union

from .languages import Language, detect_language


PathLike = Union[str, Path]


def resolve_local(
    specifier: str,
    from_file: PathLike,
    root: PathLike,
    language: Optional[Language] = None,
) -> Optional[str]:
    """
    Resolve a local import specifier to an existing file.

    Tries, in order:
    1. The specifier joined to the importing file's directory, as is.
    2. That path with each of the language's extensions appended.
    3. If that path is a directory, its index file for each extension.

    Only existence and file/directory status are checked.

    Args:
        specifier: The raw local specifier (e.g. "./util", "..pkg.mod").
        from_file: The file containing the import.
        root: The project root directory.
        language: Language of the importing file; detected when omitted.

    Returns:
        Root-relative POSIX path of the resolved file, or None if unresolved.
    """
    if language is None:
        language = detect_language(from_file)
    extensions = language.extensions if language else ()
    rel_target = language.to_path(specifier) if language else specifier

    source_dir = os.path.dirname(os.path.abspath(from_file))
    target = os.path.normpath(os.path.join(source_dir, rel_target))

    if os.path.isfile(target):
        return get_relative_path(target, root)

    for ext in extensions:
        candidate = target + ext
        if os.path.isfile(candidate):
            return get_relative_path(candidate, root)

    if os.path.isdir(target):
        index_name = language.index_name if language else "index"
        for ext in extensions:
            candidate = os.path.join(target, index_name + ext)
            if os.path.isfile(candidate):
                return get_relative_path(candidate, root)

    return None


def get_relative_path(file_path: PathLike, root: PathLike) -> str:
    """
    Get the path relative to root, with forward slashes.

    Files outside the root keep a `../` prefix rather than failing.

    Args:
        file_path: The file path to make relative.
        root: The root directory.

    Returns:
        Root-relative POSIX path string.
    """
    rel = os.path.relpath(os.path.abspath(file_path), os.path.abspath(root))
    return Path(rel).as_posix()
