"""Entry point discovery for projects analysed without explicit entries."""

import json
import logging
from pathlib import Path
from typing import List


logger = logging.getLogger(__name__)

COMMON_ENTRIES = [
    "index.js", "index.ts", "src/index.js", "src/index.ts",
    "main.js", "main.ts", "src/main.js", "src/main.ts",
    "app.js", "app.ts", "src/app.js", "src/app.ts",
    "main.py", "app.py", "src/main.py",
]


def _manifest_entries(root: Path) -> List[str]:
    """Read `main` and `bin` from package.json, if there is one."""
    manifest = root / "package.json"
    if not manifest.is_file():
        return []

    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable %s: %s", manifest, e)
        return []
    if not isinstance(data, dict):
        return []

    entries: List[str] = []
    main = data.get("main")
    if isinstance(main, str) and main:
        entries.append(main)

    bins = data.get("bin")
    if isinstance(bins, str):
        entries.append(bins)
    elif isinstance(bins, dict):
        entries.extend(v for v in bins.values() if isinstance(v, str))

    return entries


def discover_entries(root: Path) -> List[str]:
    """
    Find likely entry points in a project directory.

    Looks at package.json `main` and `bin` first, then at conventional file
    names that exist on disk.

    Args:
        root: Project root directory.

    Returns:
        Root-relative entry paths, in priority order, without duplicates.
    """
    root = Path(root)
    entries = _manifest_entries(root)

    for entry in COMMON_ENTRIES:
        if (root / entry).exists():
            entries.append(entry)

    unique = list(dict.fromkeys(entries))
    logger.debug("Discovered entries in %s: %s", root, unique)
    return unique
