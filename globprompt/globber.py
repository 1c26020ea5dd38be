import asyncio
import fnmatch
import glob
import logging
import os
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

KNOWN_OPTIONS = {"cwd", "ignore", "dot", "onlyFiles", "onlyDirectories", "absolute"}


def _as_list(value) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def _is_ignored(path: str, ignore: List[str]) -> bool:
    # A path is ignored if it, or any of its segments, matches an ignore pattern
    normalized = path.replace(os.sep, "/")
    parts = normalized.split("/")
    for pattern in ignore:
        if fnmatch.fnmatch(normalized, pattern):
            return True
        if any(fnmatch.fnmatch(part, pattern) for part in parts):
            return True
    return False


def find_paths(pattern: str, options: Optional[Dict[str, Any]] = None) -> List[str]:
    """Blocking glob over the filesystem honoring the supported options."""
    options = options or {}

    unknown = set(options) - KNOWN_OPTIONS
    if unknown:
        logger.debug("Ignoring unsupported glob options: %s", sorted(unknown))

    cwd = options.get("cwd") or os.getcwd()
    ignore = _as_list(options.get("ignore"))
    only_dirs = bool(options.get("onlyDirectories", False))
    only_files = bool(options.get("onlyFiles", not only_dirs))

    paths = glob.glob(
        pattern,
        root_dir=cwd,
        recursive=True,
        include_hidden=bool(options.get("dot", False)),
    )

    results = []
    for path in paths:
        full = os.path.join(cwd, path)
        if only_files and not os.path.isfile(full):
            continue
        if only_dirs and not os.path.isdir(full):
            continue
        if ignore and _is_ignored(path, ignore):
            continue
        results.append(os.path.abspath(full) if options.get("absolute") else path)
    return results


async def glob_paths(pattern: str, options: Optional[Dict[str, Any]] = None) -> List[str]:
    """Asynchronously glob for paths matching ``pattern``."""
    return await asyncio.to_thread(find_paths, pattern, options)
