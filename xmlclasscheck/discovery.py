"""Recursive discovery of XML files with a stable, platform-independent order."""

from __future__ import annotations

import os
import re
import stat
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple

from .logging import get_logger

XML_EXTENSIONS: tuple[str, ...] = ("xml",)

_LOGGER = get_logger("discovery")

_LEADING_CURRENT_DIR = re.compile(r"^(\.[/\\]+)+")
_SEPARATOR_RUN = re.compile(r"[/\\]+")


def discover_xml_files(directory: str | os.PathLike[str]) -> List[str]:
    """Return the XML files below ``directory`` in deterministic order.

    Symbolic links are followed. Entries that are not readable regular files
    are skipped with a warning. If the walk itself fails, the files collected
    up to that point are still returned.
    """
    directory_name = os.fspath(directory)
    file_list: List[str] = []
    try:
        for path in _iter_candidate_files(directory_name):
            file_list.append(path)
    except OSError as exc:
        _LOGGER.warning("Caught exception while listing files in '%s': %s", directory_name, exc)

    ordered = normalize_file_list(file_list)
    _LOGGER.debug("Discovered %d XML file(s) under %s", len(ordered), directory_name)
    return ordered


def normalize_file_list(paths: Iterable[str]) -> List[str]:
    """Strip leading ``./`` and sort by separator-insensitive ordinal order.

    ``src/a.xml``, ``src//a.xml`` and ``src\\a.xml`` share one sort key, so only
    the last of them is kept.
    """
    normalized: Dict[str, str] = {}
    for path in paths:
        path = _LEADING_CURRENT_DIR.sub("", path)
        normalized[_SEPARATOR_RUN.sub("\0", path)] = path
    return [normalized[key] for key in sorted(normalized, key=_ordinal_key)]


def has_xml_extension(filename: str) -> bool:
    _, dot, extension = filename.rpartition(".")
    return bool(dot) and extension.lower() in XML_EXTENSIONS


def _ordinal_key(key: str) -> bytes:
    return os.fsencode(key)


def _iter_candidate_files(directory_name: str) -> Iterator[str]:
    # Directory identities on the path from the root down to each pending directory.
    ancestors: Dict[str, FrozenSet[Tuple[int, int]]] = {}

    def _on_error(exc: OSError) -> None:
        _LOGGER.warning("Unable to list directory %s: %s", exc.filename or directory_name, exc.strerror or exc)

    for dirpath, dirnames, filenames in os.walk(directory_name, onerror=_on_error, followlinks=True):
        identity = _directory_identity(dirpath)
        chain = ancestors.pop(dirpath, frozenset())
        if identity is None or identity in chain:
            # Symlink pointing back at one of its own ancestors.
            dirnames[:] = []
            continue

        chain = chain | {identity}
        dirnames.sort()
        for name in dirnames:
            ancestors[os.path.join(dirpath, name)] = chain

        for filename in filenames:
            if not has_xml_extension(filename):
                continue
            path = os.path.join(dirpath, filename)
            if _is_readable_file(path):
                yield path


def _directory_identity(path: str) -> Optional[Tuple[int, int]]:
    try:
        stat_result = os.stat(path)
    except OSError as exc:
        _LOGGER.warning("Unable to read directory %s: %s", path, exc.strerror or exc)
        return None
    return stat_result.st_dev, stat_result.st_ino


def _is_readable_file(path: str) -> bool:
    if not os.path.isfile(path):
        _LOGGER.warning(
            "Unable to read file %s: not a regular file (type %s)",
            os.path.realpath(path),
            _entry_type(path),
        )
        return False
    if not os.access(path, os.R_OK):
        _LOGGER.warning(
            "Unable to read file %s: not readable, permissions=%s(octal)",
            os.path.realpath(path),
            _permissions(path),
        )
        return False
    return True


def _entry_type(path: str) -> str:
    try:
        mode = os.lstat(path).st_mode
    except OSError:
        return "unknown"
    if stat.S_ISLNK(mode):
        return "broken link"
    if stat.S_ISDIR(mode):
        return "dir"
    if stat.S_ISFIFO(mode):
        return "fifo"
    if stat.S_ISSOCK(mode):
        return "socket"
    if stat.S_ISCHR(mode):
        return "char"
    if stat.S_ISBLK(mode):
        return "block"
    return "unknown"


def _permissions(path: str) -> str:
    try:
        return format(stat.S_IMODE(os.stat(path).st_mode), "o")
    except OSError:
        return "?"


__all__ = ["XML_EXTENSIONS", "discover_xml_files", "has_xml_extension", "normalize_file_list"]
