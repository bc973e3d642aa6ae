#!/usr/bin/env python3
"""
Directory Walker Module for Megethos

Lazily walks a single directory tree and reports every non-directory entry
with its size, or the error that prevented reading it.

Symlinks are never followed. Hidden entries and entries on other file
systems can be pruned, in which case they are neither reported nor descended
into. Errors are yielded in-stream so a scan can continue past them.
"""

import os
import stat
from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True)
class WalkEntry:
    """A non-directory entry found during the walk"""

    path: str
    size: int
    is_file: bool  # True only for regular files; size is 0 otherwise


@dataclass(frozen=True)
class WalkError:
    """An entry or directory that could not be read"""

    path: str
    message: str


def is_directory(path: str) -> bool:
    """Return True if path exists and is a directory (symlinks are resolved)"""
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except OSError:
        return False


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _describe(error: OSError) -> str:
    """Error text without the path, which WalkError carries separately"""
    return error.strerror or str(error)


def walk_directory(
    root: str,
    skip_hidden: bool = False,
    same_file_system: bool = False,
) -> Iterator[Union[WalkEntry, WalkError]]:
    """Walk one directory tree

    Args:
        root: Directory to walk; never pruned itself, even when hidden
        skip_hidden: Skip entries whose name starts with a dot, without descending
        same_file_system: Skip entries on a different device than root

    Yields:
        WalkEntry for each non-directory entry, WalkError for each failure
    """
    root = str(root)
    root_dev = None
    if same_file_system:
        try:
            root_dev = os.stat(root).st_dev
        except OSError as e:
            yield WalkError(root, _describe(e))
            return

    # os.walk reports listing failures through a callback; queue them so they
    # come out in-stream
    pending: list[WalkError] = []

    def _on_error(error: OSError):
        pending.append(WalkError(error.filename or root, _describe(error)))

    def _drain() -> Iterator[WalkError]:
        while pending:
            yield pending.pop(0)

    for dirpath, dirnames, filenames in os.walk(root, topdown=True, onerror=_on_error, followlinks=False):
        yield from _drain()

        kept: list[str] = []
        for name in dirnames:
            if skip_hidden and _is_hidden(name):
                continue
            if root_dev is not None:
                full = os.path.join(dirpath, name)
                try:
                    if os.lstat(full).st_dev != root_dev:
                        continue
                except OSError as e:
                    yield WalkError(full, _describe(e))
                    continue
            kept.append(name)

        # Prune so os.walk does not descend into skipped directories
        dirnames[:] = kept

        for name in filenames:
            if skip_hidden and _is_hidden(name):
                continue

            full = os.path.join(dirpath, name)
            try:
                st = os.lstat(full)
            except OSError as e:
                yield WalkError(full, _describe(e))
                continue

            if root_dev is not None and st.st_dev != root_dev:
                continue

            if stat.S_ISREG(st.st_mode):
                yield WalkEntry(full, st.st_size, True)
            else:
                yield WalkEntry(full, 0, False)

    yield from _drain()
