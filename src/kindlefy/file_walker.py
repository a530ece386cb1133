"""Utility for walking the scan target."""

import logging
import os
import stat

logger = logging.getLogger(__name__)


def _raise_walk_error(error: OSError) -> None:
    raise error


def _is_regular_file(path: str) -> bool:
    # Follows symlinks; a dangling link raises like any unreadable file
    return stat.S_ISREG(os.stat(path).st_mode)


def walk(root: str) -> list[str]:
    """
    Return every regular file beneath root, at any depth.

    Paths are root-joined (``root/sub/file.js``). Directories and files are
    visited in sorted order so repeated scans of the same tree report the same
    way. Symlinked directories are followed, but each real directory is walked
    once, so link cycles terminate. FIFOs, sockets and device nodes are left
    out. Unreadable directories raise OSError.
    """
    files = []
    seen = {os.path.realpath(root)}

    for dirpath, dirnames, filenames in os.walk(
        root, onerror=_raise_walk_error, followlinks=True
    ):
        kept = []
        for name in sorted(dirnames):
            real = os.path.realpath(os.path.join(dirpath, name))
            if real in seen:
                logger.debug(f"Skipping already visited directory: {os.path.join(dirpath, name)}")
                continue
            seen.add(real)
            kept.append(name)
        dirnames[:] = kept

        for name in sorted(filenames):
            path = os.path.join(dirpath, name)
            if not _is_regular_file(path):
                logger.debug(f"Skipping non-regular file: {path}")
                continue
            files.append(path)

    return files


def resolve_targets(target: str) -> list[str]:
    """
    Expand the CLI target into the list of files to scan.

    A directory is walked; anything else is scanned as a single file. A missing
    target raises FileNotFoundError from the stat call.
    """
    mode = os.stat(target).st_mode
    if stat.S_ISDIR(mode):
        files = walk(target)
        logger.info(f"Found {len(files)} files under {target}")
        return files
    return [target]
