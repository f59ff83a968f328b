# walk.py
# Purpose: Deterministic traversal of the source tree shared by both phases
# Date: 2026-10-17

import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


def _log_walk_error(err: OSError) -> None:
    logger.warning(f"Cannot read {err.filename}: {err.strerror}")


def sorted_walk(root: Path, exclude: Optional[Path] = None) -> Iterator[Tuple[str, List[str], List[str]]]:
    """
    Walk `root` top-down, yielding (rel_dir, subdir_names, file_names).

    rel_dir is POSIX style and "" for the root itself. Names are sorted so
    sampling is reproducible across filesystems. Symlinks are neither followed
    nor reported, and only regular files are listed.

    Args:
        root: Directory to walk.
        exclude: Directory to leave out together with everything below it,
                 e.g. a destination that lives inside the source.
    """
    root = Path(root).resolve()
    skip = str(Path(exclude).resolve()) if exclude is not None else None
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        # Prune in place so os.walk visits subdirectories in sorted order
        dirnames[:] = sorted(
            d for d in dirnames
            if not os.path.islink(os.path.join(dirpath, d)) and os.path.join(dirpath, d) != skip
        )
        files = sorted(
            f for f in filenames
            if not os.path.islink(os.path.join(dirpath, f)) and os.path.isfile(os.path.join(dirpath, f))
        )
        rel_dir = Path(dirpath).relative_to(root).as_posix()
        if rel_dir == ".":
            rel_dir = ""
        yield rel_dir, dirnames, files


def join_rel(rel_dir: str, name: str) -> str:
    return f"{rel_dir}/{name}" if rel_dir else name
