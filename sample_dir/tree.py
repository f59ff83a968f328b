# tree.py
# Purpose: Mirror the source directory hierarchy under the destination root
# Date: 2026-10-17

import logging
from pathlib import Path
from typing import Iterator, List, Optional

from .errors import TreeReplicationError
from .report import SampleReport
from .walk import join_rel, sorted_walk

logger = logging.getLogger(__name__)


def iter_dirs(src_root: Path, exclude: Optional[Path] = None) -> Iterator[str]:
    """Yield every directory below `src_root` (not the root) as a relative path."""
    for rel_dir, subdirs, _ in sorted_walk(src_root, exclude):
        for name in subdirs:
            yield join_rel(rel_dir, name)


def replicate_tree(src_root: Path, dest_root: Path, report: Optional[SampleReport] = None) -> List[str]:
    """
    Create an empty copy of the directory tree of `src_root` inside `dest_root`.

    The source is listed completely before anything is created, and
    `dest_root` itself is left out of the listing when it sits inside the
    source. Directories that already exist are left alone. The first
    directory that cannot be checked or created stops the run with
    TreeReplicationError.

    Returns:
        Relative paths of the directories created by this call.
    """
    src_root = Path(src_root)
    dest_root = Path(dest_root)
    created = []
    for rel_dir in list(iter_dirs(src_root, exclude=dest_root)):
        target = dest_root / rel_dir
        try:
            if target.is_dir():
                if report is not None:
                    report.dirs_existing += 1
                continue
            logger.info(f"Creating {target} ...")
            target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TreeReplicationError(target, e.strerror or str(e)) from e
        created.append(rel_dir)
        if report is not None:
            report.dirs_created += 1
    return created
