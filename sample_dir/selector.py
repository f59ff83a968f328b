# selector.py
# Purpose: Pick the first N files of every (directory, extension) group
# Date: 2026-10-17

import logging
from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Tuple

from .ext_filter import NO_EXTENSION, ExtensionFilter
from .report import SampleReport
from .walk import join_rel, sorted_walk

logger = logging.getLogger(__name__)


def iter_files(src_root: Path, exclude: Optional[Path] = None) -> Iterator[str]:
    """
    Yield relative paths of all regular files under `src_root`, leaving out
    anything below `exclude`.

    Order: the files of a directory sorted by name, then each subdirectory
    (sorted by name) recursively. This order decides which files win when a
    group holds more than `sample_size` candidates.
    """
    for rel_dir, _, files in sorted_walk(src_root, exclude):
        for name in files:
            yield join_rel(rel_dir, name)


def split_rel_path(rel_path: str) -> Tuple[str, str]:
    """'a/b/c.txt' -> ('a/b', 'c.txt'); a root-level file gets ''."""
    rel_dir, _, name = rel_path.rpartition("/")
    return rel_dir, name


def file_extension(name: str):
    """Text after the last '.', or NO_EXTENSION when the name has no '.'."""
    if "." not in name:
        return NO_EXTENSION
    return name.rsplit(".", 1)[1]


def select_samples(
    rel_paths: Iterable[str],
    sample_size: int,
    ext_filter: Optional[ExtensionFilter] = None,
    counts: Optional[Dict[tuple, int]] = None,
    report: Optional[SampleReport] = None,
) -> Iterator[str]:
    """
    Lazily yield the paths that make it into the sample, in input order.

    Args:
        rel_paths: Relative file paths, in traversal order.
        sample_size: Maximum selections per (directory, extension) group.
        ext_filter: Extension rule; None lets everything through.
        counts: Optional mapping (rel_dir, ext) -> selections so far. Pass one
                in to inspect group sizes afterwards.
        report: Optional run report to update.
    """
    if isinstance(sample_size, bool) or not isinstance(sample_size, int):
        raise ValueError(f"sample_size must be an int, got {sample_size!r}")
    if sample_size < 0:
        raise ValueError(f"sample_size must be >= 0, got {sample_size}")
    if counts is None:
        counts = defaultdict(int)

    for rel_path in rel_paths:
        if report is not None:
            report.files_scanned += 1
        rel_dir, name = split_rel_path(rel_path)
        ext = file_extension(name)
        if ext_filter is not None and not ext_filter.allows(ext):
            logger.debug(f"Filtered out {rel_path}")
            continue

        key = (rel_dir, ext)
        taken = counts.get(key, 0)
        if taken >= sample_size:
            continue
        # Counted when chosen, whether or not the copy later succeeds
        counts[key] = taken + 1
        if report is not None:
            report.files_selected += 1
        yield rel_path
