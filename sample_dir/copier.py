# copier.py
# Purpose: Copy selected files into the mirrored tree without overwriting
# Date: 2026-10-17

import enum
import logging
import shutil
from pathlib import Path
from typing import Iterable, Optional

from .report import SampleReport
from .selector import split_rel_path

logger = logging.getLogger(__name__)


class CopyResult(enum.Enum):
    COPIED = "copied"
    SKIPPED_EXISTS = "skipped"
    FAILED = "failed"


def _copy_no_clobber(src: Path, dst: Path) -> None:
    # "xb" raises FileExistsError instead of replacing an existing file
    with open(src, "rb") as fsrc:
        try:
            with open(dst, "xb") as fdst:
                shutil.copyfileobj(fsrc, fdst)
        except FileExistsError:
            raise
        except BaseException:
            dst.unlink(missing_ok=True)
            raise
    try:
        shutil.copystat(src, dst)
    except OSError as e:
        # Content is complete; only timestamps/permissions are missing
        logger.warning(f"Copied {dst} but could not copy its metadata ({e.strerror or e})")


def copy_sample(src_root: Path, dest_root: Path, rel_path: str,
                report: Optional[SampleReport] = None) -> CopyResult:
    """
    Copy one selected file to the same relative location under `dest_root`.

    An existing destination file is never replaced; the copy is skipped
    quietly. Any other OSError is logged and reported as FAILED so the caller
    can carry on with the next file.
    """
    src = Path(src_root) / rel_path
    rel_dir, _ = split_rel_path(rel_path)
    dest_dir = Path(dest_root) / rel_dir
    dst = dest_dir / src.name

    logger.info(f"  Copying {rel_path} to {dest_dir}/ ...")
    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
        _copy_no_clobber(src, dst)
    except FileExistsError:
        if dst.exists() or dst.is_symlink():
            logger.debug(f"  {dst} already exists, skipping")
            if report is not None:
                report.files_skipped += 1
            return CopyResult.SKIPPED_EXISTS
        # mkdir hit a file where the directory should be
        logger.error(f"Failed: {rel_path} ({dest_dir} is not a directory)")
    except OSError as e:
        logger.error(f"Failed: {rel_path} ({e.strerror or e})")
    else:
        if report is not None:
            report.files_copied += 1
        return CopyResult.COPIED

    if report is not None:
        report.failed.append(rel_path)
    return CopyResult.FAILED


def copy_samples(src_root: Path, dest_root: Path, rel_paths: Iterable[str],
                 report: Optional[SampleReport] = None) -> SampleReport:
    if report is None:
        report = SampleReport()
    for rel_path in rel_paths:
        result = copy_sample(src_root, dest_root, rel_path, report)
        if result is CopyResult.COPIED and report.files_copied % 1000 == 0:
            logger.info(f"Copied {report.files_copied} files so far…")
    return report
