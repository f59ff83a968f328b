# runner.py
# Purpose: Run both sampling phases: mirror the tree, then select and copy
# Date: 2026-10-17

import logging
from pathlib import Path

from .config_utils import SampleConfig, parse_sample_size
from .copier import copy_samples
from .errors import DestinationError, SourceNotFoundError
from .ext_filter import parse_extension_filter
from .report import SampleReport
from .selector import iter_files, select_samples
from .tree import replicate_tree

logger = logging.getLogger(__name__)


def prepare_roots(src, dest):
    """Resolve both roots, check the source and create the destination."""
    src_root = Path(src)
    if not src_root.is_dir():
        raise SourceNotFoundError(src)
    src_root = src_root.resolve()
    dest_root = Path(dest).resolve()
    try:
        dest_root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DestinationError(dest_root, e.strerror) from e
    return src_root, dest_root


def run_sample(src, dest, cfg: SampleConfig = None) -> SampleReport:
    """
    Sample `src` into `dest`.

    The whole directory tree is created before any file is copied. Tree
    errors propagate; per-file copy errors end up in the returned report.
    """
    if cfg is None:
        cfg = SampleConfig()
    # Fields can be reassigned after construction
    sample_size = parse_sample_size(cfg.sample_size)
    ext_filter = parse_extension_filter(cfg.sample_exts)
    src_root, dest_root = prepare_roots(src, dest)
    report = SampleReport()

    logger.info(f"Sampling {sample_size} files from {src} to {dest} ...")
    if ext_filter.extensions:
        logger.info(f"Extension filter: {ext_filter.mode} {', '.join(sorted(ext_filter.extensions))}")

    logger.info("Building directory list ...")
    replicate_tree(src_root, dest_root, report)

    logger.info(f"Building sample of {sample_size} files per directory ...")
    selected = select_samples(iter_files(src_root, exclude=dest_root), sample_size, ext_filter, report=report)
    copy_samples(src_root, dest_root, selected, report)

    report.log_summary()
    return report
