# report.py
# Purpose: Per-run counters shown in the summary and used for the exit code
# Date: 2026-10-17

import logging
from dataclasses import dataclass, field
from typing import List

logger = logging.getLogger(__name__)


@dataclass
class SampleReport:
    dirs_created: int = 0
    dirs_existing: int = 0
    files_scanned: int = 0
    files_selected: int = 0
    files_copied: int = 0
    files_skipped: int = 0
    failed: List[str] = field(default_factory=list)

    @property
    def files_failed(self) -> int:
        return len(self.failed)

    def log_summary(self) -> None:
        logger.info("--- Sampling Summary ---")
        logger.info(f"Directories created: {self.dirs_created} ({self.dirs_existing} already present)")
        logger.info(f"Files scanned: {self.files_scanned}")
        logger.info(f"Files selected: {self.files_selected}")
        logger.info(f"Files copied: {self.files_copied}")
        logger.info(f"Skipped (already in destination): {self.files_skipped}")
        if self.failed:
            logger.warning(f"Failed to copy: {self.files_failed}")
