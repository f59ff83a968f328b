# errors.py
# Purpose: Exception types raised by the sampling run
# Date: 2026-10-17


class SampleDirError(Exception):
    """Base class for errors that abort a sampling run."""


class ConfigError(SampleDirError):
    """Invalid sample size, extension list or config file."""


class SourceNotFoundError(SampleDirError):
    def __init__(self, path):
        super().__init__(f"Source directory ({path}) does not exist!")
        self.path = path


class DestinationError(SampleDirError):
    def __init__(self, path, reason=None):
        msg = f"Unable to create destination directory ({path})!"
        if reason:
            msg = f"{msg} {reason}"
        super().__init__(msg)
        self.path = path


class TreeReplicationError(SampleDirError):
    """Raised when a mirrored directory cannot be created; the run stops here."""

    def __init__(self, path, reason=None):
        msg = f"Unable to create directory {path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
        self.path = path
