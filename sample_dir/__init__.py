# sample_dir
# Replicate a directory tree and copy a bounded sample of files per
# (directory, extension) group.

__version__ = "0.1.0"
