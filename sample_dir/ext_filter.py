# ext_filter.py
# Purpose: Parse the include/exclude extension list used to restrict sampling
# Date: 2026-10-17

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

MODE_NONE = "none"
MODE_INCLUDE = "include"
MODE_EXCLUDE = "exclude"


class _NoExtension:
    """Sentinel for file names without a '.'; never equal to a real extension."""

    def __repr__(self):
        return "NO_EXTENSION"


NO_EXTENSION = _NoExtension()


@dataclass(frozen=True)
class ExtensionFilter:
    mode: str = MODE_NONE
    extensions: FrozenSet[str] = field(default_factory=frozenset)

    def allows(self, extension) -> bool:
        if self.mode == MODE_INCLUDE:
            return extension in self.extensions
        if self.mode == MODE_EXCLUDE:
            return extension not in self.extensions
        return True


def parse_extension_filter(ext_list: Optional[str]) -> ExtensionFilter:
    """
    Turn a list like "csv,txt" or "!log,tmp" into an ExtensionFilter.

    Only the first entry decides the mode; a leading "!" is then stripped from
    every entry, so "!log,!tmp" and "!log,tmp" are the same exclude list.
    Entries that end up empty are dropped.
    """
    if not ext_list:
        return ExtensionFilter()

    tokens = ext_list.split(",")
    mode = MODE_EXCLUDE if tokens[0].startswith("!") else MODE_INCLUDE
    exts = set()
    for token in tokens:
        ext = token[1:] if token.startswith("!") else token
        if ext:
            exts.add(ext)
    return ExtensionFilter(mode=mode, extensions=frozenset(exts))
