# tests/conftest.py
# Purpose: Shared fixtures that build small source trees on disk

from pathlib import Path

import pytest


def make_tree(root: Path, rel_paths, content="x"):
    """Create files (and their parent dirs) under root. Paths ending in '/' are dirs."""
    for rel in rel_paths:
        p = root / rel
        if rel.endswith("/"):
            p.mkdir(parents=True, exist_ok=True)
            continue
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(f"{content}:{rel}")
    return root


def files_under(root: Path):
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())


def dirs_under(root: Path):
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_dir())


@pytest.fixture
def src_tree(tmp_path: Path) -> Path:
    """
    src/
      readme.md  Makefile
      a/ 1.csv .. 7.csv  notes.txt  LICENSE  COPYING
      a/deep/nested/x.log
      b/ run.log  run.tmp  data.csv
      empty/
    """
    src = tmp_path / "src"
    paths = ["readme.md", "Makefile"]
    paths += [f"a/{i}.csv" for i in range(1, 8)]
    paths += ["a/notes.txt", "a/LICENSE", "a/COPYING", "a/deep/nested/x.log"]
    paths += ["b/run.log", "b/run.tmp", "b/data.csv", "empty/"]
    return make_tree(src, paths)
