"""
Shared fixtures: small directory trees to rename
"""

import os
from pathlib import Path
from typing import List

import pytest


def write(path: Path, content: str = "x") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


def all_paths(root: Path) -> List[str]:
    """Every path under root, relative, sorted"""
    return sorted(str(p.relative_to(root)) for p in root.rglob("*"))


@pytest.fixture
def mixed_tree(tmp_path) -> Path:
    """
    root/
      File One.txt
      another-file.TXT
      Nested Dir/
        Deep File.testdata.js
        Deep Directory/
          Inner File.md
    """
    root = tmp_path / "root"
    write(root / "File One.txt", "x")
    write(root / "another-file.TXT", "y")
    write(root / "Nested Dir" / "Deep File.testdata.js", "z")
    write(root / "Nested Dir" / "Deep Directory" / "Inner File.md", "a")
    return root


@pytest.fixture
def case_sensitive_fs(tmp_path) -> bool:
    """Whether tmp_path lives on a case-sensitive filesystem"""
    probe = write(tmp_path / "case_probe")
    sensitive = not (tmp_path / "CASE_PROBE").exists()
    probe.unlink()
    return sensitive


@pytest.fixture(scope="session")
def qt_app():
    """Shared QApplication on the offscreen platform"""
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    return app
