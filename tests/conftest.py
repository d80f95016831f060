"""Shared fixtures and helpers for tests."""

from dataclasses import dataclass
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        rel = item.path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Decompiled source tree fixture
# ---------------------------------------------------------------------------

PACKAGE_ROOT = "com.domain"
ALPHA_PACKAGE = f"{PACKAGE_ROOT}.alpha"
BRAVO_PACKAGE = f"{PACKAGE_ROOT}.bravo"
R_STRING = "R$string.java"


@dataclass(frozen=True)
class SourceTree:
    root: Path
    root_class: Path
    root_r: Path
    class_a: Path
    alpha_r: Path
    class_b: Path
    bravo_r: Path

    @property
    def all_files(self) -> set[Path]:
        return {self.root_class, self.root_r, self.class_a, self.alpha_r, self.class_b, self.bravo_r}


def write_source(path: Path, package: str, body: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"package {package};{body}", encoding="utf-8")
    return path


@pytest.fixture
def source_tree(tmp_path: Path) -> SourceTree:
    """Root and two sub-packages, each with one class and one R$string.java."""
    return SourceTree(
        root=tmp_path,
        root_class=write_source(tmp_path / "Root.java", PACKAGE_ROOT),
        root_r=write_source(tmp_path / R_STRING, PACKAGE_ROOT),
        class_a=write_source(tmp_path / "alpha" / "ClassA.java", ALPHA_PACKAGE),
        alpha_r=write_source(tmp_path / "alpha" / R_STRING, ALPHA_PACKAGE),
        class_b=write_source(tmp_path / "bravo" / "ClassB.java", BRAVO_PACKAGE),
        bravo_r=write_source(tmp_path / "bravo" / R_STRING, BRAVO_PACKAGE),
    )
