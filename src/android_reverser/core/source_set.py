from collections.abc import Iterable
from pathlib import Path

from android_reverser.core.names import filter_resource_files
from android_reverser.core.packages import is_in_package
from android_reverser.core.scanner import ScanResult, scan_source_files
from android_reverser.models import DEFAULT_CONFIG, SourceSetConfig


class SourceSet:
    """The source files under one root directory, with filtered views.

    Nothing is cached: every call walks the tree again unless it is handed a
    :class:`ScanResult` from :meth:`scan`, so two calls may disagree if the
    tree changed in between. Traversal and read failures show up as missing
    files, never as exceptions; use :meth:`scan` to tell a failed walk from
    an empty tree.
    """

    def __init__(self, root: str | Path, config: SourceSetConfig | None = None) -> None:
        self._root = Path(root)
        self._config = config or DEFAULT_CONFIG

    @property
    def root(self) -> Path:
        return self._root

    @property
    def config(self) -> SourceSetConfig:
        return self._config

    def scan(self) -> ScanResult:
        return scan_source_files(self._root, self._config.extension, self._config.follow_symlinks)

    def source_files(self, package: str | None = None, scan: ScanResult | None = None) -> frozenset[Path]:
        """All source files, or only those declaring *package* when given.

        Pass *scan* to filter an earlier walk instead of walking again.
        """
        files = self._walked(scan)
        if package is None:
            return files
        return self._in_package(files, package)

    def resource_files(self, package: str | None = None, scan: ScanResult | None = None) -> frozenset[Path]:
        """R.java, R$anim.java, etc., optionally restricted to *package*."""
        files = filter_resource_files(self._walked(scan), self._config.resource_regex())
        if package is None:
            return files
        return self._in_package(files, package)

    def is_in_package(self, path: str | Path, package: str) -> bool:
        return is_in_package(path, package, self._config)

    def _in_package(self, files: Iterable[Path], package: str) -> frozenset[Path]:
        return frozenset(path for path in files if self.is_in_package(path, package))

    def _walked(self, scan: ScanResult | None) -> frozenset[Path]:
        return (scan if scan is not None else self.scan()).files
