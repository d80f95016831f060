import errno
import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from android_reverser.models import DEFAULT_SOURCE_EXTENSION

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanResult:
    root: Path
    files: frozenset[Path] = frozenset()
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _raise(error: OSError) -> None:
    raise error


def _walk_files(root: Path, suffix: str, follow_symlinks: bool) -> Iterator[Path]:
    # real paths of each visited directory and its ancestors, for loop detection
    lineage: dict[str, frozenset[str]] = {}

    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise, followlinks=follow_symlinks):
        if follow_symlinks:
            real = os.path.realpath(dirpath)
            ancestors = lineage.get(os.path.dirname(dirpath), frozenset())
            if real in ancestors:
                raise OSError(errno.ELOOP, os.strerror(errno.ELOOP), dirpath)
            lineage[dirpath] = ancestors | {real}

        for filename in filenames:
            if not filename.lower().endswith(suffix):
                continue
            path = Path(dirpath) / filename
            if path.is_file():
                yield path


def scan_source_files(
    root: str | Path,
    extension: str = DEFAULT_SOURCE_EXTENSION,
    follow_symlinks: bool = False,
) -> ScanResult:
    """Collect every regular file under *root* whose name ends with *extension*.

    The extension is compared case-insensitively. A root that cannot be
    traversed produces an empty result carrying the error instead of raising.
    """
    root_path = Path(root)
    try:
        files = frozenset(_walk_files(root_path, extension.lower(), follow_symlinks))
    except OSError as exc:
        logger.warning("Cannot traverse %s: %s", root_path, exc)
        return ScanResult(root=root_path, error=exc)

    logger.debug("Found %d %s file(s) under %s", len(files), extension, root_path)
    return ScanResult(root=root_path, files=files)
