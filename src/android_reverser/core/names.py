import re
from collections.abc import Iterable
from pathlib import Path

from android_reverser.models import DEFAULT_CONFIG


def is_resource_file(path: str | Path, pattern: re.Pattern[str] | None = None) -> bool:
    """Return True if the file name alone is an R.java / R$<category>.java name."""
    regex = pattern or DEFAULT_CONFIG.resource_regex()
    return regex.fullmatch(Path(path).name) is not None


def filter_resource_files(paths: Iterable[Path], pattern: re.Pattern[str] | None = None) -> frozenset[Path]:
    regex = pattern or DEFAULT_CONFIG.resource_regex()
    return frozenset(path for path in paths if is_resource_file(path, regex))
