import logging
from dataclasses import dataclass
from pathlib import Path

from android_reverser.models import DEFAULT_CONFIG, SourceSetConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MembershipResult:
    path: Path
    package: str
    member: bool
    error: OSError | UnicodeDecodeError | None = None


def read_lines(path: str | Path) -> list[str]:
    """Read a file as UTF-8 and split it on \\n, \\r\\n and \\r."""
    with Path(path).open(encoding="utf-8") as handle:
        return handle.read().split("\n")


def check_package(path: str | Path, package: str, config: SourceSetConfig = DEFAULT_CONFIG) -> MembershipResult:
    """Test whether any whole line of *path* declares *package*.

    Decompiled sources often carry labels and other constructs a Java
    parser rejects, so the declaration is found with a line regex only.
    """
    file_path = Path(path)
    regex = config.declaration_regex(package)
    try:
        lines = read_lines(file_path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Treating %s as outside %s: %s", file_path, package, exc)
        return MembershipResult(path=file_path, package=package, member=False, error=exc)

    member = any(regex.fullmatch(line) for line in lines)
    return MembershipResult(path=file_path, package=package, member=member)


def is_in_package(path: str | Path, package: str, config: SourceSetConfig | None = None) -> bool:
    return check_package(path, package, config or DEFAULT_CONFIG).member
