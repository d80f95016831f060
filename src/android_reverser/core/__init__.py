from android_reverser.core.names import filter_resource_files, is_resource_file
from android_reverser.core.packages import MembershipResult, check_package, is_in_package
from android_reverser.core.scanner import ScanResult, scan_source_files
from android_reverser.core.source_set import SourceSet

__all__ = [
    "MembershipResult",
    "ScanResult",
    "SourceSet",
    "check_package",
    "filter_resource_files",
    "is_in_package",
    "is_resource_file",
    "scan_source_files",
]
