"""
Stored filename rules.

Stored names follow ``{epoch-millis}-{original-name}``. The millisecond
prefix is what listing sorts on, so it is parsed back out here rather than
trusting directory enumeration order.
"""
import time
from datetime import datetime, timezone
from pathlib import PurePosixPath, PureWindowsPath
from typing import Optional, Tuple

from src.domain.errors import InvalidFilenameError

SEPARATOR = "-"
# Leaves room for the millisecond prefix within a 255-byte name limit.
MAX_ORIGINAL_NAME_BYTES = 200


def current_millis() -> int:
    """Return wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def build_stored_name(original_filename: str, millis: int) -> str:
    """Build the stored filename for an upload."""
    return f"{millis}{SEPARATOR}{original_filename}"


def validate_original_filename(name: Optional[str]) -> str:
    """
    Validate a client-supplied filename before it becomes part of a path.

    Raises:
        InvalidFilenameError: When the name is empty, contains NUL bytes or
            path separators, is a relative directory reference, or is too
            long to store.
    """
    if not name:
        raise InvalidFilenameError("Uploaded file has no filename.")
    if "\x00" in name:
        raise InvalidFilenameError("Filename contains a NUL byte.", filename=name)
    if "/" in name or "\\" in name:
        raise InvalidFilenameError("Filename must not contain path separators.", filename=name)
    if name in (".", ".."):
        raise InvalidFilenameError(f"Invalid filename: {name}", filename=name)
    if len(name.encode("utf-8", "surrogateescape")) > MAX_ORIGINAL_NAME_BYTES:
        raise InvalidFilenameError(
            f"Filename longer than {MAX_ORIGINAL_NAME_BYTES} bytes.", filename=name[:MAX_ORIGINAL_NAME_BYTES]
        )
    return name


def reduce_to_basename(requested: str) -> str:
    """Strip any directory components from an externally supplied name."""
    # Both separator styles, so "..\\x" cannot escape on either platform.
    name = PureWindowsPath(PurePosixPath(requested).name).name
    name = name.replace("\x00", "")
    if name in (".", ".."):
        return ""
    return name


def split_stored_name(stored_name: str) -> Tuple[Optional[int], str]:
    """Split a stored name into (millis, original name)."""
    prefix, sep, rest = stored_name.partition(SEPARATOR)
    if not sep or not prefix.isdigit():
        return None, stored_name
    return int(prefix), rest


def uploaded_at(stored_name: str) -> Optional[datetime]:
    """Return upload time encoded in the stored name prefix."""
    millis, _ = split_stored_name(stored_name)
    if millis is None:
        return None
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)


def newest_first_key(stored_name: str) -> Tuple[int, int, str]:
    """Sort key putting newest uploads first when used with reverse=True."""
    millis, _ = split_stored_name(stored_name)
    if millis is None:
        return (0, 0, stored_name)
    return (1, millis, stored_name)
