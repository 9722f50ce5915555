"""File operations infrastructure."""
import logging
import shutil
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1024 * 1024


def ensure_dir(path: Path) -> Path:
    """Create directory (and parents) if missing; no-op when it exists."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_stream_exclusive(
    source: BinaryIO,
    destination: Path,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """
    Stream source into a newly created file.

    Returns:
        Number of bytes written.

    Raises:
        FileExistsError: When destination already exists (nothing is touched).
        OSError: When writing fails; the partial file is removed first.
    """
    with open(destination, "xb") as f:
        try:
            shutil.copyfileobj(source, f, chunk_size)
        except Exception:
            f.close()
            _remove_partial(destination)
            raise
        return f.tell()


def _remove_partial(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError:
        logger.warning("Could not remove partial upload %s", path)


def dir_exists(path: Path) -> bool:
    """Check if directory exists."""
    return Path(path).is_dir()


def dir_writable(path: Path) -> bool:
    """Check if directory is writable (creates if not exists)."""
    p = Path(path)
    try:
        p.mkdir(parents=True, exist_ok=True)
        test = p / ".writetest"
        test.write_text("ok")
        test.unlink()
        return True
    except OSError:
        return False
