from pathlib import Path
import time
from .errors import RepositoryIOError

# Thin I/O layer the repository core goes through. A missing file reads as
# empty content rather than an error.

def read_file(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return b""
    except OSError as e:
        raise RepositoryIOError(f"failed to read {path}: {e}") from e

def read_text(path: Path) -> str:
    return read_file(path).decode("utf-8")

def write_file(path: Path, data: bytes) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        raise RepositoryIOError(f"failed to write {path}: {e}") from e

def write_text(path: Path, text: str) -> None:
    write_file(path, text.encode("utf-8"))

def file_exists(path: Path) -> bool:
    return path.is_file()

def list_directory(path: Path) -> list[str]:
    if not path.is_dir():
        return []
    return sorted(item.name for item in path.iterdir())

def now() -> str:
    return time.ctime()
