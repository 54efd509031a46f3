from pathlib import Path
from xliff_fixer.constants import FIX_STEPS
from xliff_fixer.models.file_data import FileData
from xliff_fixer.settings import settings
from xliff_fixer.logconf import logger
from .async_utils import run_sync


class FileRejectedError(ValueError):
    """Upload violates the size or extension constraints."""


def human_size(size: int) -> str:
    return f"{size / 1024:.1f}KB"


def check_upload(name: str, size: int) -> None:
    if size > settings.max_file_size:
        max_mb = settings.max_file_size / 1024 / 1024
        raise FileRejectedError(
            f"File too large: {size / 1024 / 1024:.2f}MB. Max is {max_mb:g}MB."
        )
    ext = Path(name).suffix.lower()
    if ext not in settings.allowed_extensions:
        raise FileRejectedError(
            f"Invalid file type: {ext or '(none)'}. "
            f"Allowed: {', '.join(settings.allowed_extensions)}"
        )


def decode_content(raw: bytes) -> str:
    logger.debug(FIX_STEPS["ENCODING"])
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.warning("Content is not valid UTF-8, falling back to latin-1")
        return raw.decode("latin-1")


def load_upload(name: str, raw: bytes) -> FileData:
    check_upload(name, len(raw))
    data = FileData(name=name, content=decode_content(raw), size=len(raw))
    logger.info("File loaded: %s (%s)", name, human_size(data.size))
    return data


def read_file(path: str | Path) -> FileData:
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        logger.error("File read failed: %s", exc, exc_info=False)
        raise
    return load_upload(path.name, raw)


def fixed_file_name(name: str) -> str:
    return f"fixed_{Path(name).name}"


@run_sync
def write_fixed(content: str, path: str | Path) -> None:
    """
    Write the repaired file on a thread pool so it doesn't block the event loop.
    """
    Path(path).write_text(content, encoding="utf-8")
