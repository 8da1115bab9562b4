"""Upload Store — validates and stores image uploads on local disk.

Invariants:
    - Only allowed content types (jpeg/png by default) and files up to max_bytes are stored
    - Stored names are <sanitized-stem>_<unix-ms><ext>: never collide, never escape root
    - remove() only touches files under root addressed by this store's public prefix
    - File removal failures are logged, never raised (the DB row is the source of truth)
"""

import logging
import re
import time
from pathlib import Path, PurePosixPath

from app.core.errors import UploadRejectedError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]+")
_EXTENSIONS = {"image/jpeg": ".jpg", "image/jpg": ".jpg", "image/png": ".png"}


def _safe_stem(filename: str) -> str:
    stem = PurePosixPath(filename.replace("\\", "/")).stem
    stem = _UNSAFE_CHARS.sub("-", stem).strip("-")
    return stem[:80] or "image"


class UploadStore:
    """Local-disk image store served under a public URL prefix."""

    def __init__(
        self,
        root: Path,
        public_prefix: str = "/uploads",
        max_bytes: int = 5 * 1024 * 1024,
        allowed_types: list[str] | None = None,
    ):
        self.root = Path(root)
        self.public_prefix = public_prefix.rstrip("/")
        self.max_bytes = max_bytes
        self.allowed_types = allowed_types or list(_EXTENSIONS)

    def validate(self, content_type: str | None, size: int) -> None:
        if size == 0:
            raise UploadRejectedError("No file selected", "empty")
        if content_type not in self.allowed_types:
            kinds = ", ".join(t.split("/")[1] for t in self.allowed_types)
            raise UploadRejectedError(
                f"File type not allowed. Please upload {kinds}", "content_type",
            )
        if size > self.max_bytes:
            max_mb = self.max_bytes / (1024 * 1024)
            raise UploadRejectedError(
                f"File is too large. Maximum size is {max_mb:g} MB", "size",
            )

    def save(self, filename: str, content_type: str | None, data: bytes) -> str:
        """Validate and write an upload. Returns its public URL."""
        self.validate(content_type, len(data))
        ext = _EXTENSIONS.get(content_type, PurePosixPath(filename).suffix.lower())
        name = f"{_safe_stem(filename)}_{int(time.time() * 1000)}{ext}"
        self.root.mkdir(parents=True, exist_ok=True)
        (self.root / name).write_bytes(data)
        logger.info(f"Stored upload {name} ({len(data)} bytes)")
        return f"{self.public_prefix}/{name}"

    def path_for(self, url: str) -> Path | None:
        """Local path of a URL produced by save(), or None for foreign URLs."""
        prefix = self.public_prefix + "/"
        if not url.startswith(prefix):
            return None
        name = url[len(prefix):]
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            return None
        return self.root / name

    def remove(self, url: str) -> bool:
        path = self.path_for(url)
        if path is None:
            return False
        try:
            path.unlink()
        except FileNotFoundError:
            logger.warning(f"Upload already gone: {path.name}")
            return False
        except OSError as e:
            logger.error(f"Failed to remove upload {path.name}: {e}")
            return False
        return True
