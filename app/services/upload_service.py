from __future__ import annotations

import logging
import re
import secrets
import time
from pathlib import Path

from app.config import Settings, settings
from app.errors import UploadError


logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"

_PDF_TYPE = "application/pdf"
_SAFE_SUFFIX_RE = re.compile(r"^\.[a-z0-9]{1,8}$")


def is_allowed_content_type(content_type: str | None) -> bool:
    value = (content_type or "").split(";", 1)[0].strip().lower()
    return value.startswith("image/") or value == _PDF_TYPE


def _safe_suffix(filename: str | None) -> str:
    suffix = Path(filename or "").suffix.lower()
    return suffix if _SAFE_SUFFIX_RE.match(suffix) else ""


def build_stored_name(filename: str | None) -> str:
    return f"{int(time.time() * 1000)}-{secrets.token_hex(4)}{_safe_suffix(filename)}"


def save_upload(filename: str | None, content_type: str | None, data: bytes, cfg: Settings | None = None) -> str:
    """Store an uploaded image or PDF and return its public path under /uploads."""
    cfg = cfg or settings
    if not is_allowed_content_type(content_type):
        raise UploadError("Invalid file type")
    if len(data) > cfg.max_upload_bytes:
        raise UploadError("File too large")

    target_dir = Path(cfg.upload_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    stored_name = build_stored_name(filename)
    (target_dir / stored_name).write_bytes(data)

    logger.info("upload.saved name=%s content_type=%s bytes=%d", stored_name, content_type, len(data))
    return f"{UPLOAD_URL_PREFIX}/{stored_name}"
