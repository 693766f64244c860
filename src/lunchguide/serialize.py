"""
Output stage: canonical JSON bytes plus their MD5 digest.

The same WeekMenu always serializes to the same bytes (fixed field order, fixed
indentation), so the digest only changes when the menu does.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Union

import structlog

from src.lunchguide.models import WeekMenu

logger = structlog.get_logger(__name__)

DIGEST_SUFFIX = ".md5"


class OutputWriteError(Exception):
    """Raised when an output artifact cannot be written."""
    pass


def serialize_week(week: WeekMenu) -> bytes:
    return json.dumps(week.to_dict(), ensure_ascii=False, indent=2).encode("utf-8")


def content_digest(data: bytes) -> str:
    return hashlib.md5(data).hexdigest()


def digest_path_for(output_path: Union[str, Path]) -> Path:
    return Path(f"{output_path}{DIGEST_SUFFIX}")


def write_artifacts(week: WeekMenu, output_path: Union[str, Path]) -> str:
    """
    Write the week JSON and its `.md5` sidecar. Returns the digest.
    """
    data = serialize_week(week)
    digest = content_digest(data)
    out_path = Path(output_path)
    sidecar = digest_path_for(output_path)

    logger.info("MD5 computed", digest=digest)

    try:
        out_path.write_bytes(data)
        logger.info("Menu written", path=str(out_path), bytes=len(data))
        sidecar.write_text(digest, encoding="ascii")
        logger.info("Digest written", path=str(sidecar))
    except OSError as e:
        raise OutputWriteError(f"Failed to write output artifacts to {out_path}: {e}") from e

    return digest


def load_week(path: Union[str, Path]) -> WeekMenu:
    return WeekMenu.from_dict(json.loads(Path(path).read_text(encoding="utf-8")))
