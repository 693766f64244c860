"""
Field extraction for a single restaurant segment.

Pulls three things out of a segment using fixed markers from the listing's
layout:
- image reference: first `SRC="..."` value (the restaurant logo)
- description: optional `<center>` caption under the logo, tags stripped
- menu text: the cell following the spacer image, with `<LI>` items turned into
  "* " lines and line breaks into newlines

HTML entities are left as-is.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Optional

_IMAGE_RE = re.compile(r'SRC="([^"]+)"')
_CAPTION_RE = re.compile(r"<center>(.+)</center>")
_TAG_RE = re.compile(r"<[^>]+>")

MENU_OPEN_MARKER = (
    '<TD WIDTH="311" VALIGN="TOP" BGCOLOR="#FFFFFF">'
    '<IMG SRC="../grafik/space.gif" BORDER=0 width="1" HEIGHT="5">'
)
MENU_CLOSE_MARKER = "</TD>"

# Both spellings occur in the listing.
_LINE_BREAKS = ("<BR>", "<br/>")


class SegmentExtractionError(Exception):
    """Raised when a segment lacks a marker needed to extract it."""
    pass


@dataclass(frozen=True)
class SegmentFields:
    image_reference: str
    description: str
    menu_text: str


@dataclass(frozen=True)
class ExtractionResult:
    """Result of extracting one segment."""
    success: bool
    fields: Optional[SegmentFields] = None
    error: Optional[str] = None

    def unwrap(self) -> SegmentFields:
        if not self.success or self.fields is None:
            raise SegmentExtractionError(self.error or "extraction failed")
        return self.fields


def find_image_reference(segment: str) -> Optional[str]:
    match = _IMAGE_RE.search(segment)
    return match.group(1) if match else None


def extract_description(segment: str) -> str:
    match = _CAPTION_RE.search(segment)
    if not match:
        return ""
    return _TAG_RE.sub(" ", match.group(0)).strip()


def extract_menu_text(segment: str) -> Optional[str]:
    """
    Return the formatted menu text, or None if the menu cell is missing.
    """
    _, found, rest = segment.partition(MENU_OPEN_MARKER)
    if not found:
        return None

    menu = rest.split(MENU_CLOSE_MARKER, 1)[0]
    menu = menu.replace("<LI>", "* ")
    for marker in _LINE_BREAKS:
        menu = menu.replace(marker, "\n")
    return menu.strip()


def extract_fields(segment: str) -> ExtractionResult:
    image_reference = find_image_reference(segment)
    if image_reference is None:
        return ExtractionResult(success=False, error="no image reference in segment")

    menu_text = extract_menu_text(segment)
    if menu_text is None:
        return ExtractionResult(
            success=False,
            error=f"no menu cell in segment for image {image_reference}",
        )

    return ExtractionResult(
        success=True,
        fields=SegmentFields(
            image_reference=image_reference,
            description=extract_description(segment),
            menu_text=menu_text,
        ),
    )
