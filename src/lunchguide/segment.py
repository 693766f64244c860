"""
Split one day's listing into per-restaurant segments.

Every restaurant on the page opens with the same table cell, so the page is cut
on that literal marker rather than parsed as HTML.
"""

from __future__ import annotations

from typing import List, Union

RESTAURANT_CELL_MARKER = '<TD WIDTH="130" ALIGN="CENTER" VALIGN="TOP" BGCOLOR="#FFFFFF">'


def decode_document(document: Union[bytes, str], encoding: str = "utf-8") -> str:
    if isinstance(document, str):
        return document
    return document.decode(encoding, errors="replace")


def split_segments(document: Union[bytes, str], *, encoding: str = "utf-8") -> List[str]:
    """
    Return the restaurant segments of a day page in document order.

    Text before the first marker is page preamble and is dropped. A page without
    the marker yields no segments.
    """
    text = decode_document(document, encoding)
    return text.split(RESTAURANT_CELL_MARKER)[1:]
