"""
Builders for synthetic day listings in the Lunchguiden table layout.
"""

from typing import Iterable, Optional

from src.lunchguide.extract import MENU_OPEN_MARKER
from src.lunchguide.segment import RESTAURANT_CELL_MARKER

PAGE_PREAMBLE = (
    "<HTML><HEAD><TITLE>Lunchguiden</TITLE></HEAD><BODY>\n"
    '<TABLE WIDTH="441" BORDER=0 CELLPADDING=0 CELLSPACING=0>\n'
)
PAGE_FOOTER = "</TABLE></BODY></HTML>\n"


def make_segment(
    image_reference: Optional[str],
    items: Iterable[str] = ("Dagens husman",),
    caption: Optional[str] = None,
    with_menu: bool = True,
) -> str:
    """Build one restaurant block as it appears in the listing, without the opening cell."""
    parts = ["\n"]
    if image_reference is not None:
        parts.append(f'<IMG SRC="{image_reference}" BORDER=0 ALT=""><BR>\n')
    if caption is not None:
        parts.append(f"<center><FONT SIZE=1>{caption}</FONT></center>\n")
    parts.append("</TD>\n")
    if with_menu:
        menu = "<BR>".join(f"<LI>{item}" for item in items)
        parts.append(f"{MENU_OPEN_MARKER}\n{menu}\n</TD></TR>\n")
    return "".join(parts)


def make_page(*segments: str) -> str:
    body = "".join(f"<TR>{RESTAURANT_CELL_MARKER}{segment}" for segment in segments)
    return PAGE_PREAMBLE + body + PAGE_FOOTER
