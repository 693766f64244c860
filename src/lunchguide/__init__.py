"""
Lunchguide weekly menu builder.

Keep imports lightweight so modules like `src.lunchguide.extract` can be used
without pulling in the HTTP stack at import time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from src.lunchguide.config import Config

__all__ = ["Config", "get_config"]


def __getattr__(name: str) -> Any:
    if name in __all__:
        from src.lunchguide.config import Config, get_config

        return {"Config": Config, "get_config": get_config}[name]
    raise AttributeError(name)
