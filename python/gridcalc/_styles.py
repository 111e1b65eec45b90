"""Frozen presentation dataclass attached to every cell."""

from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_BACKGROUND = "white"


@dataclass(frozen=True)
class CellFormat:
    """Presentation metadata. Has no effect on formula evaluation."""

    bold: bool = False
    background_color: str = DEFAULT_BACKGROUND

    def merged(
        self,
        bold: bool | None = None,
        background_color: str | None = None,
    ) -> CellFormat:
        """Return a copy with the given fields replaced; ``None`` keeps the current value."""
        changes: dict[str, object] = {}
        if bold is not None:
            changes["bold"] = bold
        if background_color is not None:
            changes["background_color"] = background_color
        return replace(self, **changes) if changes else self
