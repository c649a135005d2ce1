"""
Terminal styling primitives (ANSI SGR, xterm-256 palette).
"""

from __future__ import annotations

from dataclasses import dataclass

# =============================================================================
# ANSI Escape Codes
# =============================================================================

RESET = "\x1b[0m"
BOLD = "1"
FAINT = "2"

GRAY = 240


def _foreground(color: int) -> str:
    return f"38;5;{color}"


# =============================================================================
# Style
# =============================================================================


@dataclass(frozen=True)
class Style:
    """An immutable text style: foreground color, emphasis and fixed width.

    Derive variants with `dataclasses.replace` or `with_color`; never mutate
    a style shared between calls.
    """

    foreground: int | None = None
    bold: bool = False
    faint: bool = False
    width: int = 0

    def with_color(self, color: int | None) -> Style:
        return Style(foreground=color, bold=self.bold, faint=self.faint, width=self.width)

    def codes(self) -> str:
        parts = []
        if self.bold:
            parts.append(BOLD)
        if self.faint:
            parts.append(FAINT)
        if self.foreground is not None:
            parts.append(_foreground(self.foreground))
        return ";".join(parts)

    def render(self, text: str, *, use_color: bool = True) -> str:
        """Render text, padding to `width`. Plain text when color is off."""
        if self.width and len(text) < self.width:
            text = text.ljust(self.width)
        if not text or not use_color:
            return text
        codes = self.codes()
        if not codes:
            return text
        return f"\x1b[{codes}m{text}{RESET}"


def colorize(text: str, color: int | None, *, use_color: bool = True) -> str:
    """Apply a foreground color to text."""
    return Style(foreground=color).render(text, use_color=use_color)


MUTED = Style(foreground=GRAY)
DIVIDER_STYLE = Style(foreground=GRAY, faint=True)
DIVIDER = "∣"
