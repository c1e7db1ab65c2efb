"""Brand color substitution in ``src/styles/theme.ts``.

Each customisable color is located by the comment the template ships next to
it.  Only the hex literal is replaced; the comment stays, so applying the same
colors again finds the same anchors and produces the same text.
"""

from __future__ import annotations

import re
from pathlib import Path

from ..config import Configuration
from ..utils import print_warning, read_text, write_text

STEP = "theme"

HEX_COLOR = re.compile(r"#[0-9A-Fa-f]{6}")

PRIMARY_ANCHOR = re.compile(r"(primary: ')#[0-9A-Fa-f]{6}(',\s+// iOS-style blue)")
SECONDARY_ANCHOR = re.compile(r"(secondary: ')#[0-9A-Fa-f]{6}(',\s+// Indigo accent)")


def replace_anchored_color(content: str, anchor: re.Pattern[str], color: str) -> str:
    """Swap the hex literal of the first *anchor* match for *color*.

    A missing anchor leaves *content* unchanged.
    """
    return anchor.sub(lambda m: f"{m.group(1)}{color}{m.group(2)}", content, count=1)


def apply_theme_colors(content: str, primary: str, secondary: str) -> str:
    """Return *content* with both brand colors substituted.

    A value that is not a ``#RRGGBB`` literal is never written into the file;
    its region keeps the current color and a warning names the rejected value.
    """
    for label, anchor, color in (
        ("primary", PRIMARY_ANCHOR, primary),
        ("secondary", SECONDARY_ANCHOR, secondary),
    ):
        if not HEX_COLOR.fullmatch(color):
            print_warning(f"  Skipping {label} color {color!r}: expected #RRGGBB")
            continue
        content = replace_anchored_color(content, anchor, color)
    return content


async def update_theme(config: Configuration, path: Path) -> str:
    """Write the configured brand colors into the theme file."""
    content = await read_text(path, STEP)
    content = apply_theme_colors(content, config.primary_color, config.secondary_color)
    await write_text(path, content, STEP)
    return "Updated theme colors"
