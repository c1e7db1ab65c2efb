"""Removal of the optional authentication route group."""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from ..errors import WriteError

STEP = "auth_screens"


async def remove_auth_screens(auth_dir: Path) -> str | None:
    """Delete *auth_dir* and everything below it.

    Returns:
        The step message, or ``None`` when the directory was already gone.
    """
    if not auth_dir.is_dir():
        return None
    try:
        await asyncio.to_thread(shutil.rmtree, auth_dir)
    except OSError as exc:
        raise WriteError(STEP, f"cannot remove {auth_dir}: {exc.strerror or exc}") from exc
    return "Removed authentication screens"
