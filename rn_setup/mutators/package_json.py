"""``package.json`` rewriting."""

from __future__ import annotations

from pathlib import Path

from ..config import Configuration, slugify
from ..utils import load_json, save_json

STEP = "package_json"


async def update_package_json(config: Configuration, path: Path) -> str:
    """Rename the npm package after the app's slug."""
    package_json = await load_json(path, STEP)
    package_json["name"] = slugify(config.app_name)
    await save_json(package_json, path, STEP)
    return f"Updated {path.name}"
