"""Expo ``app.json`` rewriting."""

from __future__ import annotations

from pathlib import Path

from ..config import Configuration
from ..errors import ParseError
from ..utils import load_json, save_json

STEP = "app_config"


async def update_app_config(config: Configuration, path: Path) -> str:
    """Set the display name, slug and native identifiers in ``app.json``.

    The ``ios`` / ``android`` objects are only updated when the template
    already declares them; they are never created.

    Raises:
        NotFoundError: If *path* does not exist.
        ParseError: If the file is not JSON or has no ``expo`` object.
    """
    app_json = await load_json(path, STEP)
    expo = app_json.get("expo")
    if not isinstance(expo, dict):
        raise ParseError(STEP, f"{path.name} has no 'expo' object")

    expo["name"] = config.app_name
    expo["slug"] = config.slug

    if isinstance(expo.get("ios"), dict):
        expo["ios"]["bundleIdentifier"] = config.package_name
    if isinstance(expo.get("android"), dict):
        expo["android"]["package"] = config.package_name

    await save_json(app_json, path, STEP)
    return f"Updated {path.name}"
