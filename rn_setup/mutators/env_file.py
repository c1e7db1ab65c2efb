"""``.env`` generation.

The file always carries a freshly generated MMKV storage encryption key and,
when the backend is enabled, the Supabase URL and anon key exactly as the
operator typed them.
"""

from __future__ import annotations

import secrets
import string
from pathlib import Path

from ..config import Configuration
from ..rendering import TemplateRenderer
from ..utils import write_text

STEP = "env_file"

ENV_TEMPLATE = "env.j2"
KEY_ALPHABET = string.digits + string.ascii_lowercase
KEY_CHUNK_LENGTH = 12


def generate_encryption_key() -> str:
    """Return a random key built from two base-36 chunks."""
    chunks = (
        "".join(secrets.choice(KEY_ALPHABET) for _ in range(KEY_CHUNK_LENGTH))
        for _ in range(2)
    )
    return "".join(chunks)


def render_env(
    config: Configuration,
    encryption_key: str,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render the ``.env`` body for *config*."""
    renderer = renderer or TemplateRenderer()
    return renderer.render(
        ENV_TEMPLATE,
        {
            "encryption_key": encryption_key,
            "include_backend": config.include_backend,
            "backend_url": config.backend_url or "",
            "backend_anon_key": config.backend_anon_key or "",
        },
    )


async def create_env_file(
    config: Configuration,
    path: Path,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Overwrite *path* with a freshly rendered ``.env``.

    Raises:
        WriteError: If *path* cannot be written.
    """
    content = render_env(config, generate_encryption_key(), renderer)
    await write_text(path, content, STEP)
    return f"Created {path.name} file"
