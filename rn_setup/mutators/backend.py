"""Supabase activation.

The template ships ``src/lib/supabase.ts`` with the real client commented out
and a ``null`` placeholder exported in its place.  Activation installs the
client library (best effort) and rewrites the file so the commented block
becomes live code.
"""

from __future__ import annotations

import re
from pathlib import Path

from ..config import SetupSettings
from ..utils import print_warning, read_text, run_command, write_text

STEP = "backend"

DISABLED_FLAG = "export const supabaseEnabled = false;"
ENABLED_FLAG = "export const supabaseEnabled = true;"
PLACEHOLDER_BLOCK = (
    "// Placeholder export to prevent import errors\n"
    "export const supabase = null;"
)

# Applied in order; every rule is global and keeps leading indentation.
_UNCOMMENT_RULES: tuple[re.Pattern[str], ...] = (
    re.compile(r"^([ \t]*)// (?=(?:import|const|export)\b)", re.MULTILINE),
    re.compile(r"^([ \t]*)// (?=\})", re.MULTILINE),
    re.compile(r"^([ \t]*)// (?=  )", re.MULTILINE),
)


def activate_backend_source(content: str) -> str:
    """Uncomment the client block, flip the enabled flag, drop the placeholder."""
    for rule in _UNCOMMENT_RULES:
        content = rule.sub(r"\1", content)
    content = content.replace(DISABLED_FLAG, ENABLED_FLAG)
    content = content.replace(PLACEHOLDER_BLOCK, "")
    return content


async def install_backend_client(settings: SetupSettings) -> bool:
    """Run the package-manager install, downgrading any failure to a warning.

    Returns:
        ``True`` if the install command exited cleanly.
    """
    hint = settings.install_hint
    if settings.skip_install:
        print_warning(f"  Skipping dependency install. Run: {hint}")
        return False

    try:
        returncode, _stdout, stderr = await run_command(
            settings.install_command,
            cwd=settings.project_root,
            timeout=settings.install_timeout,
            capture=False,
        )
    except OSError as exc:
        print_warning(f"⚠️  Failed to install Supabase ({exc}). Run: {hint}")
        return False

    if returncode != 0:
        detail = stderr or f"exit code {returncode}"
        print_warning(f"⚠️  Failed to install Supabase ({detail}). Run: {hint}")
        return False
    return True


async def setup_backend(settings: SetupSettings) -> str:
    """Install the Supabase client and activate the integration source.

    Raises:
        NotFoundError: If the integration source file is missing.
    """
    await install_backend_client(settings)

    path = settings.supabase_path
    content = await read_text(path, STEP)
    await write_text(path, activate_backend_source(content), STEP)
    return "Configured Supabase"
