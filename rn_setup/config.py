"""rn-setup configuration.

Two typed models live here:

* ``Configuration`` -- the operator's answers, collected once per run and
  frozen before any file is touched.
* ``SetupSettings`` -- where the template files live and how the optional
  package-manager install is invoked.  Every path the mutators read or write
  is a derived, read-only property so the layout is defined in one place.
"""

from __future__ import annotations

import hashlib
import json
import os
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ---------------------------------------------------------------------------
# Answer defaults
# ---------------------------------------------------------------------------

DEFAULT_APP_NAME = "My App"
DEFAULT_PACKAGE_NAME = "com.example.app"
DEFAULT_PRIMARY_COLOR = "#007AFF"
DEFAULT_SECONDARY_COLOR = "#6366F1"

BACKEND_PACKAGE = "@supabase/supabase-js"


def slugify(text: str) -> str:
    """Derive the URL-safe identifier used for the Expo slug and package name.

    * Strips surrounding whitespace and lowercases the input.
    * Replaces each run of whitespace with a single hyphen.
    * Drops every character outside ``[a-z0-9-]``.

    Examples::

        slugify("My Awesome App") -> "my-awesome-app"
        slugify("  ÜberApp!! 2.0  ") -> "berapp-20"
    """
    slug = re.sub(r"\s+", "-", text.strip().lower())
    return re.sub(r"[^a-z0-9-]", "", slug)


class Configuration(BaseModel):
    """Answers gathered by the prompt collector.

    Immutable once built.  The backend credentials are only meaningful when
    ``include_backend`` is set, in which case both must have been collected
    (empty strings are allowed).
    """

    model_config = ConfigDict(frozen=True)

    app_name: str = Field(default=DEFAULT_APP_NAME, min_length=1)
    package_name: str = Field(default=DEFAULT_PACKAGE_NAME, min_length=1)
    primary_color: str = Field(default=DEFAULT_PRIMARY_COLOR)
    secondary_color: str = Field(default=DEFAULT_SECONDARY_COLOR)
    include_auth: bool = Field(default=True)
    include_backend: bool = Field(default=False)
    backend_url: str | None = Field(default=None)
    backend_anon_key: str | None = Field(default=None)

    @model_validator(mode="after")
    def _backend_fields_collected(self) -> "Configuration":
        if self.include_backend and (self.backend_url is None or self.backend_anon_key is None):
            raise ValueError(
                "backend_url and backend_anon_key must be collected when include_backend is set"
            )
        return self

    @property
    def slug(self) -> str:
        """Slug derived from ``app_name``."""
        return slugify(self.app_name)

    @property
    def fingerprint(self) -> str:
        """SHA-256 of the answers, used to tell whether a re-run changed them."""
        payload = json.dumps(self.model_dump(), sort_keys=True)
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class SetupSettings(BaseModel):
    """Filesystem layout and tool behaviour for a setup run."""

    project_root: Path = Field(default_factory=Path.cwd)
    state_dir: str = Field(default=".rn-setup")
    install_command: list[str] = Field(
        default_factory=lambda: ["npm", "install", BACKEND_PACKAGE]
    )
    install_timeout: int = Field(default=300, ge=1, description="Install timeout in seconds")
    skip_install: bool = Field(default=False)
    force: bool = Field(default=False, description="Ignore the persisted run record")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def app_json_path(self) -> Path:
        """Expo app configuration."""
        return self.project_root / "app.json"

    @property
    def package_json_path(self) -> Path:
        return self.project_root / "package.json"

    @property
    def theme_path(self) -> Path:
        """Theme source file holding the anchored brand colors."""
        return self.project_root / "src" / "styles" / "theme.ts"

    @property
    def env_path(self) -> Path:
        return self.project_root / ".env"

    @property
    def supabase_path(self) -> Path:
        """Backend integration source file with the commented-out client."""
        return self.project_root / "src" / "lib" / "supabase.ts"

    @property
    def auth_dir(self) -> Path:
        """Route group holding the sign-in, sign-up and forgot-password screens."""
        return self.project_root / "src" / "app" / "(auth)"

    @property
    def state_path(self) -> Path:
        """Persisted record of the steps already applied."""
        return self.project_root / self.state_dir / "setup-state.json"

    @property
    def install_hint(self) -> str:
        return " ".join(self.install_command)

    @classmethod
    def from_env(cls, **overrides: Any) -> "SetupSettings":
        """Build settings from environment variables.

        Recognised variables (all optional):
            RN_SETUP_PROJECT_ROOT, RN_SETUP_INSTALL_TIMEOUT, RN_SETUP_SKIP_INSTALL.

        Keyword *overrides* (``None`` values ignored) win over the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("RN_SETUP_PROJECT_ROOT"):
            kwargs["project_root"] = Path(os.environ["RN_SETUP_PROJECT_ROOT"])
        if os.environ.get("RN_SETUP_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["RN_SETUP_INSTALL_TIMEOUT"])
        if os.environ.get("RN_SETUP_SKIP_INSTALL"):
            kwargs["skip_install"] = os.environ["RN_SETUP_SKIP_INSTALL"].lower() in (
                "1", "true", "yes",
            )
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
