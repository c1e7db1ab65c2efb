"""File mutators applied by the setup pipeline.

Each mutator reads one project file, computes its new contents from the
collected :class:`~rn_setup.config.Configuration` and writes it back.  The
pure text transforms are exposed alongside so they can be exercised without
touching the filesystem.
"""

from rn_setup.mutators.app_config import update_app_config
from rn_setup.mutators.auth import remove_auth_screens
from rn_setup.mutators.backend import activate_backend_source, setup_backend
from rn_setup.mutators.env_file import create_env_file, generate_encryption_key, render_env
from rn_setup.mutators.package_json import update_package_json
from rn_setup.mutators.theme import apply_theme_colors, update_theme

__all__ = [
    "activate_backend_source",
    "apply_theme_colors",
    "create_env_file",
    "generate_encryption_key",
    "remove_auth_screens",
    "render_env",
    "setup_backend",
    "update_app_config",
    "update_package_json",
    "update_theme",
]
