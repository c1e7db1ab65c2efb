"""rn-setup -- one-time customizer for the React Native starter template.

Quick usage::

    from rn_setup import Configuration, SetupPipeline, SetupSettings

    settings = SetupSettings(project_root=Path("/path/to/app"))
    pipeline = SetupPipeline(settings)
    exit_code = pipeline.run()
"""

from rn_setup.config import Configuration, SetupSettings, slugify
from rn_setup.pipeline import SetupPipeline, SetupState

__all__ = [
    "Configuration",
    "SetupPipeline",
    "SetupSettings",
    "SetupState",
    "slugify",
]
