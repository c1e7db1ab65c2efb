"""rn-setup orchestrator.

Runs the one-time customisation of a freshly created template project:

COLLECTING  -- ask the operator for app name, identifiers, colors, features.
CONFIGURING -- apply each file mutator in a fixed order.
DONE/FAILED -- print the outcome and release the input stream.

Usage::

    rn-setup
    rn-setup --project-root ./my-app --skip-install
    python -m rn_setup --force
"""

from __future__ import annotations

import asyncio
import sys
import traceback
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from rich.panel import Panel

from rn_setup.config import Configuration, SetupSettings
from rn_setup.errors import SetupError
from rn_setup.mutators import (
    create_env_file,
    remove_auth_screens,
    setup_backend,
    update_app_config,
    update_package_json,
    update_theme,
)
from rn_setup.prompts import PromptCollector
from rn_setup.rendering import TemplateRenderer
from rn_setup.state import RunRecord
from rn_setup.utils import (
    console,
    err_console,
    print_error,
    print_step,
    print_success,
    print_summary_table,
    print_warning,
)

NEXT_STEPS = (
    "npm install (or yarn install)",
    "npx expo prebuild",
    "npx expo run:ios (or run:android)",
)


class SetupState(str, Enum):
    COLLECTING = "collecting"
    CONFIGURING = "configuring"
    DONE = "done"
    FAILED = "failed"


@dataclass
class SetupStep:
    """One named mutation; ``action`` returns the success line or ``None``."""

    name: str
    action: Callable[[], Awaitable[str | None]]


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class SetupPipeline:
    """Collects the configuration and applies every mutator in sequence.

    Attributes:
        settings: Project layout and install behaviour.
        collector: Source of the operator's answers.
        state: Current position in the run lifecycle.
        config: The collected answers, once available.
        record: Persisted list of steps already applied.
    """

    def __init__(
        self,
        settings: SetupSettings,
        collector: PromptCollector | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.settings = settings
        self.collector = collector or PromptCollector()
        self.renderer = renderer or TemplateRenderer()
        self.state = SetupState.COLLECTING
        self.config: Configuration | None = None
        self.record = RunRecord(settings.state_path)

    def build_steps(self, config: Configuration) -> list[SetupStep]:
        """Return the mutators to apply for *config*, in execution order."""
        settings = self.settings
        steps = [
            SetupStep("app_config", lambda: update_app_config(config, settings.app_json_path)),
            SetupStep("theme", lambda: update_theme(config, settings.theme_path)),
            SetupStep(
                "env_file",
                lambda: create_env_file(config, settings.env_path, self.renderer),
            ),
            SetupStep(
                "package_json",
                lambda: update_package_json(config, settings.package_json_path),
            ),
        ]
        if config.include_backend:
            steps.append(SetupStep("backend", lambda: setup_backend(settings)))
        if not config.include_auth:
            steps.append(SetupStep("auth_screens", lambda: remove_auth_screens(settings.auth_dir)))
        return steps

    def run(self) -> int:
        """Execute the whole setup.

        Answers are collected before the event loop starts; only the file
        mutators run inside ``asyncio.run``.

        Returns:
            The process exit status: ``0`` on success, ``1`` on failure.
        """
        console.print(
            Panel(
                "[bold bright_cyan]🚀 Welcome to React Native Template Setup![/bold bright_cyan]\n"
                "This will help you customize your new app.",
                border_style="bright_cyan",
            )
        )

        try:
            self.config = self.collector.collect()

            self.state = SetupState.CONFIGURING
            console.print("\n[bold]⚙️  Configuring your app...[/bold]\n")
            skipped = asyncio.run(self._apply(self.config))

            self.state = SetupState.DONE
            self._print_final_summary(self.config, skipped)
            return 0

        except SetupError as exc:
            self.state = SetupState.FAILED
            print_error(f"\n❌ Setup failed: {exc}")
            return 1

        except Exception as exc:
            self.state = SetupState.FAILED
            print_error(f"\n❌ Setup failed: {exc}")
            err_console.print(traceback.format_exc(), style="dim", markup=False)
            return 1

        finally:
            self.collector.close()

    async def _apply(self, config: Configuration) -> list[str]:
        """Run every step not yet recorded for *config*.

        Returns:
            Names of the steps skipped because a previous run applied them.
        """
        fingerprint = config.fingerprint
        if not self.settings.force:
            self.record.load()
            if self.record.completed_steps and self.record.fingerprint != fingerprint:
                print_warning(
                    "  Answers differ from the previous run; re-applying every step"
                )
                self.record.reset(fingerprint)
        self.record.data["config_fingerprint"] = fingerprint

        skipped: list[str] = []
        for step in self.build_steps(config):
            if self.record.is_done(step.name):
                console.print(f"  [dim]- {step.name} already applied, skipping[/dim]")
                skipped.append(step.name)
                continue
            message = await step.action()
            if message:
                print_step(message)
            await self.record.mark_done(step.name)

        self.record.data["success"] = True
        await self.record.save()
        return skipped

    def _print_final_summary(self, config: Configuration, skipped: list[str]) -> None:
        console.print()
        print_success("✅ Setup complete!")
        console.print()
        summary = {
            "App name": config.app_name,
            "Slug": config.slug,
            "Package": config.package_name,
            "Primary color": config.primary_color,
            "Secondary color": config.secondary_color,
            "Auth screens": "included" if config.include_auth else "removed",
            "Supabase": "enabled" if config.include_backend else "disabled",
        }
        if skipped:
            summary["Skipped (already applied)"] = ", ".join(skipped)
        print_summary_table(summary, title="Your app")
        console.print("Next steps:")
        for number, step in enumerate(NEXT_STEPS, start=1):
            console.print(f"  {number}. {step}", markup=False)
        console.print("\nHappy coding! 🎉\n")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``rn-setup`` / ``python -m rn_setup``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Customize a freshly created React Native template project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  rn-setup\n"
            "  rn-setup --project-root ./my-app --skip-install\n"
        ),
    )
    parser.add_argument(
        "--project-root",
        default=None,
        help="Template project directory (default: current directory)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Re-apply every step even if a previous run recorded it",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not run the package manager when enabling Supabase",
    )

    args = parser.parse_args(argv)

    settings = SetupSettings.from_env(
        project_root=Path(args.project_root) if args.project_root else None,
        force=args.force or None,
        skip_install=args.skip_install or None,
    )
    pipeline = SetupPipeline(settings)
    sys.exit(pipeline.run())


if __name__ == "__main__":
    main()
