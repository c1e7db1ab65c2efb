"""Persisted record of applied setup steps.

The record lives at ``.rn-setup/setup-state.json`` inside the project.  It is
only written after a step succeeds, so a re-run can skip work that was
already applied instead of patching already-patched files.  The fingerprint
of the answers that produced those steps is stored alongside them; a re-run
with different answers must not trust the recorded steps.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .utils import save_json

STEP = "state"


class RunRecord:
    """Completed step names plus timestamps, mirrored to a JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.data: dict[str, Any] = {
            "started_at": datetime.now(timezone.utc).isoformat(),
            "config_fingerprint": None,
            "completed_steps": [],
            "success": False,
        }

    @property
    def completed_steps(self) -> list[str]:
        return self.data["completed_steps"]

    @property
    def fingerprint(self) -> str | None:
        return self.data["config_fingerprint"]

    def is_done(self, step: str) -> bool:
        return step in self.completed_steps

    def load(self) -> None:
        """Restore the record from a previous run, if available."""
        if not self.path.exists():
            return
        try:
            previous = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            # Corrupted record -- start fresh.
            return
        if not isinstance(previous, dict):
            return
        steps = previous.get("completed_steps")
        if isinstance(steps, list):
            self.data["completed_steps"] = [s for s in steps if isinstance(s, str)]
        fingerprint = previous.get("config_fingerprint")
        if isinstance(fingerprint, str):
            self.data["config_fingerprint"] = fingerprint

    def reset(self, fingerprint: str) -> None:
        """Forget recorded steps and bind the record to a new set of answers."""
        self.data["completed_steps"] = []
        self.data["config_fingerprint"] = fingerprint
        self.data["success"] = False

    async def mark_done(self, step: str) -> None:
        if step not in self.completed_steps:
            self.completed_steps.append(step)
        await self.save()

    async def save(self) -> None:
        """Persist the record, creating ``.rn-setup/`` on first write."""
        self.data["updated_at"] = datetime.now(timezone.utc).isoformat()
        await save_json(self.data, self.path, STEP)
