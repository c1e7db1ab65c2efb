"""Interactive prompt collection.

Asks the fixed question sequence on the operator's console and turns the raw
answers into a frozen :class:`~rn_setup.config.Configuration`.
"""

from __future__ import annotations

import sys
from typing import TextIO

from .config import (
    DEFAULT_APP_NAME,
    DEFAULT_PACKAGE_NAME,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
    Configuration,
)
from .errors import CollectionError
from .utils import console


class PromptCollector:
    """Reads one line of input per question.

    Args:
        stream: Input to read answers from.  Defaults to ``sys.stdin``.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self.closed = False

    def ask(self, question: str) -> str:
        """Print *question* and return the answer without its line ending.

        The read blocks the calling thread.  Collection runs before the event
        loop starts, so Ctrl-C at a prompt raises ``KeyboardInterrupt`` at once.

        Raises:
            CollectionError: If the stream is closed or exhausted.
        """
        if self.closed:
            raise CollectionError("prompt collector already closed")
        console.print(question, end="", markup=False, highlight=False, soft_wrap=True)
        try:
            line = self.stream.readline()
        except (OSError, ValueError) as exc:
            raise CollectionError(f"cannot read answer: {exc}") from exc
        if line == "":
            raise CollectionError()
        return line.rstrip("\r\n")

    def collect(self) -> Configuration:
        """Ask every question in order and build the configuration."""
        app_name = self.ask('App name (e.g., "My Awesome App"): ')
        package_name = self.ask('Package name (e.g., "com.company.myapp"): ')

        console.print("\n[bold]🎨 Theme Customization[/bold]")
        primary_color = self.ask(f"Primary color (hex, default {DEFAULT_PRIMARY_COLOR}): ")
        secondary_color = self.ask(
            f"Secondary color (hex, default {DEFAULT_SECONDARY_COLOR}): "
        )

        console.print("\n[bold]✨ Optional Features[/bold]")
        include_auth = self.ask("Include authentication screens? (Y/n): ")
        include_backend = self.ask("Set up Supabase? (y/N): ")

        backend_flag = include_backend.lower() == "y"
        backend_url: str | None = None
        backend_anon_key: str | None = None
        if backend_flag:
            backend_url = self.ask("Supabase URL: ")
            backend_anon_key = self.ask("Supabase Anon Key: ")

        return Configuration(
            app_name=app_name or DEFAULT_APP_NAME,
            package_name=package_name or DEFAULT_PACKAGE_NAME,
            primary_color=primary_color or DEFAULT_PRIMARY_COLOR,
            secondary_color=secondary_color or DEFAULT_SECONDARY_COLOR,
            include_auth=include_auth.lower() != "n",
            include_backend=backend_flag,
            backend_url=backend_url,
            backend_anon_key=backend_anon_key,
        )

    def close(self) -> None:
        """Release the input stream.  Safe to call more than once."""
        if self.closed:
            return
        self.closed = True
        self.stream.close()
