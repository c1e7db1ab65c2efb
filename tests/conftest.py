"""Shared pytest fixtures for the rn-setup test suite.

Provides reusable fixtures for:
- A pristine template project tree (app.json, package.json, theme, Supabase
  integration, auth screens)
- Settings pointing at that tree with the dependency install disabled
- Answer streams for the prompt collector
"""

from __future__ import annotations

import io
import json
import textwrap
from pathlib import Path
from typing import Any

import pytest

from rn_setup.config import SetupSettings

# ---------------------------------------------------------------------------
# Template file contents
# ---------------------------------------------------------------------------

APP_JSON: dict[str, Any] = {
    "expo": {
        "name": "react-native-template",
        "slug": "react-native-template",
        "version": "1.0.0",
        "orientation": "portrait",
        "scheme": "rntemplate",
        "userInterfaceStyle": "automatic",
        "ios": {"supportsTablet": True, "bundleIdentifier": "com.template.app"},
        "android": {
            "adaptiveIcon": {"backgroundColor": "#ffffff"},
            "package": "com.template.app",
        },
        "plugins": ["expo-router"],
    }
}

PACKAGE_JSON: dict[str, Any] = {
    "name": "react-native-template",
    "version": "1.0.0",
    "main": "expo-router/entry",
    "scripts": {"start": "expo start", "setup": "node scripts/setup.js"},
    "dependencies": {"expo": "~52.0.0", "react-native-mmkv": "^3.1.0"},
}

THEME_TS = textwrap.dedent("""\
    export const lightTheme = {
      name: 'light',
      dark: false,
      colors: {
        // Main brand colors - CUSTOMIZE THESE FOR YOUR APP
        primary: '#007AFF',        // iOS-style blue
        onPrimary: '#FFFFFF',

        background: '#FFFFFF',     // Clean white background
        onBackground: '#111827',

        secondary: '#6366F1',      // Indigo accent
        onSecondary: '#FFFFFF',

        links: '#007AFF',
      },
    };

    export const darkTheme = {
      name: 'dark',
      dark: true,
      colors: {
        primary: '#0A84FF',        // Brighter blue for dark backgrounds
        onPrimary: '#FFFFFF',

        secondary: '#5E5CE6',      // Purple accent
        onSecondary: '#FFFFFF',
      },
    };
""")

SUPABASE_TS = textwrap.dedent("""\
    /**
     * Supabase Configuration (Optional)
     *
     * 3. Uncomment the code below
     */

    // import { createClient } from '@supabase/supabase-js';
    // import { storage } from './storage';
    //
    // const supabaseUrl = process.env.EXPO_PUBLIC_SUPABASE_URL;
    // const supabaseAnonKey = process.env.EXPO_PUBLIC_SUPABASE_ANON_KEY;
    //
    // /**
    //  * Custom storage adapter for Supabase using MMKV
    //  */
    // const MMKVStorage = {
    //   getItem: (key: string) => {
    //     return storage.getString(key) ?? null;
    //   },
    //   setItem: (key: string, value: string) => {
    //     storage.set(key, value);
    //   },
    // };
    //
    // export const supabase = createClient(supabaseUrl!, supabaseAnonKey!, {
    //   auth: {
    //     storage: MMKVStorage,
    //     persistSession: true,
    //   },
    // });

    /**
     * PLACEHOLDER: Uncomment above code and install @supabase/supabase-js to use Supabase
     */
    export const supabaseEnabled = false;

    // Placeholder export to prevent import errors
    export const supabase = null;
""")

AUTH_SCREENS = ("sign-in.tsx", "sign-up.tsx", "forgot-password.tsx")


def write_template_project(root: Path) -> Path:
    """Materialise the template files the setup tool rewrites under *root*."""
    (root / "app.json").write_text(json.dumps(APP_JSON, indent=2), encoding="utf-8")
    (root / "package.json").write_text(json.dumps(PACKAGE_JSON, indent=2), encoding="utf-8")

    styles = root / "src" / "styles"
    styles.mkdir(parents=True)
    (styles / "theme.ts").write_text(THEME_TS, encoding="utf-8")

    lib = root / "src" / "lib"
    lib.mkdir(parents=True)
    (lib / "supabase.ts").write_text(SUPABASE_TS, encoding="utf-8")

    auth = root / "src" / "app" / "(auth)"
    auth.mkdir(parents=True)
    for screen in AUTH_SCREENS:
        (auth / screen).write_text("export default function Screen() {}\n", encoding="utf-8")
    (root / "src" / "app" / "(tabs)").mkdir()
    return root


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def template_project(tmp_path: Path) -> Path:
    """Temporary copy of a freshly instantiated template project."""
    project_dir = tmp_path / "my-app"
    project_dir.mkdir()
    yield write_template_project(project_dir)


@pytest.fixture
def settings(template_project: Path) -> SetupSettings:
    """Settings rooted at the template project; never runs npm."""
    return SetupSettings(project_root=template_project, skip_install=True)


@pytest.fixture
def answers():
    """Factory turning a list of answers into a readable input stream."""

    def _make(lines: list[str]) -> io.StringIO:
        return io.StringIO("".join(f"{line}\n" for line in lines))

    return _make


@pytest.fixture
def theme_ts() -> str:
    """Pristine ``src/styles/theme.ts`` contents."""
    return THEME_TS


@pytest.fixture
def supabase_ts() -> str:
    """Pristine ``src/lib/supabase.ts`` contents."""
    return SUPABASE_TS
