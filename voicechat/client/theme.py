from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

THEME_KEY = "theme"


@dataclass(frozen=True, slots=True)
class ThemeColors:
    background: str
    text: str
    primary: str
    secondary: str
    input_background: str
    button_hover: str


@dataclass(frozen=True, slots=True)
class Theme:
    name: str
    colors: ThemeColors


LIGHT_THEME = Theme(
    name="light",
    colors=ThemeColors(
        background="#E8E9EC",
        text="#4A5568",
        primary="#5D7AB9",
        secondary="#C65F5F",
        input_background="#F0F1F4",
        button_hover="rgba(0, 0, 0, 0.08)",
    ),
)

DARK_THEME = Theme(
    name="dark",
    colors=ThemeColors(
        background="#141518",
        text="#B0B8C1",
        primary="#546DA8",
        secondary="#B35757",
        input_background="#1E2124",
        button_hover="rgba(255, 255, 255, 0.03)",
    ),
)

THEMES = {theme.name: theme for theme in (LIGHT_THEME, DARK_THEME)}


class PreferenceStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryPreferenceStore:
    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values = dict(values or {})

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class JsonFilePreferenceStore:
    """Preferences kept as a flat JSON object in a single file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        values = self._load()
        values[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(values, indent=2), encoding="utf-8")

    def _load(self) -> dict[str, object]:
        if not self.path.exists():
            return {}

        try:
            values = json.loads(self.path.read_text(encoding="utf-8"))
        except ValueError:
            logger.warning("Ignoring unreadable preferences file %s", self.path)
            return {}

        return values if isinstance(values, dict) else {}


class ThemePreferences:
    def __init__(self, store: PreferenceStore, default: Theme = DARK_THEME) -> None:
        self.store = store
        saved = store.get(THEME_KEY)
        # Anything other than "light" falls back to the dark palette.
        if saved is None:
            self.theme = default
        else:
            self.theme = LIGHT_THEME if saved == LIGHT_THEME.name else DARK_THEME

    def set_theme(self, name: str) -> Theme:
        if name not in THEMES:
            expected = ", ".join(THEMES)
            raise ValueError(f"Unknown theme '{name}'. Expected one of: {expected}.")

        self.theme = THEMES[name]
        self.store.set(THEME_KEY, self.theme.name)
        return self.theme

    def toggle(self) -> Theme:
        if self.theme.name == LIGHT_THEME.name:
            return self.set_theme(DARK_THEME.name)
        return self.set_theme(LIGHT_THEME.name)
