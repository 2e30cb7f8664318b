"""Session-scoped light/dark theme preference."""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Theme(str, Enum):
    """Display theme values."""

    LIGHT = "light"
    DARK = "dark"


class ThemeStore(Protocol):
    """Anything that can persist the last theme choice."""

    def get(self) -> str | None: ...

    def set(self, value: str) -> None: ...


class InMemoryThemeStore:
    """Default store; keeps the choice for the life of the process."""

    def __init__(self, value: str | None = None):
        self._value = value

    def get(self) -> str | None:
        return self._value

    def set(self, value: str) -> None:
        self._value = value


class ThemePreference:
    """Resolves and toggles the theme.

    The stored choice wins; without one, the OS preference decides.
    Unknown stored values are ignored.
    """

    def __init__(self, store: ThemeStore | None = None, prefers_dark: bool = False):
        self.store = store if store is not None else InMemoryThemeStore()
        self.prefers_dark = prefers_dark

    def current(self) -> Theme:
        stored = self.store.get()
        if stored in (Theme.LIGHT.value, Theme.DARK.value):
            return Theme(stored)
        return Theme.DARK if self.prefers_dark else Theme.LIGHT

    def toggle(self) -> Theme:
        """Flip the theme and persist the new choice."""
        following = Theme.LIGHT if self.current() == Theme.DARK else Theme.DARK
        self.store.set(following.value)
        return following
