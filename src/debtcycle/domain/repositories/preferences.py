"""Preferences repository protocol."""

from __future__ import annotations

from typing import Protocol

from ...models.preferences import Preferences


class PreferencesRepository(Protocol):
    """Repository for the single preferences row."""

    def get(self) -> Preferences:
        """Return stored preferences, or defaults when none were saved."""
        ...

    def save(self, preferences: Preferences) -> Preferences:
        """Persist preferences, replacing any previous row."""
        ...
