"""SQLModel implementation of the preferences repository."""

from __future__ import annotations

from typing import Callable

from sqlmodel import Session

from ...models.preferences import PREFERENCES_ROW_ID, Preferences


class SQLModelPreferencesRepository:
    """Stores preferences in a single row keyed by ``PREFERENCES_ROW_ID``."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get(self) -> Preferences:
        """Return stored preferences, or defaults when none were saved."""
        with self.session_factory() as session:
            stored = session.get(Preferences, PREFERENCES_ROW_ID)
            return stored if stored is not None else Preferences()

    def save(self, preferences: Preferences) -> Preferences:
        """Persist preferences, replacing any previous row."""
        preferences.id = PREFERENCES_ROW_ID
        with self.session_factory() as session:
            merged = session.merge(preferences)
            session.commit()
            session.refresh(merged)
            return merged
