"""Display preference persistence via QSettings."""

from __future__ import annotations

import logging
from dataclasses import fields

from PyQt6.QtCore import QSettings

from spectrum_explorer.models.preferences import DisplayPreferences

logger = logging.getLogger(__name__)

_GROUP = "preferences"


def load_preferences(settings: QSettings) -> DisplayPreferences:
    """Read stored preferences; missing or invalid entries use defaults."""
    stored: dict[str, object] = {}
    settings.beginGroup(_GROUP)
    try:
        for f in fields(DisplayPreferences):
            if settings.contains(f.name):
                stored[f.name] = settings.value(f.name)
    finally:
        settings.endGroup()
    return DisplayPreferences.from_dict(stored)


def save_preferences(settings: QSettings, preferences: DisplayPreferences) -> None:
    """Write *preferences* and flush them to storage."""
    settings.beginGroup(_GROUP)
    try:
        for name, value in preferences.to_dict().items():
            settings.setValue(name, value)
    finally:
        settings.endGroup()
    settings.sync()
    if settings.status() != QSettings.Status.NoError:
        logger.warning("Failed to write preferences to %s", settings.fileName())
