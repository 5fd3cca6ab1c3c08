"""Mapping-backed implementation of SettingsStore."""

from __future__ import annotations

from collections.abc import Mapping

from posprint.domain.repository.settings_store import SettingsStore


class DictSettingsStore(SettingsStore):

    def __init__(self, settings: Mapping[str, object] | None = None) -> None:
        self._settings = dict(settings or {})

    def get(self, key: str) -> str:
        value = self._settings.get(key)
        return "" if value is None else str(value)
