"""Abstract read-only store of shop settings (address, phone, email)."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SettingsStore(ABC):

    @abstractmethod
    def get(self, key: str) -> str:
        """Return the setting, or an empty string when it is not set."""
