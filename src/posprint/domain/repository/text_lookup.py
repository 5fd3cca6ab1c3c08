"""Abstract lookup for translatable receipt labels."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TextLookup(ABC):

    @abstractmethod
    def lookup(self, key: str, namespace: str, fallback: str) -> str:
        """Return the text for *key*, or *fallback* when it is unknown."""
