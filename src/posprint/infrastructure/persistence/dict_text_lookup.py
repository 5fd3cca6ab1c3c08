"""Mapping-backed implementation of TextLookup."""

from __future__ import annotations

from collections.abc import Mapping

from posprint.domain.repository.text_lookup import TextLookup


class DictTextLookup(TextLookup):
    """Looks labels up in ``{namespace: {key: text}}``."""

    def __init__(self, translations: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._translations = {ns: dict(keys) for ns, keys in (translations or {}).items()}

    def lookup(self, key: str, namespace: str, fallback: str) -> str:
        text = self._translations.get(namespace, {}).get(key)
        return text if text else fallback
