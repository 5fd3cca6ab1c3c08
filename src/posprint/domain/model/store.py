"""Display identity of the shop printing a document."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StoreProfile:
    name: str
    address: str = ""
    phone: str = ""
    email: str = ""
    website: str = ""
