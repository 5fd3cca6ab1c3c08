"""Application configuration loaded from a JSON file.

Example ``posprint.json``::

    {
      "store": {"name": "Koffiebar", "address": "Markt 1, Utrecht"},
      "currency": "€",
      "tax_rate": 21,
      "logo": "logo.png",
      "image_mode": 0,
      "printer": {"connector": "network", "device": "192.168.1.40", "port": 9100},
      "settings": {"company_phone_number": "030 123 4567"},
      "translations": {"receipt": {"total": "Total"}}
    }

Every key is optional. A missing file yields the defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path

from posprint.domain.exceptions import ConfigurationError
from posprint.domain.model.blocks import ImageMode
from posprint.domain.model.store import StoreProfile
from posprint.domain.model.value_objects import DEFAULT_CURRENCY, to_decimal
from posprint.domain.service.calculator import DEFAULT_TAX_RATE

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("posprint.json")


@dataclass(frozen=True)
class PrinterConfig:
    connector: str = "file"
    device: str | None = None
    port: int = 9100


@dataclass(frozen=True)
class AppConfig:
    store: StoreProfile = field(default_factory=lambda: StoreProfile(name=""))
    currency: str = DEFAULT_CURRENCY
    tax_rate: Decimal = DEFAULT_TAX_RATE
    logo: str | None = None
    image_mode: ImageMode = ImageMode.GRAPHICS
    printer: PrinterConfig = field(default_factory=PrinterConfig)
    settings: dict[str, str] = field(default_factory=dict)
    translations: dict[str, dict[str, str]] = field(default_factory=dict)


def load_config(path: Path | None = None) -> AppConfig:
    config_path = path or DEFAULT_CONFIG_FILE
    if not config_path.exists():
        if path is not None:
            raise ConfigurationError(f"Config file not found: {config_path}")
        logger.warning(f"No {config_path} found, using default configuration")
        return AppConfig()

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Cannot read config file {config_path}: {exc}") from exc

    try:
        return _to_config(raw)
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigurationError(f"Malformed config file {config_path}: {exc}") from exc


def _to_config(raw: dict) -> AppConfig:
    store = raw.get("store") or {}
    printer = raw.get("printer") or {}
    return AppConfig(
        store=StoreProfile(
            name=store.get("name", ""),
            address=store.get("address", ""),
            phone=store.get("phone", ""),
            email=store.get("email", ""),
            website=store.get("website", ""),
        ),
        currency=raw.get("currency", DEFAULT_CURRENCY),
        tax_rate=to_decimal(raw.get("tax_rate", DEFAULT_TAX_RATE)),
        logo=raw.get("logo"),
        image_mode=ImageMode(int(raw.get("image_mode", 0))),
        printer=PrinterConfig(
            connector=printer.get("connector", "file"),
            device=printer.get("device"),
            port=int(printer.get("port", 9100)),
        ),
        settings={str(k): str(v) for k, v in (raw.get("settings") or {}).items()},
        translations={
            str(ns): {str(k): str(v) for k, v in keys.items()}
            for ns, keys in (raw.get("translations") or {}).items()
        },
    )
