"""
Configuration Loader (``money_config.loader``).

Responsibility
--------------
Loads the YAML configuration file and parses it into a typed
``MoneyConfig``.  Runtime callers go through
``money_config.get_active_config()`` instead of calling this directly.

Invariants enforced
-------------------
* Required keys have no silent defaults; a missing key is a ``KeyError``.
* ``compute_checksum`` produces a deterministic SHA-256 hash for
  configuration identity and change detection.
* The default currency resolves in the currency registry and the display
  locale is non-empty.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing required keys  -> ``KeyError`` propagates.
* Unregistered currency or empty locale  -> ``ValueError``.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from money_config.schema import MoneyConfig
from money_kernel.domain.currency import CurrencyRegistry


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ValueError: if the document is not a mapping.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping")
    return data


def compute_checksum(data: dict[str, Any]) -> str:
    """SHA-256 of the canonical JSON serialization of ``data``."""
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()


def validate_money_config(config: MoneyConfig) -> list[str]:
    """Return a list of validation errors (empty when valid)."""
    errors: list[str] = []
    if not CurrencyRegistry.is_valid(config.default_currency):
        errors.append(f"default_currency {config.default_currency!r} is not a registered currency")
    if not config.display_locale.strip():
        errors.append("display_locale must be non-empty")
    return errors


def parse_money_config(data: dict[str, Any]) -> MoneyConfig:
    """
    Parse and validate a ``MoneyConfig`` from a dict.

    Raises:
        KeyError: if a required key is missing.
        ValueError: if validation fails.
    """
    config = MoneyConfig(
        config_id=str(data["config_id"]),
        version=int(data["version"]),
        default_currency=CurrencyRegistry.normalize(str(data["default_currency"])),
        display_locale=str(data.get("display_locale") or ""),
        checksum=compute_checksum(data),
    )
    errors = validate_money_config(config)
    if errors:
        raise ValueError(
            "Money configuration validation failed:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )
    return config
