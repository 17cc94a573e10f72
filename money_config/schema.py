"""
Configuration Schema (``money_config.schema``).

Frozen dataclass for the money configuration.  Produced by
``money_config.loader`` and returned by ``get_active_config()``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MoneyConfig:
    """Validated money configuration set.

    ``checksum`` is the SHA-256 of the canonical JSON form of the source
    document, so two loads of the same YAML compare equal.
    """

    config_id: str
    version: int
    default_currency: str
    display_locale: str
    checksum: str = ""
