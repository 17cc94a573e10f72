"""
money_config -- single public entrypoint for money configuration.

Responsibility:
    Provides the ONLY way to obtain money defaults at runtime through
    ``get_active_config()``.  No other component reads the configuration
    files directly.

Architecture position:
    Configuration -- sits above ``money_kernel``.  The kernel MUST NEVER
    import from ``money_config``; ``money_config.bridges`` turns a
    ``MoneyConfig`` into the kernel's ``MoneyContext``.

Invariants enforced:
    - Single entrypoint: all runtime config flows through
      ``get_active_config()``.
    - The default currency resolves in the registry and the display
      locale is non-empty.
    - Deterministic identity: the same YAML always yields the same checksum.

Failure modes:
    - ``FileNotFoundError`` -- the configuration file does not exist.
    - ``KeyError`` -- a required key is missing.
    - ``ValueError`` -- validation failures.

Audit relevance:
    Every successful ``get_active_config()`` call emits a
    ``MONEY_CONFIG_TRACE`` log entry with the config_id, version, checksum
    and the resolved defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path

from money_config.loader import load_yaml_file, parse_money_config
from money_config.schema import MoneyConfig

_logger = logging.getLogger("money_kernel.config")

_DEFAULT_CONFIG_PATH = Path(__file__).parent / "sets" / "default.yaml"


def get_active_config(config_path: Path | None = None) -> MoneyConfig:
    """The ONLY public configuration entrypoint.

    Args:
        config_path: Override path to a configuration file.
            Defaults to money_config/sets/default.yaml.

    Returns:
        MoneyConfig -- validated, frozen.

    Raises:
        FileNotFoundError: If the configuration file does not exist.
        KeyError: If a required key is missing.
        ValueError: If configuration validation fails.
    """
    path = Path(config_path) if config_path is not None else _DEFAULT_CONFIG_PATH
    config = parse_money_config(load_yaml_file(path))

    _logger.info(
        "MONEY_CONFIG_TRACE",
        extra={
            "trace_type": "MONEY_CONFIG_TRACE",
            "config_set_id": config.config_id,
            "config_set_version": config.version,
            "checksum": config.checksum,
            "default_currency": config.default_currency,
            "display_locale": config.display_locale,
        },
    )
    return config


__all__ = ["MoneyConfig", "get_active_config"]
