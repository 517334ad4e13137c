"""
Core package - Configuration, logging and field normalization
"""

from .config import Settings, configure_logging, get_settings, reload_settings
from .normalize import (
    VALID_BUSES,
    clean_id,
    clean_str,
    normalize_bus,
    parse_boolean,
    parse_confirmed,
    parse_nofly,
    parse_partner_claim,
    parse_yes_no
)

__all__ = [
    "Settings",
    "configure_logging",
    "get_settings",
    "reload_settings",
    "VALID_BUSES",
    "clean_id",
    "clean_str",
    "normalize_bus",
    "parse_boolean",
    "parse_confirmed",
    "parse_nofly",
    "parse_partner_claim",
    "parse_yes_no"
]
