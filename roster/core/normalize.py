"""
Field Normalizer - Canonical values for loosely-typed view fields
Every function here is total: bad input falls back to a safe default, nothing raises
"""

from typing import Any, Tuple


# Closed set of bus codes, in canonical order
VALID_BUSES: Tuple[str, ...] = (
    "None",
    "Alpha1", "Alpha2", "Alpha3", "Alpha4", "Alpha5",
    "Bravo1", "Bravo2", "Bravo3", "Bravo4", "Bravo5",
)

NO_BUS = "None"


def clean_str(value: Any) -> str:
    """Return value if it is a string, otherwise an empty string"""
    if isinstance(value, str):
        return value
    return ""


def clean_id(value: Any) -> str:
    """Return a document id as a string; numeric ids are kept, anything else becomes ''"""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def normalize_bus(value: Any) -> str:
    """
    Normalize a free-text bus assignment to one of VALID_BUSES

    Comparison is exact after trimming; 'alpha1' is not 'Alpha1'.

    Args:
        value: Raw bus value from the view

    Returns:
        A member of VALID_BUSES ('None' for anything unrecognized)
    """
    if not value or not isinstance(value, str):
        return NO_BUS
    trimmed = value.strip()
    if trimmed in VALID_BUSES:
        return trimmed
    return NO_BUS


def parse_nofly(value: Any) -> bool:
    """
    Parse the nofly flag

    The view emits "" for a person flying normally and "nofly" for one who is grounded.
    """
    if value is True:
        return True
    if isinstance(value, str) and value.strip().lower() == "nofly":
        return True
    return False


def parse_confirmed(value: Any) -> bool:
    """
    Parse the confirmed flag

    The view emits "" when the person has a confirmation date and
    "unconfirmed" when they do not.
    """
    if value is True:
        return True
    if isinstance(value, str):
        trimmed = value.strip().lower()
        if trimmed == "":
            return True
        if trimmed == "confirmed":
            return True
    return False


def parse_boolean(value: Any) -> bool:
    """True only for boolean True or the string 'true' (any case)"""
    if value is True:
        return True
    if isinstance(value, str) and value.strip().lower() == "true":
        return True
    return False


def parse_yes_no(value: Any) -> bool:
    """True only for boolean True or the string 'Y' (any case); 'N' and blanks are False"""
    if value is True:
        return True
    if isinstance(value, str) and value.strip().upper() == "Y":
        return True
    return False


def parse_partner_claim(value: Any) -> str:
    """
    Extract the partner id a row claims to be paired with

    Returns:
        The trimmed partner id, or '' when the row claims no partner
    """
    return clean_id(value).strip()


def is_confirmation_date(value: Any) -> bool:
    """Assignment rows carry the confirmation date itself; blank or 'unconfirmed' means not confirmed"""
    if value is True:
        return True
    trimmed = clean_str(value).strip()
    return bool(trimmed) and trimmed.lower() != "unconfirmed"
