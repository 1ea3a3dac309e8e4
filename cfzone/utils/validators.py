"""
Validators - Input validation for zone and record names

This module provides validation and normalisation helpers for DNS names
to ensure data integrity and safety.
"""

import logging
import re

logger = logging.getLogger(__name__)


def validate_fqdn(fqdn: str) -> bool:
    """
    Validate Fully Qualified Domain Name (FQDN).

    Args:
        fqdn: The FQDN to validate, with or without a trailing dot

    Returns:
        True if valid, False otherwise
    """
    if not fqdn or not isinstance(fqdn, str):
        return False

    fqdn = fqdn[:-1] if fqdn.endswith(".") else fqdn

    # Check length
    if len(fqdn) > 253:
        logger.warning(f"FQDN too long: {fqdn}")
        return False

    labels = fqdn.split(".")

    if len(labels) < 2:
        logger.warning(f"FQDN must have at least 2 labels: {fqdn}")
        return False

    # Consecutive dots
    if any(label == "" for label in labels):
        logger.warning(f"FQDN contains empty labels: {fqdn}")
        return False

    for label in labels:
        if not _validate_label(label):
            logger.warning(f"Invalid label '{label}' in FQDN: {fqdn}")
            return False

    return True


def _validate_label(label: str) -> bool:
    """
    Validate a single domain label.

    Labels can contain letters, digits, hyphens and underscores, and cannot
    start or end with a hyphen.
    """
    if len(label) == 0 or len(label) > 63:
        return False

    return re.match(r"^[a-zA-Z0-9_]([a-zA-Z0-9_-]*[a-zA-Z0-9_])?$", label) is not None


def validate_zone_name(zone: str) -> bool:
    """
    Validate DNS zone name.

    Args:
        zone: The zone name to validate

    Returns:
        True if valid, False otherwise
    """
    if not zone or not isinstance(zone, str):
        return False

    return validate_fqdn(zone)


def sanitize_fqdn(fqdn: str) -> str:
    """
    Normalize an FQDN for comparison with provider data.

    Strips whitespace and the trailing dot and lowercases the name. Wildcard
    and underscore labels are kept.

    Args:
        fqdn: The FQDN to sanitize

    Returns:
        Sanitized FQDN
    """
    if not fqdn:
        return fqdn

    fqdn = fqdn.strip().lower()

    # Remove consecutive dots
    fqdn = re.sub(r"\.+", ".", fqdn)

    return fqdn.strip(".")
