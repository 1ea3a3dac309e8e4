"""
Utility functions and helpers.

This package contains utility functions for validation and operator
confirmation.
"""

from .prompt import yes_no
from .validators import sanitize_fqdn, validate_fqdn, validate_zone_name

__all__ = ["yes_no", "sanitize_fqdn", "validate_fqdn", "validate_zone_name"]
