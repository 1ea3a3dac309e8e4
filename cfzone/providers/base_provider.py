"""
Base DNS provider interface.

This module defines the abstract base class that all DNS providers must implement.
"""

from abc import ABC, abstractmethod
from typing import List

from ..core.records import Record


class DNSProvider(ABC):
    """Abstract base class for DNS providers."""

    @abstractmethod
    def get_zone_id(self, zone: str) -> str:
        """Get the provider identifier of a zone by name."""
        pass

    @abstractmethod
    def get_records(self, zone_id: str) -> List[Record]:
        """Get all DNS records for a zone."""
        pass

    @abstractmethod
    def create_record(self, zone_id: str, record: Record) -> str:
        """Create a new DNS record and return its identifier."""
        pass

    @abstractmethod
    def update_record(self, zone_id: str, record_id: str, record: Record) -> None:
        """Replace the content of an existing DNS record."""
        pass

    @abstractmethod
    def delete_record(self, zone_id: str, record_id: str) -> None:
        """Delete a DNS record."""
        pass
