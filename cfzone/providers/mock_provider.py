"""
Mock DNS provider for testing and demonstration.

This module provides a mock DNS provider that stores records in memory
for safe testing and demonstration purposes.
"""

import itertools
import logging
from typing import Dict, Iterable, List, Set, Tuple

from .base_provider import DNSProvider
from ..core.errors import ProviderError
from ..core.records import Record
from ..utils.validators import sanitize_fqdn

logger = logging.getLogger(__name__)


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes."""

    def __init__(self, config: Dict = None):
        """Initialize mock provider."""
        config = config or {}
        self.zones: Dict[str, str] = {}
        self.records: Dict[str, List[Record]] = {}
        self.calls: List[Tuple[str, Record]] = []
        self.fail_on: Set[Tuple[str, str]] = set()
        self._ids = itertools.count(1)

        for zone in config.get("zones", []):
            self.add_zone(zone)
        logger.info("Mock DNS provider initialized")

    def add_zone(self, zone: str, records: Iterable[Record] = ()) -> str:
        """Register a zone and seed it with records, assigning missing ids."""
        zone = sanitize_fqdn(zone)
        zone_id = self.zones.get(zone) or f"zone-{next(self._ids)}"
        self.zones[zone] = zone_id
        self.records.setdefault(zone_id, [])
        for record in records:
            if not record.id:
                record = record.with_id(self._next_id())
            self.records[zone_id].append(record)
        return zone_id

    def fail(self, operation: str, name: str):
        """Make the given operation fail for records with this name."""
        self.fail_on.add((operation, sanitize_fqdn(name)))

    def _next_id(self) -> str:
        return f"rec-{next(self._ids)}"

    def _check_failure(self, operation: str, record: Record):
        self.calls.append((operation, record))
        if (operation, sanitize_fqdn(record.name)) in self.fail_on:
            raise ProviderError(f"Mock: {operation} rejected for {record.name}")

    def _index(self, zone_id: str, record_id: str) -> int:
        for index, existing in enumerate(self.records.get(zone_id, [])):
            if existing.id == record_id:
                return index
        raise ProviderError(f"Record {record_id} not found in zone {zone_id}")

    def get_zone_id(self, zone: str) -> str:
        """Get the identifier of a registered zone."""
        zone_id = self.zones.get(sanitize_fqdn(zone))
        if zone_id is None:
            raise ProviderError(f"Zone {zone} not found")
        return zone_id

    def get_records(self, zone_id: str) -> List[Record]:
        """Get all DNS records for a zone."""
        if zone_id not in self.records:
            raise ProviderError(f"Zone {zone_id} not found")
        logger.info(f"Mock: Retrieved {len(self.records[zone_id])} records")
        return list(self.records[zone_id])

    def create_record(self, zone_id: str, record: Record) -> str:
        """Create a new DNS record."""
        self._check_failure("create", record)
        created = record.with_id(self._next_id())
        self.records.setdefault(zone_id, []).append(created)
        logger.info(f"Mock: Created record {created}")
        return created.id

    def update_record(self, zone_id: str, record_id: str, record: Record) -> None:
        """Update an existing DNS record."""
        self._check_failure("update", record)
        index = self._index(zone_id, record_id)
        self.records[zone_id][index] = record.with_id(record_id)
        logger.info(f"Mock: Updated record {record_id} -> {record}")

    def delete_record(self, zone_id: str, record_id: str) -> None:
        """Delete a DNS record."""
        index = self._index(zone_id, record_id)
        self._check_failure("delete", self.records[zone_id][index])
        del self.records[zone_id][index]
        logger.info(f"Mock: Deleted record {record_id}")
