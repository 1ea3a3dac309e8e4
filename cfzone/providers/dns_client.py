"""
DNS Client - Unified interface for DNS provider APIs

This module provides a common interface for the supported DNS providers,
currently Cloudflare and an in-memory mock.
"""

import logging
from typing import Dict, List

from .base_provider import DNSProvider
from .cloudflare_provider import CloudflareProvider
from .mock_provider import MockDNSProvider
from ..core.errors import ConfigurationError
from ..core.records import Record

logger = logging.getLogger(__name__)


class DNSClient:
    """Unified DNS client that supports multiple providers."""

    def __init__(self, config: Dict, provider: DNSProvider = None):
        """Initialize DNS client with configuration."""
        self.config = config
        self.provider = provider or self._get_provider()

    def _get_provider(self) -> DNSProvider:
        """Get DNS provider based on configuration."""
        provider_name = self.config.get("default_provider", "cloudflare")
        provider_config = self.config.get("dns_providers", {}).get(provider_name) or {}

        if provider_name == "cloudflare":
            return CloudflareProvider(provider_config)
        elif provider_name == "mock":
            return MockDNSProvider(provider_config)
        raise ConfigurationError(f"Unknown provider '{provider_name}'")

    def get_zone_id(self, zone: str) -> str:
        """Get the provider identifier of a zone."""
        return self.provider.get_zone_id(zone)

    def get_records(self, zone_id: str) -> List[Record]:
        """Get all DNS records for a zone."""
        return self.provider.get_records(zone_id)

    def create_record(self, zone_id: str, record: Record) -> str:
        """Create a new DNS record."""
        return self.provider.create_record(zone_id, record)

    def update_record(self, zone_id: str, record_id: str, record: Record) -> None:
        """Update an existing DNS record."""
        self.provider.update_record(zone_id, record_id, record)

    def delete_record(self, zone_id: str, record_id: str) -> None:
        """Delete a DNS record."""
        self.provider.delete_record(zone_id, record_id)
