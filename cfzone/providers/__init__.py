"""
DNS provider implementations.

This package contains the Cloudflare provider and an in-memory mock
provider used for tests and demonstrations.
"""

from .base_provider import DNSProvider
from .cloudflare_provider import CloudflareProvider
from .dns_client import DNSClient
from .mock_provider import MockDNSProvider

__all__ = ["DNSClient", "DNSProvider", "CloudflareProvider", "MockDNSProvider"]
