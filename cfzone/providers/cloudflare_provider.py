"""
Cloudflare DNS provider implementation.

This module talks to the Cloudflare v4 REST API using requests.
"""

import logging
from typing import Dict, List, Optional

import requests

from .base_provider import DNSProvider
from ..core.errors import ConfigurationError, ProviderError
from ..core.records import AUTO_TTL, PROXIABLE_TYPES, Record

logger = logging.getLogger(__name__)

API_BASE = "https://api.cloudflare.com/client/v4"
PER_PAGE = 100


class CloudflareProvider(DNSProvider):
    """Cloudflare DNS provider implementation using the v4 API."""

    def __init__(self, config: Dict, session: Optional[requests.Session] = None):
        """Initialize Cloudflare provider."""
        self.config = config
        self.api_base = config.get("api_base", API_BASE).rstrip("/")
        self.timeout = config.get("timeout", 30)
        self.api_key = config.get("api_key", "")
        self.api_email = config.get("api_email", "")
        self.api_token = config.get("api_token", "")

        self.session = session or requests.Session()
        self.session.headers.update(self._auth_headers())

        logger.info(f"Cloudflare provider initialized for {self.api_base}")

    def _auth_headers(self) -> Dict[str, str]:
        """Build authentication headers, preferring a global key over a token."""
        if self.api_key and self.api_email:
            return {"X-Auth-Key": self.api_key, "X-Auth-Email": self.api_email}
        if self.api_token:
            return {"Authorization": f"Bearer {self.api_token}"}
        raise ConfigurationError(
            "Please set CF_API_KEY and CF_API_EMAIL (or CF_API_TOKEN) environment variables"
        )

    def _request(self, method: str, path: str, **kwargs) -> Dict:
        """Send a request and unwrap the Cloudflare response envelope."""
        url = f"{self.api_base}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise ProviderError(f"Error contacting Cloudflare: {e}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if not response.ok or not payload.get("success", False):
            errors = payload.get("errors") or [{"message": response.reason}]
            message = "; ".join(
                f"{error.get('code', response.status_code)}: {error.get('message', '')}"
                for error in errors
            )
            raise ProviderError(f"{method} {path} failed: {message}")

        return payload

    def get_zone_id(self, zone: str) -> str:
        """Get the Cloudflare zone identifier for a zone name."""
        payload = self._request("GET", "/zones", params={"name": zone})
        zones = payload.get("result") or []
        if not zones:
            raise ProviderError(f"Can't get zone ID for '{zone}': zone not found")
        return zones[0]["id"]

    def get_records(self, zone_id: str) -> List[Record]:
        """Get all DNS records for a zone, following pagination."""
        records = []
        page = 1
        while True:
            payload = self._request(
                "GET",
                f"/zones/{zone_id}/dns_records",
                params={"page": page, "per_page": PER_PAGE},
            )
            records.extend(self._from_api(item) for item in payload.get("result") or [])

            total_pages = (payload.get("result_info") or {}).get("total_pages", 1)
            if page >= total_pages:
                break
            page += 1

        logger.info(f"Retrieved {len(records)} records from Cloudflare")
        return records

    def create_record(self, zone_id: str, record: Record) -> str:
        """Create a new DNS record."""
        payload = self._request(
            "POST", f"/zones/{zone_id}/dns_records", json=self._to_api(record)
        )
        record_id = payload["result"]["id"]
        logger.debug(f"Created record {record} as {record_id}")
        return record_id

    def update_record(self, zone_id: str, record_id: str, record: Record) -> None:
        """Update an existing DNS record."""
        self._request(
            "PUT", f"/zones/{zone_id}/dns_records/{record_id}", json=self._to_api(record)
        )
        logger.debug(f"Updated record {record_id} -> {record}")

    def delete_record(self, zone_id: str, record_id: str) -> None:
        """Delete a DNS record."""
        self._request("DELETE", f"/zones/{zone_id}/dns_records/{record_id}")
        logger.debug(f"Deleted record {record_id}")

    @staticmethod
    def _from_api(item: Dict) -> Record:
        """Convert a Cloudflare API record into a Record."""
        return Record(
            id=item.get("id", ""),
            name=item["name"].lower(),
            type=item["type"].upper(),
            content=item.get("content", ""),
            ttl=item.get("ttl", AUTO_TTL),
            priority=item.get("priority") if item["type"].upper() == "MX" else None,
            proxied=bool(item.get("proxied", False)),
        )

    @staticmethod
    def _to_api(record: Record) -> Dict:
        """Convert a Record into a Cloudflare API payload."""
        data = {
            "type": record.type,
            "name": record.name,
            "content": record.content,
            "ttl": record.ttl,
        }
        if record.type in PROXIABLE_TYPES:
            data["proxied"] = record.proxied
        if record.priority is not None:
            data["priority"] = record.priority
        return data
