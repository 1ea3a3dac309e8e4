import hashlib
import logging
from typing import List, Tuple

import dns.exception
import dns.rdatatype
import dns.zone

from ..core.errors import ZoneParseError
from ..core.records import AUTO_TTL, PROXIABLE_TYPES, Record, RecordCollection
from ..utils.validators import sanitize_fqdn, validate_zone_name

logger = logging.getLogger(__name__)

SUPPORTED_TYPES = {"A", "AAAA", "CNAME", "MX", "NS", "TXT"}
SKIPPED_TYPES = {"SOA"}


class ZoneFileParser:
    def __init__(
        self,
        zone_path: str,
        origin: str = "",
        auto_ttl: int = 0,
        cache_ttl: int = 1,
    ):
        self.zone_path = zone_path
        self.origin = origin
        self.auto_ttl = auto_ttl
        self.cache_ttl = cache_ttl
        self.checksum = ""

    def parse(self) -> Tuple[str, RecordCollection]:
        """Parse the zone file into a zone name and its records."""
        try:
            with open(self.zone_path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise ZoneParseError(f"Error opening '{self.zone_path}': {e}") from e

        self.checksum = hashlib.sha256(raw).hexdigest()

        try:
            zone = dns.zone.from_text(
                raw.decode("utf-8"),
                origin=self.origin or None,
                relativize=False,
                check_origin=False,
            )
        except (dns.exception.DNSException, UnicodeDecodeError) as e:
            raise ZoneParseError(f"Error reading '{self.zone_path}': {e}") from e

        zone_name = sanitize_fqdn(zone.origin.to_text())
        if not validate_zone_name(zone_name):
            raise ZoneParseError(f"Invalid zone name '{zone_name}' in '{self.zone_path}'")

        records: List[Record] = []
        for name, node in zone.nodes.items():
            owner = sanitize_fqdn(name.to_text())
            for rdataset in node.rdatasets:
                rtype = dns.rdatatype.to_text(rdataset.rdtype)
                if rtype in SKIPPED_TYPES:
                    continue
                if rtype not in SUPPORTED_TYPES:
                    raise ZoneParseError(
                        f"Unsupported record type {rtype} for '{owner}' in '{self.zone_path}'"
                    )

                ttl, proxied = self._interpret_ttl(rtype, rdataset.ttl)
                for rdata in rdataset:
                    try:
                        content, priority = self._content(rtype, rdata)
                    except UnicodeDecodeError as e:
                        raise ZoneParseError(
                            f"Invalid {rtype} content for '{owner}' in '{self.zone_path}': {e}"
                        ) from e
                    records.append(
                        Record(
                            name=owner,
                            type=rtype,
                            content=content,
                            ttl=ttl,
                            priority=priority,
                            proxied=proxied,
                        )
                    )

        logger.info(f"Successfully parsed {len(records)} records for zone {zone_name}")
        return zone_name, RecordCollection(records)

    def _interpret_ttl(self, rtype: str, ttl: int) -> Tuple[int, bool]:
        """Map the configured auto and cache TTL values onto Cloudflare settings."""
        if ttl == self.auto_ttl:
            return AUTO_TTL, False
        if ttl == self.cache_ttl:
            return AUTO_TTL, rtype in PROXIABLE_TYPES
        return ttl, False

    @staticmethod
    def _content(rtype: str, rdata):
        if rtype in ("A", "AAAA"):
            return rdata.address, None
        if rtype in ("CNAME", "NS"):
            return sanitize_fqdn(rdata.target.to_text()), None
        if rtype == "MX":
            return sanitize_fqdn(rdata.exchange.to_text()), int(rdata.preference)
        # TXT
        return "".join(part.decode("utf-8") for part in rdata.strings), None
