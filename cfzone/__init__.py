"""
cfzone - Keep a Cloudflare zone in sync with a zone file

Reconciles the records declared in an RFC 1035 zone file with the records
held by Cloudflare, and guards zones against downgrades by older revisions
of the tool.
"""

__version__ = "2019.12.12.1"
__author__ = "cfzone Team"
__description__ = "Synchronise DNS zone files with Cloudflare"

from .core.reconciler import Reconciler
from .core.records import RecordCollection
from .core.zone_sync import ZoneSync
from .providers.dns_client import DNSClient

__all__ = [
    "Reconciler",
    "RecordCollection",
    "ZoneSync",
    "DNSClient",
]
