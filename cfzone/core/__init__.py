"""
Core reconciliation functionality.

This package contains the record model, the diff logic and the version
sentinel handling.
"""

from .errors import CfzoneError
from .options import SyncOptions
from .records import Record, RecordCollection, full_match, updatable
from .reconciler import ChangeSet, Reconciler
from .version_guard import REVISION, VersionGuard
from .zone_sync import ZoneSync

__all__ = [
    "CfzoneError",
    "SyncOptions",
    "Record",
    "RecordCollection",
    "full_match",
    "updatable",
    "ChangeSet",
    "Reconciler",
    "REVISION",
    "VersionGuard",
    "ZoneSync",
]
