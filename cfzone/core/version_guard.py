"""
Version Guard - Protects a zone against downgrades

A TXT record named "cfzone-version.<zone>" holds the revision of the
reconciliation logic that last wrote to the zone. A run with older logic
must not silently undo what a newer revision did.
"""

import logging
from typing import Callable, Optional

from .errors import PolicyAbort
from .reconciler import ChangeSet
from .records import NOT_FOUND, Record, RecordCollection, updatable

logger = logging.getLogger(__name__)

# Must be bumped whenever a change affects what is written to the provider.
REVISION = 2019121201

SENTINEL_PREFIX = "cfzone-version."
SENTINEL_TYPE = "TXT"
SENTINEL_TTL = 600


def sentinel_record(zone_name: str, revision: int = REVISION) -> Record:
    """Build the sentinel record for a zone."""
    return Record(
        name=SENTINEL_PREFIX + zone_name,
        type=SENTINEL_TYPE,
        content=str(revision),
        ttl=SENTINEL_TTL,
    )


class VersionGuard:
    """Detects, checks and re-injects the version sentinel of a zone."""

    def __init__(
        self,
        zone_name: str,
        confirm: Callable[[str], bool],
        revision: int = REVISION,
    ):
        self.zone_name = zone_name
        self.confirm = confirm
        self.revision = revision
        self.sentinel = sentinel_record(zone_name, revision)
        self.deployed: Optional[Record] = None

    @property
    def deployed_revision(self) -> Optional[int]:
        """Revision found in the zone, or None if the sentinel is absent."""
        if self.deployed is None:
            return None
        try:
            return int(self.deployed.content.strip().strip('"'))
        except ValueError:
            logger.warning(
                f"Unparsable version sentinel content '{self.deployed.content}', treating as 0"
            )
            return 0

    @property
    def is_downgrade(self) -> bool:
        deployed = self.deployed_revision
        return deployed is not None and deployed > self.revision

    def inspect(self, actual: RecordCollection) -> RecordCollection:
        """
        Locate the sentinel in the actual records and strip it.

        Args:
            actual: Records held by the provider

        Returns:
            The actual records without the sentinel
        """
        index, found = actual.find(self.sentinel, updatable)
        self.deployed = found
        if index == NOT_FOUND:
            logger.info(f"No version sentinel found for {self.zone_name}")
            return actual

        logger.info(f"Deployed version for {self.zone_name}: {self.deployed_revision}")
        return actual.remove(index)

    def check(self) -> None:
        """
        Ask the operator before touching a zone written by newer logic.

        Raises:
            PolicyAbort: If the operator declines
        """
        if not self.is_downgrade:
            return

        prompt = (
            f"Deployed version ({self.deployed_revision}) is newer than "
            f"current version ({self.revision}). Continue (y/N)? "
        )
        if not self.confirm(prompt):
            raise PolicyAbort("Deployed version is newer than current version")
        logger.warning(
            f"Proceeding with version {self.revision} over deployed version {self.deployed_revision}"
        )

    def inject(self, changes: ChangeSet) -> ChangeSet:
        """Add the sentinel to the change set if it is missing or outdated."""
        if self.deployed is None:
            return ChangeSet(
                deletes=changes.deletes,
                adds=changes.adds.append(self.sentinel),
                updates=changes.updates,
                unchanged=changes.unchanged,
            )

        if self.deployed_revision == self.revision:
            return changes

        return ChangeSet(
            deletes=changes.deletes,
            adds=changes.adds,
            updates=changes.updates.append(self.sentinel.with_id(self.deployed.id)),
            unchanged=changes.unchanged,
        )
