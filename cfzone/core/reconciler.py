"""
Reconciler - Core diff logic for zone synchronisation

This module computes the changes needed to bring the records held by the
provider in line with the records declared in the zone file.
"""

import logging
from dataclasses import dataclass

from .records import RecordCollection, full_match, updatable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeSet:
    """Disjoint sets of changes computed by the reconciler."""

    deletes: RecordCollection
    adds: RecordCollection
    updates: RecordCollection
    unchanged: int = 0

    @property
    def total_changes(self) -> int:
        return len(self.deletes) + len(self.adds) + len(self.updates)

    def without_deletes(self) -> "ChangeSet":
        """Return a copy with the delete set cleared."""
        return ChangeSet(
            deletes=RecordCollection(),
            adds=self.adds,
            updates=self.updates,
            unchanged=self.unchanged,
        )


class Reconciler:
    """Computes add, delete and update sets between desired and actual records."""

    def diff(self, desired: RecordCollection, actual: RecordCollection) -> ChangeSet:
        """
        Diff desired records against actual records.

        Records present on both sides under full_match are unchanged. The
        remaining records are paired by identity (updatable): each delete
        candidate, in order, takes the first add candidate with the same
        identity that has not been taken yet. A pair becomes an update that
        carries the desired content and the actual id. Everything left over
        is an add or a delete.

        No record and no remote id appears in more than one set. When a
        name holds several values of one type, an update and an add (or a
        delete) can share that name and type: [A 2, A 3] against [A 1]
        gives one update and one add.

        Args:
            desired: Records declared in the zone file
            actual: Records held by the provider, sentinel already removed

        Returns:
            ChangeSet with deletes, adds and updates
        """
        logger.info("Analyzing DNS record changes...")

        add_candidates = desired.difference(actual, full_match)
        delete_candidates = actual.difference(desired, full_match)

        remaining_adds = add_candidates
        updates = []
        deletes = []
        for existing in delete_candidates:
            index, wanted = remaining_adds.find(existing, updatable)
            if wanted is None:
                deletes.append(existing)
                logger.debug(f"Delete needed: {existing}")
                continue

            updates.append(wanted.with_id(existing.id))
            remaining_adds = remaining_adds.remove(index)
            logger.debug(f"Update needed: {existing} -> {wanted}")

        changes = ChangeSet(
            deletes=RecordCollection(deletes),
            adds=remaining_adds,
            updates=RecordCollection(updates),
            unchanged=len(actual) - len(delete_candidates),
        )

        logger.info(
            f"Change analysis complete: {len(changes.adds)} adds, {len(changes.updates)} updates, "
            f"{len(changes.deletes)} deletes, {changes.unchanged} unchanged"
        )
        return changes
