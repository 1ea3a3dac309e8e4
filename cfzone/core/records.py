"""
Records - DNS record value type and collection operations

A RecordCollection is an ordered, immutable sequence of records. Its set-like
operations take a matcher, a plain predicate over two records, so the same
collection can be compared structurally (full_match) or by identity
(updatable).
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)

# Cloudflare uses a TTL of 1 to mean "automatic".
AUTO_TTL = 1

# Only these types can be served through the Cloudflare proxy.
PROXIABLE_TYPES = frozenset({"A", "AAAA", "CNAME"})

NOT_FOUND = -1


@dataclass(frozen=True)
class Record:
    """A single DNS resource record."""

    name: str
    type: str
    content: str
    ttl: int = AUTO_TTL
    priority: Optional[int] = None
    proxied: bool = False
    id: str = ""

    def with_id(self, record_id: str) -> "Record":
        """Return a copy of this record targeting another remote identity."""
        return replace(self, id=record_id)

    def __str__(self) -> str:
        ttl = "auto" if self.ttl == AUTO_TTL else str(self.ttl)
        text = f"{self.type} {self.name} {self.content} ttl={ttl}"
        if self.priority is not None:
            text += f" priority={self.priority}"
        if self.proxied:
            text += " proxied"
        if self.id:
            text += f" id={self.id}"
        return text


Matcher = Callable[[Record, Record], bool]


def full_match(a: Record, b: Record) -> bool:
    """Return True if every user-meaningful attribute of a and b is equal."""
    return (
        a.name.lower() == b.name.lower()
        and a.type == b.type
        and a.content == b.content
        and a.ttl == b.ttl
        and a.priority == b.priority
        and a.proxied == b.proxied
    )


def updatable(a: Record, b: Record) -> bool:
    """Return True if a and b denote the same logical record.

    The identity key is the name and type. Content, TTL, priority and the
    proxied flag may all differ.
    """
    return a.name.lower() == b.name.lower() and a.type == b.type


class RecordCollection:
    """Ordered collection of DNS records."""

    def __init__(self, records: Iterable[Record] = ()):
        self._records: Tuple[Record, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, index: int) -> Record:
        return self._records[index]

    def __bool__(self) -> bool:
        return bool(self._records)

    def __eq__(self, other) -> bool:
        if isinstance(other, RecordCollection):
            return self._records == other._records
        return NotImplemented

    def __repr__(self) -> str:
        return f"RecordCollection({list(self._records)!r})"

    def find(self, target: Record, matcher: Matcher) -> Tuple[int, Optional[Record]]:
        """
        Find the first record matching target.

        Args:
            target: Record to compare against
            matcher: Predicate called as matcher(element, target)

        Returns:
            Tuple of (index, record), or (NOT_FOUND, None) if nothing matches
        """
        for index, record in enumerate(self._records):
            if matcher(record, target):
                return index, record
        return NOT_FOUND, None

    def contains(self, target: Record, matcher: Matcher) -> bool:
        """Return True if any record matches target."""
        return self.find(target, matcher)[1] is not None

    def difference(self, other: "RecordCollection", matcher: Matcher) -> "RecordCollection":
        """Return records with no matching counterpart in other."""
        return RecordCollection(
            record for record in self._records if not other.contains(record, matcher)
        )

    def intersect(self, other: "RecordCollection", matcher: Matcher) -> "RecordCollection":
        """Return records that have a matching counterpart in other."""
        return RecordCollection(
            record for record in self._records if other.contains(record, matcher)
        )

    def remove(self, index: int) -> "RecordCollection":
        """
        Return a collection without the record at index.

        An index outside the collection, including NOT_FOUND, leaves the
        collection unchanged.
        """
        if index < 0 or index >= len(self._records):
            logger.debug(f"Ignoring removal of index {index} from {len(self)} records")
            return self
        return RecordCollection(self._records[:index] + self._records[index + 1 :])

    def append(self, record: Record) -> "RecordCollection":
        """Return a collection with record added at the end."""
        return RecordCollection(self._records + (record,))

    def filter_types(self, excluded_types: Iterable[str]) -> "RecordCollection":
        """Return a collection without records of the excluded types."""
        excluded = {record_type.upper() for record_type in excluded_types}
        return RecordCollection(
            record for record in self._records if record.type not in excluded
        )

    def render(self) -> str:
        """Render the collection as a deterministic text listing."""
        lines = []
        for record in self._records:
            ttl = "auto" if record.ttl == AUTO_TTL else str(record.ttl)
            line = f"{record.type:<6} {record.name:<40} {record.content:<30} {ttl:>6}"
            if record.priority is not None:
                line += f" priority={record.priority}"
            if record.proxied:
                line += " proxied"
            lines.append(line.rstrip())
        return "\n".join(lines)
