#!/usr/bin/env python3
"""
Zone Sync - Synchronise a zone file with the records held by Cloudflare

This module runs one reconciliation: it parses the zone file, fetches the
live records, checks the version sentinel, computes the changes, asks the
operator and applies the changes one record at a time.
"""

import logging
from typing import Callable, Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ..parsers.zone_file import ZoneFileParser
from ..providers.dns_client import DNSClient
from ..utils.prompt import console_confirm
from .errors import PolicyAbort, ProviderError, ProviderMutationError
from .options import SyncOptions
from .reconciler import ChangeSet, Reconciler
from .records import RecordCollection
from .version_guard import VersionGuard

# Initialize rich console and logger
console = Console()
logger = logging.getLogger(__name__)


class ZoneSync:
    """Main class that orchestrates a zone synchronisation run."""

    def __init__(
        self,
        dns_client: DNSClient,
        options: SyncOptions = None,
        confirm: Optional[Callable[[str], bool]] = None,
        output: Console = None,
    ):
        """Initialize the zone sync with a DNS client and run options."""
        self.dns_client = dns_client
        self.options = options or SyncOptions()
        self.console = output or console
        self.confirm = confirm or console_confirm(self.console)
        self.reconciler = Reconciler()

    def run(self, zone_path: str, dry_run: bool = False) -> ChangeSet:
        """
        Synchronise the zone described by zone_path.

        Args:
            zone_path: Path to the zone file
            dry_run: Report the changes without applying them

        Returns:
            The change set that was applied, sentinel included

        Raises:
            PolicyAbort: If the operator declines a confirmation prompt
            CfzoneError: On parse, lookup or provider errors
        """
        parser = ZoneFileParser(
            zone_path,
            origin=self.options.origin_override,
            auto_ttl=self.options.auto_ttl,
            cache_ttl=self.options.cache_ttl,
        )
        zone_name, desired = parser.parse()

        zone_id = self.dns_client.get_zone_id(zone_name)
        actual = RecordCollection(self.dns_client.get_records(zone_id))

        # The sentinel is looked up before type filtering so excluding TXT
        # cannot hide it.
        guard = VersionGuard(zone_name, self.confirm)
        actual = guard.inspect(actual)
        guard.check()

        desired = self.exclude_types(desired, "zone file")
        actual = self.exclude_types(actual, "remote")

        changes = self.reconciler.diff(desired, actual)

        if changes.deletes and self.options.preserve_unknown:
            self.console.print(f"{len(changes.deletes)} unknown records left untouched")
            self._print_collection("Unknown records left untouched:", changes.deletes)
            changes = changes.without_deletes()

        if changes.total_changes > 0:
            self.report(changes, parser.checksum)
        else:
            self.console.print("[green]No changes required - zone is up to date[/green]")

        if dry_run:
            self.console.print("[yellow]DRY RUN MODE - No changes will be applied[/yellow]")
            return changes

        if changes.total_changes > 0 and not self.options.skip_confirmation:
            if not self.confirm(f"{changes.total_changes} change(s). Continue (y/N)? "):
                raise PolicyAbort("Changes declined by operator")

        # The sentinel goes in after the report so it never shows up in the diff.
        changes = guard.inject(changes)
        self.apply(zone_id, changes)
        return changes

    def exclude_types(self, records: RecordCollection, source: str) -> RecordCollection:
        """Drop records of excluded types from one side of the diff."""
        if not self.options.excluded_types:
            return records

        filtered = records.filter_types(self.options.excluded_types)
        logger.info(
            f"Ignoring {len(records) - len(filtered)} {source} records of type(s) "
            f"{', '.join(sorted(self.options.excluded_types))}"
        )
        return filtered

    def report(self, changes: ChangeSet, checksum: str):
        """Display the planned changes and a summary."""
        self._print_collection("Records to delete:", changes.deletes)
        self._print_collection("Records to add:", changes.adds)
        self._print_collection("Records to update:", changes.updates)

        table = Table(title="Summary")
        table.add_column("Operation", style="cyan")
        table.add_column("Count", style="magenta")
        table.add_row("Delete", str(len(changes.deletes)))
        table.add_row("Add", str(len(changes.adds)))
        table.add_row("Update", str(len(changes.updates)))
        table.add_row("Unchanged", str(changes.unchanged))

        self.console.print(table)
        self.console.print(f"SHA256 zone checksum: {checksum}", highlight=False)

    def _print_collection(self, title: str, records: RecordCollection):
        if not records:
            return
        self.console.print(f"[bold]{title}[/bold]")
        self.console.print(records.render(), markup=False, highlight=False)
        self.console.print()

    def apply(self, zone_id: str, changes: ChangeSet):
        """
        Apply changes sequentially: deletes, then adds, then updates.

        The first failing call stops the run. Operations applied before it
        stay in place.

        Raises:
            ProviderMutationError: If any provider call fails
        """
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
        ) as progress:
            task = progress.add_task("Applying DNS changes...", total=changes.total_changes)

            for record in changes.deletes:
                try:
                    self.dns_client.delete_record(zone_id, record.id)
                except ProviderError as e:
                    raise ProviderMutationError("delete", record, e) from e
                progress.update(task, advance=1)
                logger.info(f"Deleted record: {record}")

            for record in changes.adds:
                try:
                    self.dns_client.create_record(zone_id, record)
                except ProviderError as e:
                    raise ProviderMutationError("add", record, e) from e
                progress.update(task, advance=1)
                logger.info(f"Created record: {record}")

            for record in changes.updates:
                try:
                    self.dns_client.update_record(zone_id, record.id, record)
                except ProviderError as e:
                    raise ProviderMutationError("update", record, e) from e
                progress.update(task, advance=1)
                logger.info(f"Updated record: {record}")

        logger.info(f"Applied {changes.total_changes} changes to zone {zone_id}")
