"""
Step definitions for cfzone synchronisation scenarios.
"""

from dataclasses import replace

from behave import given, when, then
from rich.console import Console

from cfzone.core.errors import CfzoneError, PolicyAbort
from cfzone.core.options import SyncOptions
from cfzone.core.records import Record
from cfzone.core.version_guard import REVISION, sentinel_record
from cfzone.core.zone_sync import ZoneSync
from cfzone.providers.dns_client import DNSClient
from cfzone.providers.mock_provider import MockDNSProvider


def _remote_records(context):
    zone_id = context.provider.get_zone_id(context.zone)
    return context.provider.get_records(zone_id)


def _write_zone_file(context):
    with open(context.zone_file, "w") as f:
        f.write(f"$ORIGIN {context.zone}.\n$TTL 300\n")
        f.write("\n".join(context.zone_lines) + "\n")


def _confirm(context):
    def confirm(prompt):
        context.prompts.append(prompt)
        answer = context.answers.pop(0) if context.answers else "n"
        return answer == "y"

    return confirm


@given('the provider holds the zone "{zone}"')
def step_impl(context, zone):
    """Register an empty zone with the mock provider."""
    context.zone = zone
    context.provider = MockDNSProvider()
    context.options = {}


@given('the provider has an A record "{name}" with content "{content}" and id "{record_id}"')
def step_impl(context, name, content, record_id):
    """Seed an A record."""
    context.seed_records.append(
        Record(name=name, type="A", content=content, ttl=300, id=record_id)
    )


@given('the provider has the version sentinel with revision "{revision}"')
def step_impl(context, revision):
    """Seed the version sentinel."""
    context.seed_records.append(
        replace(sentinel_record(context.zone), content=revision).with_id("v1")
    )


@given('the zone file contains "{line}"')
def step_impl(context, line):
    """Add a line to the zone file."""
    context.zone_lines.append(line)


@given('the operator answers "{answer}"')
def step_impl(context, answer):
    """Queue an answer for the next confirmation prompt."""
    context.answers.append(answer)


@given("unknown records are preserved")
def step_impl(context):
    """Enable preserving unknown records."""
    context.options["preserve_unknown"] = True


@when("I synchronise the zone")
def step_impl(context):
    """Run a synchronisation."""
    context.provider.add_zone(context.zone, context.seed_records)
    context.seed_records = []
    _write_zone_file(context)
    _run(context)


@when("I synchronise the zone again")
def step_impl(context):
    """Run a second synchronisation."""
    context.answers.append("y")
    _run(context)


def _run(context):
    context.provider.calls.clear()
    sync = ZoneSync(
        DNSClient({}, provider=context.provider),
        SyncOptions(**context.options),
        confirm=_confirm(context),
        output=Console(file=context.output, width=200),
    )
    try:
        context.changes = sync.run(str(context.zone_file))
    except PolicyAbort:
        context.run_aborted = True
    except CfzoneError as e:
        context.error = str(e)


@then('the provider holds an A record "{name}" with content "{content}"')
def step_impl(context, name, content):
    """Verify that a record exists remotely."""
    matches = [
        r for r in _remote_records(context)
        if r.name == name and r.type == "A" and r.content == content
    ]
    assert matches, f"No A record {name} -> {content} found"


@then("the provider holds the version sentinel at the current revision")
def step_impl(context):
    """Verify the version sentinel."""
    sentinel = sentinel_record(context.zone)
    matches = [
        r for r in _remote_records(context)
        if r.name == sentinel.name and r.content == str(REVISION)
    ]
    assert len(matches) == 1, f"Expected one sentinel, found {len(matches)}"


@then('record "{record_id}" has content "{content}"')
def step_impl(context, record_id, content):
    """Verify the content of a record by id."""
    record = next(r for r in _remote_records(context) if r.id == record_id)
    assert record.content == content, f"{record_id} has content {record.content}"


@then("the run applied {deletes:d} deletes, {adds:d} adds and {updates:d} updates")
def step_impl(context, deletes, adds, updates):
    """Verify the size of the applied change set."""
    assert context.error is None, context.error
    counts = (len(context.changes.deletes), len(context.changes.adds), len(context.changes.updates))
    assert counts == (deletes, adds, updates), f"Applied {counts}"


@then("the run was aborted")
def step_impl(context):
    """Verify that the run was aborted."""
    assert context.run_aborted, "Run was not aborted"


@then('the output mentions "{text}"')
def step_impl(context, text):
    """Verify the operator-facing output."""
    assert text in context.output.getvalue(), context.output.getvalue()


@then('the first prompt mentions "{text}"')
def step_impl(context, text):
    """Verify the first confirmation prompt."""
    assert context.prompts, "No prompt was shown"
    assert text in context.prompts[0], context.prompts[0]


@then("no changes were applied")
def step_impl(context):
    """Verify that the provider saw no mutations."""
    assert context.provider.calls == [], f"Unexpected calls: {context.provider.calls}"
