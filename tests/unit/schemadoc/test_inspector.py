"""Tests for the inspection pass, driven through recording fakes."""

import pytest

from common.errors import CatalogQueryError
from schema import ColumnDef, ForeignKeyDef
from schemadoc.inspector import SchemaInspector


def _names(items):
    return [item.name for item in items]


def _table(snapshot, name):
    return next((t for t in snapshot.tables if t.name == name), None)


class RecordingCatalog:
    """In-memory catalog that records every call it receives."""

    def __init__(self, tables, columns=None, primary_keys=None, foreign_keys=None, fail=None):
        self.tables = tables
        self.columns = columns or {}
        self.primary_keys = primary_keys or {}
        self.foreign_keys = foreign_keys or {}
        self.fail = fail or {}
        self.calls = []

    def _record(self, operation, table_name=None):
        self.calls.append((operation, table_name))
        if operation in self.fail and self.fail[operation] in (table_name, "*"):
            raise CatalogQueryError(operation, table_name=table_name, message="boom")

    async def list_tables(self):
        self._record("list_tables")
        return list(self.tables)

    async def list_columns(self, table_name):
        self._record("list_columns", table_name)
        return list(self.columns.get(table_name, []))

    async def list_primary_keys(self, table_name):
        self._record("list_primary_keys", table_name)
        return list(self.primary_keys.get(table_name, []))

    async def list_foreign_keys(self, table_name):
        self._record("list_foreign_keys", table_name)
        return list(self.foreign_keys.get(table_name, []))

    def tables_touched(self):
        return {table for _, table in self.calls if table is not None}


class RecordingSampler:
    """Sample extractor fake returning canned rows."""

    def __init__(self, rows=None):
        self.rows = rows or {}
        self.calls = []

    async def extract(self, table_name, columns):
        self.calls.append((table_name, [col.name for col in columns]))
        return list(self.rows.get(table_name, []))


def _int(name, nullable=False):
    return ColumnDef(name=name, data_type="integer", udt_name="int4", is_nullable=nullable)


def _text(name):
    return ColumnDef(name=name, data_type="text", udt_name="text", is_nullable=True)


@pytest.fixture
def shop_catalog():
    return RecordingCatalog(
        tables=["users", "orders"],
        columns={
            "users": [_int("id"), _text("name")],
            "orders": [_int("id"), _int("user_id", nullable=True)],
        },
        primary_keys={"users": ["id"], "orders": ["id"]},
        foreign_keys={
            "orders": [
                ForeignKeyDef(
                    column_name="user_id", foreign_table_name="users", foreign_column_name="id"
                )
            ]
        },
    )


@pytest.mark.asyncio
async def test_scan_builds_tables_in_catalog_order(shop_catalog):
    """Users/orders scenario: two tables, one edge on orders."""
    snapshot = await SchemaInspector(shop_catalog, collect_samples=False).scan()

    assert _names(snapshot.tables) == ["users", "orders"]
    orders = _table(snapshot, "orders")
    assert orders.foreign_keys == [
        ForeignKeyDef(column_name="user_id", foreign_table_name="users", foreign_column_name="id")
    ]
    assert _table(snapshot, "users").foreign_keys == []
    assert orders.primary_keys == ["id"]


@pytest.mark.asyncio
async def test_catalog_order_is_not_resorted():
    """Non-alphabetical catalog order is preserved for tables and columns."""
    catalog = RecordingCatalog(
        tables=["zeta", "alpha", "mid"],
        columns={"zeta": [_text("z"), _text("a"), _text("m")]},
    )

    snapshot = await SchemaInspector(catalog, collect_samples=False).scan()

    assert _names(snapshot.tables) == ["zeta", "alpha", "mid"]
    assert _names(_table(snapshot, "zeta").columns) == ["z", "a", "m"]


@pytest.mark.asyncio
async def test_ignored_tables_are_never_queried():
    """Ignored tables are absent and trigger no per-table catalog call."""
    catalog = RecordingCatalog(
        tables=["users", "audit_log"],
        columns={"users": [_int("id")], "audit_log": [_int("id")]},
    )
    sampler = RecordingSampler()

    snapshot = await SchemaInspector(
        catalog, sampler, collect_samples=True, ignore_tables={"audit_log"}
    ).scan()

    assert _names(snapshot.tables) == ["users"]
    assert "audit_log" not in catalog.tables_touched()
    assert all(table != "audit_log" for table, _ in sampler.calls)


@pytest.mark.asyncio
async def test_ignore_list_is_case_sensitive():
    """Only exact names are excluded."""
    catalog = RecordingCatalog(tables=["Audit_Log", "audit_log"])

    snapshot = await SchemaInspector(
        catalog, collect_samples=False, ignore_tables=["audit_log"]
    ).scan()

    assert _names(snapshot.tables) == ["Audit_Log"]


@pytest.mark.asyncio
async def test_sampling_disabled_never_invokes_extractor(shop_catalog):
    """With sampling off every table has empty samples."""
    sampler = RecordingSampler(rows={"users": ['{"id":1}']})

    snapshot = await SchemaInspector(shop_catalog, sampler, collect_samples=False).scan()

    assert sampler.calls == []
    assert all(table.sample_rows == [] for table in snapshot.tables)


@pytest.mark.asyncio
async def test_sampling_enabled_attaches_rows(shop_catalog):
    """Extractor output lands on the right table, with the fetched columns."""
    sampler = RecordingSampler(rows={"users": ['{"id":1,"name":"ada"}']})

    snapshot = await SchemaInspector(shop_catalog, sampler, collect_samples=True).scan()

    assert _table(snapshot, "users").sample_rows == ['{"id":1,"name":"ada"}']
    assert _table(snapshot, "orders").sample_rows == []
    assert sampler.calls == [("users", ["id", "name"]), ("orders", ["id", "user_id"])]


@pytest.mark.asyncio
async def test_zero_column_table_skips_sampling():
    """Tables without columns never reach the extractor."""
    catalog = RecordingCatalog(tables=["empty"])
    sampler = RecordingSampler(rows={"empty": ["{}"]})

    snapshot = await SchemaInspector(catalog, sampler, collect_samples=True).scan()

    assert sampler.calls == []
    assert _table(snapshot, "empty").sample_rows == []


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["list_columns", "list_primary_keys", "list_foreign_keys"])
async def test_structural_failure_aborts_scan(shop_catalog, operation):
    """A failed structural query for one table fails the whole scan."""
    shop_catalog.fail = {operation: "orders"}

    with pytest.raises(CatalogQueryError) as excinfo:
        await SchemaInspector(shop_catalog, collect_samples=False).scan()

    assert excinfo.value.table_name == "orders"


@pytest.mark.asyncio
async def test_table_list_failure_aborts_scan(shop_catalog):
    """Failure to enumerate tables propagates before any per-table call."""
    shop_catalog.fail = {"list_tables": None}

    with pytest.raises(CatalogQueryError):
        await SchemaInspector(shop_catalog, collect_samples=False).scan()

    assert shop_catalog.calls == [("list_tables", None)]


@pytest.mark.asyncio
async def test_repeated_scans_are_identical(shop_catalog):
    """Same catalog content yields structurally equal snapshots."""
    inspector = SchemaInspector(shop_catalog, collect_samples=False)

    first = await inspector.scan()
    second = await inspector.scan()

    assert first == second


@pytest.mark.asyncio
async def test_per_table_query_sequence(shop_catalog):
    """Each table is fetched columns, keys, edges in order, one table at a time."""
    await SchemaInspector(shop_catalog, collect_samples=False).scan()

    assert shop_catalog.calls == [
        ("list_tables", None),
        ("list_columns", "users"),
        ("list_primary_keys", "users"),
        ("list_foreign_keys", "users"),
        ("list_columns", "orders"),
        ("list_primary_keys", "orders"),
        ("list_foreign_keys", "orders"),
    ]
