"""
Tests for the sales repository and snapshot decoding.
"""
import pytest

from sales_dashboard.data.repositories.sales_repository import (
    SalesRepository,
    decode_snapshot,
    records_to_dataframe,
)
from sales_dashboard.utils.errors import BackendConnectionError
from tests.factories import FakeConnector, FakeDatabase, make_payload


class TestDecodeSnapshot:
    """Turning a store snapshot into sale records."""

    def test_empty_and_null(self):
        assert decode_snapshot(None) == []
        assert decode_snapshot({}) == []

    def test_keys_become_ids(self):
        records = decode_snapshot({"k1": make_payload(), "k2": make_payload(method="online")})
        assert [record.id for record in records] == ["k1", "k2"]

    def test_malformed_records_are_skipped(self, caplog):
        snapshot = {
            "good": make_payload(),
            "no-price": {key: value for key, value in make_payload().items() if key != "price"},
            "bad-method": make_payload(method="card"),
        }
        records = decode_snapshot(snapshot)
        assert [record.id for record in records] == ["good"]
        assert "no-price" in caplog.text
        assert "bad-method" in caplog.text


class TestRecordsToDataframe:

    def test_empty_has_typed_columns(self):
        df = records_to_dataframe([])
        assert df.empty
        assert list(df.columns) == [
            "id", "product_id", "name", "description", "price",
            "phone_number", "sold_at", "payment_method",
        ]
        assert str(df["sold_at"].dtype).startswith("datetime64")
        assert df["price"].dtype == float

    def test_rows(self, sample_records):
        df = records_to_dataframe(sample_records)
        assert len(df) == len(sample_records)
        assert df.loc[0, "payment_method"] == "cash"
        assert df.loc[2, "phone_number"] == "9811111111"


class TestSalesRepository:
    """One-shot reads and live subscriptions through the connector."""

    def test_get_all(self):
        repository = SalesRepository(FakeConnector(FakeDatabase({"k": make_payload(price=10)})))
        records = repository.get_all()
        assert len(records) == 1
        assert records[0].price == 10.0

    def test_get_raw_data_empty_store(self):
        repository = SalesRepository(FakeConnector(FakeDatabase(None)))
        assert repository.get_raw_data().empty

    def test_subscribe_uses_sell_collection_and_decodes(self):
        database = FakeDatabase()
        repository = SalesRepository(FakeConnector(database))
        received = []

        subscription = repository.subscribe(received.append)
        assert database.subscriptions[0].path == "sell"

        subscription.push({"k": make_payload()})
        subscription.push(None)
        assert [len(batch) for batch in received] == [1, 0]

    def test_backend_errors_propagate(self):
        repository = SalesRepository(FakeConnector(FakeDatabase(fail_with=BackendConnectionError("down"))))
        with pytest.raises(BackendConnectionError):
            repository.get_all()
