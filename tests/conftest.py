"""
Pytest configuration and shared fixtures.
"""
import os
import tempfile
from typing import List

# Keep log files out of the working tree; must run before the package is imported
os.environ.setdefault("SALES_DASHBOARD_LOG_DIR", tempfile.mkdtemp(prefix="sales_dashboard_logs_"))

import pytest  # noqa: E402

from sales_dashboard.data.models.sales import SaleRecord  # noqa: E402
from sales_dashboard.data.repositories.sales_repository import records_to_dataframe  # noqa: E402
from tests.factories import FakeConnector, FakeDatabase, make_sale  # noqa: E402


@pytest.fixture
def sample_records() -> List[SaleRecord]:
    """Sales spread over two years, both payment methods and several days."""
    return [
        make_sale("a", 100.0, "cash", "2024-01-05T10:30:00"),
        make_sale("b", 50.0, "online", "2024-02-10T12:00:00"),
        make_sale("c", 20.0, "cash", "2024-02-10T18:15:00", phone="9811111111"),
        make_sale("d", 75.5, "online", "2023-02-10T09:00:00"),
        make_sale("e", 10.0, "cash", "2023-12-31T23:59:00"),
        make_sale("f", 5.25, "online", "2024-01-20T08:00:00"),
    ]


@pytest.fixture
def sample_sales(sample_records):
    return records_to_dataframe(sample_records)


@pytest.fixture
def fake_database():
    return FakeDatabase()


@pytest.fixture
def fake_connector(fake_database):
    return FakeConnector(fake_database)
