"""
Factories and fakes shared by the tests.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from sales_dashboard.data.connectors.base_connector import (
    BaseConnector,
    BaseDatabase,
    Subscription,
)
from sales_dashboard.data.models.sales import PaymentMethod, SaleRecord


# ============================================================================
# RECORD HELPERS
# ============================================================================

def make_sale(
    sale_id: str = "s1",
    price: float = 100.0,
    method: str = "cash",
    sold_at: str = "2024-01-05T10:30:00",
    phone: Optional[str] = None,
) -> SaleRecord:
    return SaleRecord(
        id=sale_id,
        product_id=f"p-{sale_id}",
        name=f"Product {sale_id}",
        description="",
        price=price,
        phone_number=phone,
        sold_at=datetime.fromisoformat(sold_at),
        payment_method=PaymentMethod(method),
    )


def make_payload(
    price: Any = 100,
    method: str = "cash",
    sold_at: str = "2024-01-05T10:30:00",
    **overrides: Any,
) -> Dict[str, Any]:
    payload = {
        "productId": "prod-1",
        "name": "Ring",
        "description": "Silver ring",
        "price": price,
        "phoneNumber": "9800000000",
        "soldAt": sold_at,
        "paymentMethod": method,
    }
    payload.update(overrides)
    return payload


# ============================================================================
# FAKE BACKEND
# ============================================================================

class FakeSubscription(Subscription):
    def __init__(self, path, on_snapshot, on_error=None):
        self.path = path
        self.on_snapshot = on_snapshot
        self.on_error = on_error
        self.cancel_calls = 0

    def cancel(self) -> None:
        self.cancel_calls += 1

    @property
    def active(self) -> bool:
        return self.cancel_calls == 0

    def push(self, snapshot) -> None:
        self.on_snapshot(snapshot)

    def fail(self, error: Exception) -> None:
        self.on_error(error)


class FakeDatabase(BaseDatabase):
    def __init__(self, data: Optional[Dict[str, Any]] = None, fail_with: Optional[Exception] = None):
        self.data = data
        self.fail_with = fail_with
        self.subscriptions: List[FakeSubscription] = []

    def subscribe(self, path, on_snapshot, on_error=None):
        if self.fail_with is not None:
            raise self.fail_with
        subscription = FakeSubscription(path, on_snapshot, on_error)
        self.subscriptions.append(subscription)
        return subscription

    def fetch(self, path):
        if self.fail_with is not None:
            raise self.fail_with
        return self.data


class FakeConnector(BaseConnector):
    def __init__(self, database: FakeDatabase, auth=None):
        self._database = database
        self._auth = auth
        self.connected = False

    def connect(self):
        self.connected = True
        return self

    def disconnect(self) -> None:
        self.connected = False

    @property
    def auth(self):
        return self._auth

    @property
    def database(self):
        return self._database
