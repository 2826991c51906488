"""
Sales data models.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from sales_dashboard.utils.date_helpers import get_day_options, parse_sold_at
from sales_dashboard.utils.errors import InvalidSaleRecordError
from sales_dashboard.utils.validation import coerce_price, missing_fields, validate_day


class PaymentMethod(str, Enum):
    """How a sale was paid for."""
    CASH = "cash"
    ONLINE = "online"


# Wire field names as written by the point-of-sale client
REQUIRED_STORE_FIELDS = ("productId", "name", "price", "soldAt", "paymentMethod")


@dataclass(frozen=True)
class SaleRecord:
    """
    Represents one completed sale from the ``sell`` collection.
    """
    id: str
    product_id: str
    name: str
    price: float
    sold_at: datetime
    payment_method: PaymentMethod
    description: str = ""
    phone_number: Optional[str] = None

    @classmethod
    def from_store(cls, key: str, value: Any) -> "SaleRecord":
        """
        Decode a record stored under ``sell/<key>``.

        Args:
            key (str): The store key, used as the record id
            value (Any): The stored value, expected to be a dict

        Returns:
            SaleRecord: The decoded record

        Raises:
            InvalidSaleRecordError: If fields are missing or malformed
        """
        if not isinstance(value, dict):
            raise InvalidSaleRecordError(key, f"expected an object, got {type(value).__name__}")

        missing = missing_fields(value, REQUIRED_STORE_FIELDS)
        if missing:
            raise InvalidSaleRecordError(key, f"missing fields: {', '.join(missing)}")

        price = coerce_price(value["price"])
        if price is None:
            raise InvalidSaleRecordError(key, f"price is not a number: {value['price']!r}")

        try:
            payment_method = PaymentMethod(str(value["paymentMethod"]).lower())
        except ValueError:
            raise InvalidSaleRecordError(key, f"unknown payment method: {value['paymentMethod']!r}")

        try:
            sold_at = parse_sold_at(value["soldAt"])
        except ValueError:
            raise InvalidSaleRecordError(key, f"unparseable soldAt: {value['soldAt']!r}")

        return cls(
            id=key,
            product_id=str(value["productId"]),
            name=str(value["name"]),
            description=str(value.get("description") or ""),
            price=price,
            phone_number=value.get("phoneNumber") or None,
            sold_at=sold_at,
            payment_method=payment_method,
        )

    def to_row(self) -> Dict[str, Any]:
        """Flatten the record into a DataFrame row."""
        return {
            "id": self.id,
            "product_id": self.product_id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "phone_number": self.phone_number,
            "sold_at": self.sold_at,
            "payment_method": self.payment_method.value,
        }


@dataclass
class FilterCriteria:
    """
    Month/year/day selectors for the dashboard.

    None means "All". Changing the month or year clears the day, and a day
    can only be chosen once both month and year are set.
    """
    month: Optional[int] = None
    year: Optional[int] = None
    day: Optional[int] = None

    @property
    def is_active(self) -> bool:
        return self.month is not None or self.year is not None or self.day is not None

    @property
    def day_enabled(self) -> bool:
        return self.month is not None and self.year is not None

    def set_month(self, month: Optional[int]) -> None:
        if month is not None and not 1 <= month <= 12:
            raise ValueError(f"Month out of range: {month}")
        self.month = month
        self.day = None

    def set_year(self, year: Optional[int]) -> None:
        self.year = year
        self.day = None

    def set_day(self, day: Optional[int]) -> None:
        if day is not None and not validate_day(day, self.month, self.year):
            raise ValueError(f"Day {day} is not selectable for month={self.month}, year={self.year}")
        self.day = day

    def reset(self) -> None:
        self.month = None
        self.year = None
        self.day = None

    def day_options(self) -> List[int]:
        return get_day_options(self.month, self.year)


@dataclass
class SalesSummary:
    """
    Aggregate figures for a set of sales.
    """
    count: int = 0
    total: float = 0.0
    cash_total: float = 0.0
    online_total: float = 0.0
    cash_count: int = 0
    online_count: int = 0
