"""
Exception types raised by the sales dashboard.
"""


class SalesDashboardError(Exception):
    """Base class for dashboard errors."""


class BackendConnectionError(SalesDashboardError, ConnectionError):
    """The Firebase app or one of its services could not be reached."""


class AuthenticationError(SalesDashboardError):
    """Signing in or out against the hosted auth service failed."""


class InvalidSaleRecordError(SalesDashboardError, ValueError):
    """A sale record from the store is missing fields or has bad values."""

    def __init__(self, record_id: str, reason: str):
        self.record_id = record_id
        self.reason = reason
        super().__init__(f"Invalid sale record {record_id!r}: {reason}")
