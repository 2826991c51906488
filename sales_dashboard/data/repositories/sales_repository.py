"""
Sales repository for accessing the ``sell`` collection.
"""
from typing import Any, Callable, Dict, Iterable, List, Optional

import pandas as pd

from sales_dashboard.config.app_config import SALE_COLUMNS
from sales_dashboard.config.firebase_config import SALES_COLLECTION_PATH
from sales_dashboard.data.connectors.base_connector import BaseConnector, ErrorCallback, Subscription
from sales_dashboard.data.models.sales import SaleRecord
from sales_dashboard.data.repositories.base_repository import BaseRepository
from sales_dashboard.utils.errors import InvalidSaleRecordError
from sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


def decode_snapshot(snapshot: Optional[Dict[str, Any]]) -> List[SaleRecord]:
    """
    Decode a snapshot of the ``sell`` collection.

    Malformed records are skipped and logged; an empty or null snapshot
    yields an empty list.

    Args:
        snapshot (Optional[Dict[str, Any]]): Store key -> stored value

    Returns:
        List[SaleRecord]: The valid records, in store key order
    """
    if not snapshot:
        return []

    records = []
    skipped = 0
    for key, value in snapshot.items():
        try:
            records.append(SaleRecord.from_store(key, value))
        except InvalidSaleRecordError as e:
            skipped += 1
            logger.warning(str(e))

    if skipped:
        logger.info(f"Skipped {skipped} malformed sale records out of {len(snapshot)}.")

    return records


def records_to_dataframe(records: Iterable[SaleRecord]) -> pd.DataFrame:
    """
    Convert sale records to a DataFrame.

    The result always has the sale columns with ``sold_at`` as datetime and
    ``price`` as float, even when there are no records.

    Args:
        records (Iterable[SaleRecord]): The records to convert

    Returns:
        pd.DataFrame: One row per record
    """
    df = pd.DataFrame([record.to_row() for record in records], columns=SALE_COLUMNS)
    df["sold_at"] = pd.to_datetime(df["sold_at"])
    df["price"] = df["price"].astype(float)
    return df


class SalesRepository(BaseRepository[SaleRecord]):
    """
    Repository for accessing sale records.
    """

    path = SALES_COLLECTION_PATH

    def __init__(self, connector: BaseConnector):
        """
        Initialize the sales repository.

        Args:
            connector (BaseConnector): The backend connector to use
        """
        super().__init__(connector)

    def get_all(self) -> List[SaleRecord]:
        """
        Read all sale records once.

        Returns:
            List[SaleRecord]: A list of SaleRecord objects
        """
        records = decode_snapshot(self._fetch())
        logger.info(f"Retrieved {len(records)} sale records.")
        return records

    def get_raw_data(self) -> pd.DataFrame:
        """
        Read all sale records once as a DataFrame.

        Returns:
            pd.DataFrame: The sales data
        """
        return records_to_dataframe(self.get_all())

    def subscribe(
        self,
        on_sales: Callable[[List[SaleRecord]], None],
        on_error: Optional[ErrorCallback] = None
    ) -> Subscription:
        """
        Subscribe to live sale updates.

        Args:
            on_sales (Callable[[List[SaleRecord]], None]): Receives the complete,
                decoded sale list after every change in the store
            on_error (Optional[ErrorCallback]): Receives errors raised while
                decoding or delivering an update

        Returns:
            Subscription: Handle used to cancel the subscription
        """
        def handle_snapshot(snapshot: Optional[Dict[str, Any]]) -> None:
            on_sales(decode_snapshot(snapshot))

        return self._subscribe(handle_snapshot, on_error)
