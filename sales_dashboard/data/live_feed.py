"""
Live sale feed shared between the Firebase listener and the dashboard page.
"""
import threading
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from sales_dashboard.data.connectors.base_connector import Subscription
from sales_dashboard.data.models.sales import SaleRecord
from sales_dashboard.data.repositories.sales_repository import SalesRepository, records_to_dataframe
from sales_dashboard.utils.errors import SalesDashboardError
from sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


@dataclass(frozen=True)
class FeedState:
    """
    What the page renders: the latest complete sale list.
    """
    sales: pd.DataFrame
    revision: int
    error: Optional[str] = None

    @property
    def loaded(self) -> bool:
        return self.revision > 0


class LiveSalesFeed:
    """
    Owns the live subscription to the ``sell`` collection.

    Every update replaces the whole sale list; nothing is merged. The
    listener runs on a background thread, so state changes happen under a
    lock and readers get an immutable ``FeedState``.
    """

    def __init__(self, repository: SalesRepository):
        self.repository = repository
        self._subscription: Optional[Subscription] = None
        self._lock = threading.Lock()
        self._state = FeedState(sales=records_to_dataframe([]), revision=0)

    @property
    def running(self) -> bool:
        return self._subscription is not None and self._subscription.active

    def start(self) -> bool:
        """
        Open the subscription if it is not already open.

        Returns:
            bool: True if the feed is running, False if it could not be started
        """
        if self.running:
            return True

        try:
            self._subscription = self.repository.subscribe(self.replace, on_error=self._on_update_error)
        except SalesDashboardError as e:
            logger.error(f"Could not start live sales feed: {str(e)}")
            self._set_error(str(e))
            return False

        return True

    def stop(self) -> None:
        """
        Cancel the subscription. The last sale list is kept until the next start.
        """
        subscription, self._subscription = self._subscription, None
        if subscription is not None:
            subscription.cancel()

    def replace(self, records: List[SaleRecord]) -> None:
        """
        Replace the current sale list with a new complete one.

        Args:
            records (List[SaleRecord]): Every sale currently in the store
        """
        sales = records_to_dataframe(records)
        with self._lock:
            revision = self._state.revision + 1
            self._state = FeedState(sales=sales, revision=revision)
        logger.debug(f"Sales feed revision {revision}: {len(sales)} records")

    def state(self) -> FeedState:
        with self._lock:
            return self._state

    def _on_update_error(self, error: Exception) -> None:
        self._set_error(f"Could not process a sales update: {str(error)}")

    def _set_error(self, message: str) -> None:
        with self._lock:
            self._state = FeedState(sales=self._state.sales, revision=self._state.revision, error=message)
