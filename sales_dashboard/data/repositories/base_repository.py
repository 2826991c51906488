"""
Base repository interface for data access.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

import pandas as pd

from sales_dashboard.data.connectors.base_connector import BaseConnector, ErrorCallback, SnapshotCallback, Subscription
from sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Generic type for repository entities
T = TypeVar('T')


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base class for repositories over one store collection.
    """

    # Collection path in the realtime store
    path: str = ""

    def __init__(self, connector: BaseConnector):
        """
        Initialize the repository with a backend connector.

        Args:
            connector (BaseConnector): The backend connector to use
        """
        self.connector = connector

    @abstractmethod
    def get_all(self) -> List[T]:
        """
        Read every entity in the collection once.

        Returns:
            List[T]: A list of entity objects
        """
        pass

    @abstractmethod
    def get_raw_data(self) -> pd.DataFrame:
        """
        Read the collection once as a pandas DataFrame.

        Returns:
            pd.DataFrame: The raw data as a pandas DataFrame
        """
        pass

    def _fetch(self) -> Optional[Dict[str, Any]]:
        logger.debug(f"Fetching {self.path!r}")
        return self.connector.database.fetch(self.path)

    def _subscribe(self, on_snapshot: SnapshotCallback, on_error: Optional[ErrorCallback] = None) -> Subscription:
        return self.connector.database.subscribe(self.path, on_snapshot, on_error)
