"""
Base backend connector interface.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

# Called with the complete collection contents, or None when it is empty
SnapshotCallback = Callable[[Optional[Dict[str, Any]]], None]

# Called when a snapshot could not be delivered to the consumer
ErrorCallback = Callable[[Exception], None]


class Subscription(ABC):
    """
    Handle for a live subscription that delivers full-snapshot replacements.
    """

    @abstractmethod
    def cancel(self) -> None:
        """
        Stop delivering snapshots. Safe to call more than once.
        """
        pass

    @property
    @abstractmethod
    def active(self) -> bool:
        pass


class BaseDatabase(ABC):
    """
    Read-only view of a realtime key/value store.
    """

    @abstractmethod
    def subscribe(
        self,
        path: str,
        on_snapshot: SnapshotCallback,
        on_error: Optional[ErrorCallback] = None
    ) -> Subscription:
        """
        Open a live subscription on a collection path.

        Args:
            path (str): Collection path, e.g. "sell"
            on_snapshot (SnapshotCallback): Receives the full collection after every change
            on_error (Optional[ErrorCallback]): Receives errors raised by on_snapshot

        Returns:
            Subscription: Handle used to cancel delivery
        """
        pass

    @abstractmethod
    def fetch(self, path: str) -> Optional[Dict[str, Any]]:
        """
        Read the current contents of a collection path once.

        Args:
            path (str): Collection path

        Returns:
            Optional[Dict[str, Any]]: The collection, or None when empty
        """
        pass


class BaseConnector(ABC):
    """
    Abstract base class for backend connections.

    A connector exposes two handles: ``auth`` for the hosted authentication
    service and ``database`` for the realtime store.
    """

    @abstractmethod
    def connect(self) -> Any:
        """
        Establish the connection to the backend.

        Returns:
            Any: The backend app/session object
        """
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """
        Release the connection.
        """
        pass

    @property
    @abstractmethod
    def auth(self) -> Any:
        pass

    @property
    @abstractmethod
    def database(self) -> BaseDatabase:
        pass

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
