"""
Firebase backend connector implementation.
"""
import threading
from typing import Any, Dict, Optional

import firebase_admin
from firebase_admin import credentials, db

from sales_dashboard.auth.client import FirebaseAuthClient
from sales_dashboard.config.firebase_config import FIREBASE_APP_NAME, FIREBASE_CONFIG
from sales_dashboard.data.connectors.base_connector import (
    BaseConnector,
    BaseDatabase,
    ErrorCallback,
    SnapshotCallback,
    Subscription,
)
from sales_dashboard.data.connectors.snapshot_mirror import SnapshotMirror
from sales_dashboard.utils.errors import BackendConnectionError
from sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class FirebaseSubscription(Subscription):
    """
    Live subscription backed by a firebase_admin listener thread.
    """

    def __init__(self, path: str, on_snapshot: SnapshotCallback, on_error: Optional[ErrorCallback] = None):
        self.path = path
        self._on_snapshot = on_snapshot
        self._on_error = on_error
        self._mirror = SnapshotMirror()
        self._registration = None
        self._cancelled = False
        self._lock = threading.Lock()

    def attach(self, registration) -> None:
        with self._lock:
            if self._cancelled:
                registration.close()
            else:
                self._registration = registration

    def handle_event(self, event) -> None:
        """
        Fold a stream event into the mirror and deliver the full snapshot.

        Runs on the listener thread. Errors raised by the consumer are logged
        and passed to on_error so the stream keeps running.
        """
        with self._lock:
            if self._cancelled:
                return
            snapshot = self._mirror.apply(event.event_type, event.path, event.data)

        try:
            self._on_snapshot(snapshot)
        except Exception as e:
            logger.exception(f"Snapshot handler for {self.path!r} failed")
            if self._on_error is not None:
                self._on_error(e)

    def cancel(self) -> None:
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            registration, self._registration = self._registration, None
            self._mirror.clear()

        if registration is not None:
            registration.close()
            logger.info(f"Subscription to {self.path!r} cancelled.")

    @property
    def active(self) -> bool:
        return not self._cancelled


class FirebaseDatabase(BaseDatabase):
    """
    Realtime Database handle bound to one Firebase app.
    """

    def __init__(self, app):
        self.app = app

    def subscribe(
        self,
        path: str,
        on_snapshot: SnapshotCallback,
        on_error: Optional[ErrorCallback] = None
    ) -> FirebaseSubscription:
        subscription = FirebaseSubscription(path, on_snapshot, on_error)
        try:
            registration = db.reference(path, app=self.app).listen(subscription.handle_event)
        except Exception as e:
            logger.error(f"Error subscribing to {path!r}: {str(e)}")
            raise BackendConnectionError(f"Could not subscribe to {path!r}: {str(e)}") from e

        subscription.attach(registration)
        logger.info(f"Subscribed to {path!r}.")
        return subscription

    def fetch(self, path: str) -> Optional[Dict[str, Any]]:
        try:
            data = db.reference(path, app=self.app).get()
        except Exception as e:
            logger.error(f"Error reading {path!r}: {str(e)}")
            raise BackendConnectionError(f"Could not read {path!r}: {str(e)}") from e

        if not isinstance(data, dict) or not data:
            return None
        return data


class FirebaseConnector(BaseConnector):
    """
    Connector for the Firebase app that hosts auth and the sales database.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, app_name: str = FIREBASE_APP_NAME):
        """
        Initialize the Firebase connector.

        Args:
            config (Optional[Dict[str, Any]]): Firebase configuration.
                                              If None, uses the default from firebase_config.py
            app_name (str): Name of the firebase_admin app to create or reuse
        """
        self.config = config if config is not None else FIREBASE_CONFIG
        self.app_name = app_name
        self.app = None
        self._lock = threading.Lock()

    def connect(self) -> firebase_admin.App:
        """
        Initialize the Firebase app, or reuse it if it already exists.

        Returns:
            firebase_admin.App: The Firebase app
        """
        with self._lock:
            if self.app is not None:
                return self.app

            try:
                self.app = firebase_admin.get_app(self.app_name)
                logger.info(f"Reusing existing Firebase app {self.app_name!r}.")
                return self.app
            except ValueError:
                pass

            try:
                self.app = firebase_admin.initialize_app(
                    self._credential(),
                    self._options(),
                    name=self.app_name,
                )
                logger.info(f"Firebase app {self.app_name!r} initialized for project {self.config.get('project_id')}.")
            except Exception as e:
                logger.error(f"Error initializing Firebase: {str(e)}")
                raise BackendConnectionError(f"Could not initialize Firebase: {str(e)}") from e

        return self.app

    def disconnect(self) -> None:
        """
        Delete the Firebase app.
        """
        with self._lock:
            if self.app is None:
                return
            try:
                firebase_admin.delete_app(self.app)
                logger.info("Firebase app deleted.")
            except ValueError as e:
                logger.error(f"Error deleting Firebase app: {str(e)}")
                raise
            finally:
                self.app = None

    @property
    def auth(self) -> FirebaseAuthClient:
        return FirebaseAuthClient(api_key=self.config.get("api_key", ""))

    @property
    def database(self) -> FirebaseDatabase:
        return FirebaseDatabase(self.connect())

    def _credential(self):
        path = self.config.get("credentials")
        if path:
            return credentials.Certificate(path)
        return credentials.ApplicationDefault()

    def _options(self) -> Dict[str, Any]:
        options = {
            "databaseURL": self.config.get("database_url"),
            "projectId": self.config.get("project_id"),
            "storageBucket": self.config.get("storage_bucket"),
        }
        return {key: value for key, value in options.items() if value}


# Process-wide connector
_connector: Optional[FirebaseConnector] = None
_connector_lock = threading.Lock()


def get_connector() -> FirebaseConnector:
    """
    Get the process-wide Firebase connector, creating it on first use.

    Returns:
        FirebaseConnector: The shared, connected connector
    """
    global _connector

    with _connector_lock:
        if _connector is None:
            connector = FirebaseConnector()
            connector.connect()
            _connector = connector

    return _connector


def reset_connector() -> None:
    """
    Disconnect and forget the process-wide connector.
    """
    global _connector

    with _connector_lock:
        connector, _connector = _connector, None

    if connector is not None:
        connector.disconnect()
