"""
Local mirror of a realtime database collection.

The Firebase event stream sends a ``put`` of the whole collection when a
listener opens and then ``put``/``patch`` events for whatever sub-path
changed. The mirror folds those events into a local copy so listeners can be
handed the full collection every time.
"""
import copy
from typing import Any, Dict, List, Optional

from sales_dashboard.utils.logging_config import get_logger

logger = get_logger(__name__)


def _split_path(path: Optional[str]) -> List[str]:
    return [segment for segment in (path or "").split("/") if segment]


class SnapshotMirror:
    """
    Applies stream events and returns complete snapshots.
    """

    def __init__(self):
        self._data: Any = None

    def apply(self, event_type: str, path: str, data: Any) -> Optional[Dict[str, Any]]:
        """
        Apply one stream event.

        Args:
            event_type (str): "put" or "patch"
            path (str): Path of the change, relative to the subscribed collection
            data (Any): New value (put) or map of child updates (patch)

        Returns:
            Optional[Dict[str, Any]]: The full collection after the event
        """
        segments = _split_path(path)

        if event_type == "put":
            self._set(segments, data)
        elif event_type == "patch":
            for child_path, value in (data or {}).items():
                self._set(segments + _split_path(child_path), value)
        else:
            logger.debug(f"Ignoring stream event of type {event_type!r} at {path!r}")

        return self.snapshot()

    def snapshot(self) -> Optional[Dict[str, Any]]:
        """Return a copy of the mirrored collection, or None when it is empty."""
        if not self._data:
            return None
        if not isinstance(self._data, dict):
            # A scalar at the collection root has no records
            return None
        return copy.deepcopy(self._data)

    def clear(self) -> None:
        self._data = None

    def _set(self, segments: List[str], value: Any) -> None:
        if not segments:
            self._data = copy.deepcopy(value)
            return

        if not isinstance(self._data, dict):
            self._data = {}

        node = self._data
        trail = []
        for segment in segments[:-1]:
            child = node.get(segment)
            if not isinstance(child, dict):
                if value is None:
                    # Deleting below a node that does not exist
                    return
                child = {}
                node[segment] = child
            trail.append((node, segment))
            node = child

        if value is None:
            node.pop(segments[-1], None)
            # The store has no empty objects; drop parents emptied by the delete
            for parent, key in reversed(trail):
                if parent[key]:
                    break
                del parent[key]
        else:
            node[segments[-1]] = copy.deepcopy(value)
