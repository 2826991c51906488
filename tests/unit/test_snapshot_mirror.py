"""
Tests for folding stream events into full snapshots.
"""
from sales_dashboard.data.connectors.snapshot_mirror import SnapshotMirror


class TestSnapshotMirror:
    """put/patch handling at the root and at nested paths."""

    def test_initial_put_at_root(self):
        mirror = SnapshotMirror()
        snapshot = mirror.apply("put", "/", {"a": {"price": 1}, "b": {"price": 2}})
        assert snapshot == {"a": {"price": 1}, "b": {"price": 2}}

    def test_put_null_at_root_empties(self):
        mirror = SnapshotMirror()
        mirror.apply("put", "/", {"a": {"price": 1}})
        assert mirror.apply("put", "/", None) is None

    def test_put_new_child(self):
        mirror = SnapshotMirror()
        mirror.apply("put", "/", {"a": {"price": 1}})
        snapshot = mirror.apply("put", "/b", {"price": 2})
        assert snapshot == {"a": {"price": 1}, "b": {"price": 2}}

    def test_put_nested_field(self):
        mirror = SnapshotMirror()
        mirror.apply("put", "/", {"a": {"price": 1, "name": "Ring"}})
        snapshot = mirror.apply("put", "/a/price", 5)
        assert snapshot == {"a": {"price": 5, "name": "Ring"}}

    def test_delete_child(self):
        mirror = SnapshotMirror()
        mirror.apply("put", "/", {"a": {"price": 1}, "b": {"price": 2}})
        assert mirror.apply("put", "/a", None) == {"b": {"price": 2}}

    def test_deleting_last_child_empties(self):
        mirror = SnapshotMirror()
        mirror.apply("put", "/", {"a": {"price": 1}})
        assert mirror.apply("put", "/a", None) is None

    def test_deleting_last_field_removes_parent(self):
        mirror = SnapshotMirror()
        mirror.apply("put", "/", {"a": {"price": 1}, "b": {"price": 2}})
        assert mirror.apply("put", "/a/price", None) == {"b": {"price": 2}}

    def test_delete_missing_path_is_noop(self):
        mirror = SnapshotMirror()
        mirror.apply("put", "/", {"a": {"price": 1}})
        assert mirror.apply("put", "/zzz/price", None) == {"a": {"price": 1}}

    def test_patch_at_root(self):
        mirror = SnapshotMirror()
        mirror.apply("put", "/", {"a": {"price": 1}})
        snapshot = mirror.apply("patch", "/", {"b": {"price": 2}, "a": None})
        assert snapshot == {"b": {"price": 2}}

    def test_patch_nested(self):
        mirror = SnapshotMirror()
        mirror.apply("put", "/", {"a": {"price": 1, "name": "Ring"}})
        snapshot = mirror.apply("patch", "/a", {"price": 3, "paymentMethod": "cash"})
        assert snapshot == {"a": {"price": 3, "name": "Ring", "paymentMethod": "cash"}}

    def test_first_event_below_root(self):
        mirror = SnapshotMirror()
        assert mirror.apply("put", "/a", {"price": 1}) == {"a": {"price": 1}}

    def test_unknown_event_ignored(self):
        mirror = SnapshotMirror()
        mirror.apply("put", "/", {"a": {"price": 1}})
        assert mirror.apply("keep-alive", "/", None) == {"a": {"price": 1}}

    def test_snapshot_is_a_copy(self):
        mirror = SnapshotMirror()
        snapshot = mirror.apply("put", "/", {"a": {"price": 1}})
        snapshot["a"]["price"] = 99
        assert mirror.snapshot() == {"a": {"price": 1}}

    def test_scalar_root_has_no_records(self):
        mirror = SnapshotMirror()
        assert mirror.apply("put", "/", "hello") is None
