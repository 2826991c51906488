"""
Tests for the dashboard's shared live feed.
"""
from unittest.mock import patch

import pytest

from sales_dashboard.data.repositories.sales_repository import SalesRepository
from sales_dashboard.ui.views import dashboard
from tests.factories import make_payload


@pytest.fixture
def shared_feed_repository(fake_connector):
    dashboard.initialize_feed.clear()
    with patch.object(dashboard, "initialize_repository", return_value=SalesRepository(fake_connector)), \
            patch.object(dashboard.atexit, "register") as register:
        yield register
    dashboard.initialize_feed.clear()


class TestSharedFeed:
    """One listener serves every session."""

    def test_one_subscription_for_all_sessions(self, shared_feed_repository, fake_database):
        first = dashboard.get_feed()
        second = dashboard.get_feed()

        assert first is second
        assert len(fake_database.subscriptions) == 1
        shared_feed_repository.assert_called_once_with(first.stop)

    def test_sessions_read_the_same_state(self, shared_feed_repository, fake_database):
        feed = dashboard.get_feed()
        fake_database.subscriptions[0].push({"a": make_payload()})

        assert dashboard.initialize_feed().state() is feed.state()
        assert feed.state().sales["id"].tolist() == ["a"]

    def test_stopped_feed_restarts(self, shared_feed_repository, fake_database):
        dashboard.get_feed().stop()
        feed = dashboard.get_feed()

        assert feed.running
        assert len(fake_database.subscriptions) == 2
