"""
Tests for the auth client, the session context and the logout action.
"""
from unittest.mock import MagicMock, patch

import pytest
import requests

from sales_dashboard.auth import client as auth_client
from sales_dashboard.auth.client import AuthUser, FirebaseAuthClient
from sales_dashboard.auth.session import USER_KEY, SessionContext, handle_logout
from sales_dashboard.utils.errors import AuthenticationError

def make_user():
    return AuthUser(uid="uid-1", email="owner@example.com", id_token="token")


def signed_in_session():
    session = SessionContext({})
    session.sign_in(make_user())
    return session


class TestSessionContext:

    def test_empty_session(self):
        session = SessionContext({})
        assert session.user is None
        assert session.email is None
        assert not session.signed_in

    def test_sign_in_and_clear(self):
        store = {}
        session = SessionContext(store)
        user = make_user()
        session.sign_in(user)
        assert store[USER_KEY] is user
        assert session.email == "owner@example.com"
        session.clear()
        assert not session.signed_in
        session.clear()


class TestSignIn:
    """Password sign-in through the Identity Toolkit REST API."""

    def test_success(self):
        response = MagicMock(status_code=200)
        response.json.return_value = {"localId": "uid-1", "email": "owner@example.com", "idToken": "t"}
        with patch.object(auth_client.requests, "post", return_value=response) as post:
            user = FirebaseAuthClient(api_key="key").sign_in_with_password("owner@example.com", "pw")

        assert user == AuthUser(uid="uid-1", email="owner@example.com", id_token="t")
        _, kwargs = post.call_args
        assert kwargs["params"] == {"key": "key"}
        assert kwargs["json"]["returnSecureToken"] is True

    def test_rejected(self):
        response = MagicMock(status_code=400)
        response.json.return_value = {"error": {"message": "INVALID_PASSWORD"}}
        with patch.object(auth_client.requests, "post", return_value=response):
            with pytest.raises(AuthenticationError, match="INVALID_PASSWORD"):
                FirebaseAuthClient(api_key="key").sign_in_with_password("owner@example.com", "bad")

    def test_network_error(self):
        with patch.object(auth_client.requests, "post", side_effect=requests.ConnectionError("offline")):
            with pytest.raises(AuthenticationError):
                FirebaseAuthClient(api_key="key").sign_in_with_password("owner@example.com", "pw")

    def test_missing_api_key(self):
        with pytest.raises(AuthenticationError):
            FirebaseAuthClient().sign_in_with_password("owner@example.com", "pw")


class TestSignOut:
    """Sign-out only ends the local session."""

    def test_discards_id_token(self):
        user = make_user()
        with patch.object(auth_client.requests, "post") as post:
            FirebaseAuthClient(api_key="key").sign_out(user)
        assert user.id_token is None
        assert user.uid == "uid-1"
        post.assert_not_called()

    def test_no_user_is_noop(self):
        FirebaseAuthClient().sign_out(None)


class TestHandleLogout:
    """The logout action."""

    def test_success_clears_session_and_navigates(self):
        auth = MagicMock()
        navigate = MagicMock()
        teardown = MagicMock()
        session = signed_in_session()
        session_user = session.user

        assert handle_logout(auth, session, navigate, on_signed_out=teardown) is True

        auth.sign_out.assert_called_once_with(session_user)
        assert not session.signed_in
        teardown.assert_called_once()
        navigate.assert_called_once()

    @pytest.mark.parametrize("error", [AuthenticationError("sign-out failed"), RuntimeError("unexpected")])
    def test_failure_is_logged_and_stays(self, error, caplog):
        auth = MagicMock()
        auth.sign_out.side_effect = error
        navigate = MagicMock()
        teardown = MagicMock()
        session = signed_in_session()

        assert handle_logout(auth, session, navigate, on_signed_out=teardown) is False

        assert session.signed_in
        navigate.assert_not_called()
        teardown.assert_not_called()
        assert "Error signing out" in caplog.text

    def test_local_sign_out_with_auth_client(self):
        navigate = MagicMock()
        session = signed_in_session()
        user = session.user

        assert handle_logout(FirebaseAuthClient(api_key="key"), session, navigate) is True

        assert user.id_token is None
        assert not session.signed_in
        navigate.assert_called_once()
