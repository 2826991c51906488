"""
Session context for the signed-in user, and the logout action.
"""
from typing import Any, Callable, MutableMapping, Optional

from sales_dashboard.auth.client import AuthUser, FirebaseAuthClient
from sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

USER_KEY = "auth_user"


class SessionContext:
    """
    Reads and writes the signed-in user in a session store.

    The store is ``st.session_state`` in the app; any mutable mapping works.
    """

    def __init__(self, store: MutableMapping[str, Any]):
        self.store = store

    @property
    def user(self) -> Optional[AuthUser]:
        return self.store.get(USER_KEY)

    @property
    def email(self) -> Optional[str]:
        user = self.user
        return user.email if user else None

    @property
    def signed_in(self) -> bool:
        return self.user is not None

    def sign_in(self, user: AuthUser) -> None:
        self.store[USER_KEY] = user

    def clear(self) -> None:
        self.store.pop(USER_KEY, None)


def handle_logout(
    auth: FirebaseAuthClient,
    session: SessionContext,
    navigate: Callable[[], Any],
    on_signed_out: Optional[Callable[[], Any]] = None
) -> bool:
    """
    Sign the current user out and go to the login view.

    Failures are logged and leave the session and the current view as they
    were.

    Args:
        auth (FirebaseAuthClient): Authentication handle
        session (SessionContext): The current session
        navigate (Callable[[], Any]): Switches to the login view
        on_signed_out (Optional[Callable[[], Any]]): Teardown to run before navigating

    Returns:
        bool: True if the user was signed out
    """
    try:
        auth.sign_out(session.user)
    except Exception as e:
        logger.error(f"Error signing out: {str(e)}")
        return False

    session.clear()
    if on_signed_out is not None:
        on_signed_out()
    navigate()
    return True
