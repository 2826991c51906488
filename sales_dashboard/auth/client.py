"""
Thin client for the hosted Firebase authentication service.
"""
from dataclasses import dataclass
from typing import Optional

import requests

from sales_dashboard.config.firebase_config import IDENTITY_TOOLKIT_URL
from sales_dashboard.utils.errors import AuthenticationError
from sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

REQUEST_TIMEOUT_SECONDS = 20


@dataclass
class AuthUser:
    """
    The signed-in user as kept in the session.
    """
    uid: str
    email: Optional[str] = None
    id_token: Optional[str] = None


class FirebaseAuthClient:
    """
    Authentication handle for the Firebase project's password accounts.
    """

    def __init__(self, api_key: str = ""):
        """
        Initialize the auth client.

        Args:
            api_key (str): Web API key for the Identity Toolkit REST API
        """
        self.api_key = api_key

    def sign_in_with_password(self, email: str, password: str) -> AuthUser:
        """
        Sign a user in with email and password.

        Args:
            email (str): Account email
            password (str): Account password

        Returns:
            AuthUser: The signed-in user

        Raises:
            AuthenticationError: If the credentials are rejected or the service is unreachable
        """
        if not self.api_key:
            raise AuthenticationError("FIREBASE_API_KEY is not configured.")

        url = f"{IDENTITY_TOOLKIT_URL}/accounts:signInWithPassword"
        payload = {"email": email, "password": password, "returnSecureToken": True}

        try:
            response = requests.post(url, params={"key": self.api_key}, json=payload, timeout=REQUEST_TIMEOUT_SECONDS)
        except requests.RequestException as e:
            logger.error(f"Error reaching the auth service: {str(e)}")
            raise AuthenticationError("Could not reach the authentication service.") from e

        if response.status_code != 200:
            message = response.json().get("error", {}).get("message", "Login failed")
            logger.warning(f"Sign-in rejected for {email}: {message}")
            raise AuthenticationError(message)

        data = response.json()
        logger.info(f"Signed in {data.get('email', email)}")
        return AuthUser(uid=data["localId"], email=data.get("email", email), id_token=data.get("idToken"))

    def sign_out(self, user: Optional[AuthUser]) -> None:
        """
        End the local session for a user by discarding their ID token.

        The account's other sessions (other browsers, the point-of-sale
        client) stay signed in.

        Args:
            user (Optional[AuthUser]): The signed-in user; None is a no-op
        """
        if user is None:
            return

        user.id_token = None
        logger.info(f"Signed out {user.email or user.uid}")
