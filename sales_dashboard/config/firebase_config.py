"""
Firebase configuration settings for the sales dashboard.
"""
import os
from typing import Dict, Any
from sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Name used to register the app with firebase_admin
FIREBASE_APP_NAME = os.environ.get("FIREBASE_APP_NAME", "[DEFAULT]")

# Collection holding the sale records
SALES_COLLECTION_PATH = "sell"

# Identity Toolkit REST endpoint used for password sign-in
IDENTITY_TOOLKIT_URL = "https://identitytoolkit.googleapis.com/v1"


def get_firebase_config() -> Dict[str, Any]:
    """
    Get Firebase configuration from environment variables or defaults.

    Returns:
        Dict[str, Any]: Firebase configuration dictionary
    """
    default_config = {
        "api_key": "",
        "auth_domain": "reactnative-ae2ac.firebaseapp.com",
        "database_url": "https://reactnative-ae2ac-default-rtdb.firebaseio.com",
        "project_id": "reactnative-ae2ac",
        "storage_bucket": "reactnative-ae2ac.firebasestorage.app",
        # Path to a service-account JSON file; empty means application default credentials
        "credentials": "",
    }

    config = {}
    for key in default_config:
        env_key = f"FIREBASE_{key.upper()}"
        config[key] = os.environ.get(env_key, default_config[key])

    logger.debug(f"Using Firebase config with project: {config['project_id']}, database: {config['database_url']}")

    return config


# Firebase connection parameters
FIREBASE_CONFIG: Dict[str, Any] = get_firebase_config()
