"""Lazy Firebase Admin app used to verify bearer tokens."""

import logging
import sys

import firebase_admin
from django.conf import settings
from firebase_admin import credentials

logger = logging.getLogger(__name__)

_app = None


def _running_tests():
    return "test" in sys.argv or "pytest" in sys.modules


def get_app():
    """
    Return the shared Firebase app, initialising it on first use.
    Returns None when no usable service account is configured, in which
    case token authentication stays disabled.
    """
    global _app
    if _app:
        return _app
    if firebase_admin._apps:
        _app = firebase_admin.get_app()
        return _app
    if _running_tests():
        return None

    path = settings.FIREBASE_SERVICE_ACCOUNT_FILE
    if not path:
        logger.warning("FIREBASE_SERVICE_ACCOUNT_FILE is not set. Token authentication disabled.")
        return None
    try:
        _app = firebase_admin.initialize_app(credentials.Certificate(path))
    except (ValueError, OSError) as error:
        logger.error("Failed to initialize Firebase from %s: %s", path, error)
        return None
    return _app
