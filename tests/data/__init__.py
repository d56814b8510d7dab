"""
Test Data Package
================

Published request vectors for the ScreenshotOne client.
"""

from .sample_take_options import (
    ACCESS_KEY,
    SECRET_KEY,
    SIGNED_URL_CASES,
    README_EXAMPLE,
    HTML_SOURCE,
    SignedURLCase,
    get_signed_url_case,
)

__all__ = [
    "ACCESS_KEY",
    "SECRET_KEY",
    "SIGNED_URL_CASES",
    "README_EXAMPLE",
    "HTML_SOURCE",
    "SignedURLCase",
    "get_signed_url_case",
]
