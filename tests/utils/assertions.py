"""
Test Assertions
===============

Custom assertion helpers for request URLs.
"""

import re
from typing import List, Tuple

from yarl import URL

SIGNATURE_PATTERN = re.compile(r"^[0-9a-f]{64}$")


def query_pairs(url: URL) -> List[Tuple[str, str]]:
    """Split the raw query of a URL into encoded ``(name, value)`` pairs."""
    pairs = []
    for term in url.raw_query_string.split("&"):
        name, _, value = term.partition("=")
        pairs.append((name, value))
    return pairs


def assert_take_endpoint(url: URL) -> None:
    """Assert that a URL targets the ``/take`` endpoint."""
    assert url.scheme == "https"
    assert url.host == "api.screenshotone.com"
    assert url.path == "/take"


def assert_signed_url(url: URL) -> str:
    """Assert that a URL ends with a single well-formed signature and return it."""
    pairs = query_pairs(url)
    names = [name for name, _ in pairs]

    assert names.count("signature") == 1
    assert names[-1] == "signature", "signature must be the last query term"
    signature = pairs[-1][1]
    assert SIGNATURE_PATTERN.match(signature), f"Malformed signature: {signature}"
    return signature


def assert_unsigned_url(url: URL) -> None:
    """Assert that a URL carries no signature."""
    names = [name for name, _ in query_pairs(url)]
    assert "signature" not in names


def assert_sorted_query(url: URL) -> None:
    """Assert that the query names (without the signature) are in ascending order."""
    names = [name for name, _ in query_pairs(url) if name != "signature"]
    assert names == sorted(names), f"Query is not sorted: {names}"
