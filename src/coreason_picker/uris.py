# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_picker

"""Helpers for content URIs."""

import re
from urllib.parse import quote

# Authority is whatever follows "scheme://" up to the next path, query or fragment.
_AUTHORITY = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://([^/?#]*)")


def get_user_info(uri: str) -> str | None:
    """Return the userinfo part of a URI (``content://10@media/...`` -> ``"10"``), or None.

    Identifiers are opaque, so a malformed authority is never an error.
    """
    match = _AUTHORITY.match(uri)
    if match is None or "@" not in match.group(1):
        return None
    return match.group(1).rsplit("@", 1)[0]


def append_path(base: str, *segments: str) -> str:
    """Append encoded path segments to a base URI."""
    uri = base.rstrip("/")
    for segment in segments:
        uri = f"{uri}/{quote(segment, safe='')}"
    return uri
