"""Terraform-safe local names."""

from __future__ import annotations

import re

_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9_]+")
_LEADING_JUNK = re.compile(r"^[0-9_]+")


def sanitize_resource_name(name: str) -> str:
    """Turn a display name into a valid Terraform local name.

    Runs of invalid characters collapse into a single underscore; leading
    digits/underscores and trailing underscores are dropped, then lowercased.
    May return an empty string.
    """

    cleaned = _INVALID_CHARS.sub("_", name.strip())
    cleaned = _LEADING_JUNK.sub("", cleaned)
    return cleaned.rstrip("_").lower()
