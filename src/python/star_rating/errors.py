# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Exceptions raised by the star rating widget.

Only ConfigParseError escapes to callers. The other two are raised and
absorbed inside the widget so a malformed seed or a stray click degrades
gracefully instead of failing.
"""

from __future__ import annotations


class StarRatingError(Exception):
    """Base class for all star rating errors."""


class ConfigParseError(StarRatingError):
    """A settings override could not be parsed or does not describe valid settings."""

    def __init__(self, message: str, source: object = None) -> None:
        super().__init__(message)
        self.source = source


class InvalidNumericContent(StarRatingError):
    """Host content could not be read as a base-10 integer."""

    def __init__(self, content: str) -> None:
        super().__init__(f"Not an integer: {content!r}")
        self.content = content


class UnmappedInteraction(StarRatingError):
    """An activation event did not come from an icon with a readable index."""
