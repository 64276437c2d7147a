"""Utilities to clean window titles before they land in a report."""

from __future__ import annotations

TITLE_SEPARATOR = " - "


def remove_first(window_title: str, fragment: str) -> str:
    """Drop the first occurrence of ``fragment``, e.g. a browser name suffix."""
    return window_title.replace(fragment, "", 1)


def split_title(window_title: str) -> list[str]:
    """Split an editor-style ``file - project - app`` title into its parts."""
    return window_title.split(TITLE_SEPARATOR)
