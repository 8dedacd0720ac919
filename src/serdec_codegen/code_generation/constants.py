"""Shared code generation constants."""

from __future__ import annotations

COMMENT_MARKER = "//"
BANNER_LINE = "/" * 79
HEADER_TERMINATOR = "////"
HEADER_LABEL_WIDTH = 17

DEFAULT_COPYRIGHT_LINE = "Copyright 2022, Ethan D. Twardy"
BODY_INDENT = "    "
