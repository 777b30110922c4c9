"""Compiled regex patterns and constant tuples for table text extraction.

These patterns identify decorative noise in captured cell text: sort
indicators, invisible characters, and whitespace runs.  Used by text.py,
classifiers.py, parsers.py and legacy.py.
"""

import re

# ─── Text Noise Patterns ──────────────────────────────────────────────────────

# Sort / direction indicators rendered inside sortable column headers:
# ▲ ▼ ⇧ ⇩ ⯅ ⯆ ↑ ↓ ⬆ ⬇
SORT_ICON_RE = re.compile(r"[▲▼⇧⇩⯅⯆↑↓⬆⬇]")

# Zero-width space and byte-order mark
INVISIBLE_CHAR_RE = re.compile(r"[\u200b\ufeff]")

# Any run of whitespace (unicode-aware)
WHITESPACE_RE = re.compile(r"\s+")


# ─── Row / Cell Constants ─────────────────────────────────────────────────────

# Exact (stripped) texts of a leading checkbox cell that has no header.
# "☒" is deliberately absent.
SELECTION_CELL_MARKERS = ("", "☐", "☑")

# Key used when a column has no usable header (1-indexed)
FALLBACK_KEY_TEMPLATE = "column_{}"

# Suffix appended to sortable header text by the older table widgets
LEGACY_SORT_SUFFIX = "\t▼"
