"""Shared configuration for table snapshot capture and extraction."""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# Level used by the module entry points (python -m ...)
LOG_LEVEL = os.getenv("TABLESNAP_LOG_LEVEL", "INFO")

# BeautifulSoup parser for static HTML snapshots ("html.parser", "lxml", ...)
HTML_PARSER = os.getenv("TABLESNAP_HTML_PARSER", "html.parser")

# Provider error fragments meaning the page crashed or navigated away mid-capture
NAVIGATION_ERROR_MARKERS = (
    "Target closed",
    "Execution context was destroyed",
    "Target page, context or browser has been closed",
)
