"""Snapshot providers and the capture-then-parse boundary.

Submodules:
  reader         -- SnapshotProvider protocol, read_* helpers, TableReadError
  html_provider  -- TableSnapshot construction from static HTML (BeautifulSoup)
"""
