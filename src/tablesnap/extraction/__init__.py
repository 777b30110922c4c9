"""Pure extraction of structured records from captured table snapshots.

Submodules:
  patterns     -- compiled regex patterns and constant tuples
  schema       -- TableCellSnapshot / TableRowSnapshot / TableSnapshot Pydantic models
  text         -- cell text normalisation
  classifiers  -- visibility, header-row, selection-cell and non-data-row helpers
  headers      -- header grid reconstruction for spanned multi-row headers
  cells        -- cell text resolution, colspan expansion, header alignment
  parsers      -- key/value, data-table and work-allocation parsers
  legacy       -- the older header-to-cell mapping
  pipeline     -- load a snapshot file and run a parser over it
"""
