"""Shared test configuration and snapshot fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from tablesnap.extraction.schema import TableSnapshot

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


# Camel-case payload as a browser capture script would emit it: a sortable
# work queue with a selection column, link labels, a hidden row and an
# action bar.
WORK_QUEUE_PAYLOAD = {
    "hasThead": True,
    "rows": [
        {
            "isTheadRow": True,
            "cells": [
                {"rawText": "Task ▲", "isHeader": True},
                {"rawText": "Case  reference", "isHeader": True},
                {"rawText": "Assignee ▼", "isHeader": True},
            ],
        },
        {
            "cells": [
                {"rawText": "☐"},
                {"rawText": "  Review\n hearing bundle ", "linkText": "Review hearing bundle"},
                {"rawText": "1234-5678"},
                {"rawText": "Alice"},
            ],
        },
        {
            "cells": [
                {"rawText": "☐"},
                {"rawText": "Draft order"},
                {"rawText": "9999-0000"},
                {"rawText": "Bob"},
            ],
            "isVisible": False,
        },
        {
            "cells": [{"rawText": "Select all | Assign to me", "colSpan": 4}],
            "hasActionsRowClass": True,
            "className": "govuk-table__row actions",
        },
    ],
}


@pytest.fixture
def work_queue_payload() -> dict:
    return WORK_QUEUE_PAYLOAD


@pytest.fixture
def work_queue_snapshot() -> TableSnapshot:
    return TableSnapshot.model_validate(WORK_QUEUE_PAYLOAD)
