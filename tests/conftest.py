from __future__ import annotations

import pytest

from src.flexitime.flexitime.core.constants import DEFAULT_WORKDAY_RULES
from src.flexitime.flexitime.workday.policy import WorkdayLengthPolicy

from tests.helpers import InMemoryDocuments


@pytest.fixture()
def policy():
    return WorkdayLengthPolicy(DEFAULT_WORKDAY_RULES)


@pytest.fixture()
def documents():
    return InMemoryDocuments()
