"""Integration-test fixtures."""

import pytest


@pytest.fixture
def bigco_request() -> dict:
    return {
        "invoice": {
            "customer": "BigCo",
            "performances": [{"playID": "hamlet", "audience": 55}],
        },
        "plays": {"hamlet": {"name": "Hamlet", "type": "tragedy"}},
    }
