"""
Shared fixtures: a canonical snapshot and the matching exchangerate.host payload.
"""

from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from domain.models.currency import RateSnapshot


@pytest.fixture
def live_payload():
    """exchangerate.host /live body as returned on the free plan."""
    return {
        'success': True,
        'timestamp': 1760860800,
        'source': 'USD',
        'quotes': {
            'USDBTC': 0.000023,
            'USDGBP': 0.79,
            'USDJPY': 149.5,
        },
    }


@pytest.fixture
def snapshot():
    return RateSnapshot(
        base='USD',
        timestamp=1760860800,
        rates={
            'BTC': Decimal('0.000023'),
            'GBP': Decimal('0.79'),
            'JPY': Decimal('149.5'),
        },
    )


@pytest.fixture
def make_client():
    """Build an AsyncMock httpx client whose GET returns the given JSON body."""

    def _make(json_data):
        mock_client = AsyncMock(spec=httpx.AsyncClient)
        mock_response = Mock()
        mock_response.json.return_value = json_data
        mock_response.raise_for_status = Mock()
        mock_client.get.return_value = mock_response
        return mock_client

    return _make
