import logging
import math
from decimal import Decimal

import httpx

from domain.exceptions.currency import UpstreamError
from domain.models.currency import BASE_CURRENCY, RateSnapshot

logger = logging.getLogger(__name__)

MAX_ERROR_BODY_CHARS = 500

# Canonical currency -> quote key in the vendor's /live payload.
QUOTE_KEYS = {
	'BTC': f'{BASE_CURRENCY}BTC',
	'GBP': f'{BASE_CURRENCY}GBP',
	'JPY': f'{BASE_CURRENCY}JPY',
}


def _read_number(container: dict, key: str) -> int | float:
	value = container.get(key)
	if isinstance(value, bool) or not isinstance(value, (int, float)):
		raise UpstreamError(f"Upstream response missing numeric field '{key}'.")
	try:
		finite = math.isfinite(value)
	except OverflowError:
		# integer literal beyond float range
		finite = False
	if not finite:
		raise UpstreamError(f"Upstream response missing numeric field '{key}'.")
	return value


class ExchangeRateHostProvider:
	"""Client for the exchangerate.host ``/live`` endpoint.

	The vendor reports ``source`` instead of ``base`` and ``quotes`` keyed like
	``USDBTC`` instead of ``rates`` keyed by currency. Both are translated into a
	:class:`RateSnapshot` here. One request per call, no retries.
	"""

	BASE_URL = 'https://api.exchangerate.host/live'

	def __init__(
		self,
		client: httpx.AsyncClient | None = None,
		base_url: str = BASE_URL,
		timeout: float | None = None,
	):
		self.base_url = base_url
		if client is None:
			# Leaving timeout unset keeps httpx's own default.
			client = httpx.AsyncClient() if timeout is None else httpx.AsyncClient(timeout=timeout)
		self._client = client

	@property
	def name(self) -> str:
		return 'exchangerate.host'

	async def _request(self, access_key: str) -> dict:
		try:
			response = await self._client.get(
				self.base_url,
				params={'access_key': access_key},
				headers={'Accept': 'application/json'},
			)
			response.raise_for_status()
			data = response.json()
		except httpx.HTTPStatusError as e:
			body = e.response.text[:MAX_ERROR_BODY_CHARS]
			raise UpstreamError(
				f'Upstream error {e.response.status_code}: {body}',
				status_code=e.response.status_code,
				body=body,
			) from e
		except httpx.RequestError as e:
			raise UpstreamError(f'Upstream request failed: {e.__class__.__name__}') from e
		except ValueError as e:
			raise UpstreamError(f'Upstream response parsing error: {e}') from e

		if not isinstance(data, dict):
			raise UpstreamError('Upstream response is not a JSON object.')

		if data.get('success') is False:
			error = data.get('error')
			if isinstance(error, dict):
				info = error.get('info') or error.get('type') or 'Unknown error'
			else:
				info = str(error) if error else 'Unknown error'
			raise UpstreamError(f'Upstream API error: {info}')

		return data

	def _normalize(self, data: dict) -> RateSnapshot:
		timestamp = _read_number(data, 'timestamp')

		source = data.get('source')
		if not isinstance(source, str) or not source:
			source = BASE_CURRENCY

		quotes = data.get('quotes')
		if not isinstance(quotes, dict):
			raise UpstreamError("Upstream response missing 'quotes' object.")

		rates = {}
		for currency, key in QUOTE_KEYS.items():
			value = _read_number(quotes, key)
			if value <= 0:
				raise UpstreamError(f"Upstream quote '{key}' must be positive, got {value}.")
			rates[currency] = Decimal(str(value))

		if source != BASE_CURRENCY:
			raise UpstreamError(f"Unexpected upstream source '{source}', expected '{BASE_CURRENCY}'.")

		return RateSnapshot(base=source, timestamp=int(timestamp), rates=rates)

	async def fetch_snapshot(self, access_key: str) -> RateSnapshot:
		try:
			snapshot = self._normalize(await self._request(access_key))
		except UpstreamError as e:
			logger.error(f'{self.name} fetch failed: {e}')
			raise

		logger.info(f'Fetched {self.name} rates as of {snapshot.timestamp}')
		return snapshot

	async def close(self) -> None:
		await self._client.aclose()
