import time
from collections.abc import Callable

from application.services.rate_service import RateResolver
from domain.models.currency import ConversionRequest, ConversionResult
from domain.services.conversion import convert_amount, format_rate


class ConversionService:
	def __init__(self, resolver: RateResolver, clock: Callable[[], float] = time.time):
		self.resolver = resolver
		self.clock = clock

	async def convert(self, request: ConversionRequest, access_key: str) -> ConversionResult:
		now_unix = int(self.clock())
		rate = await self.resolver.resolve(request.currency, now_unix, access_key)

		return ConversionResult(
			request=request,
			btc_amount=convert_amount(request.amount, rate.btc_per_unit),
			btc_per_unit=format_rate(rate.btc_per_unit),
			as_of_unix=rate.as_of_unix,
			served_from=rate.served_from,
			fetched_at_unix=rate.fetched_at_unix,
			ttl_seconds_remaining=rate.ttl_seconds_remaining,
		)
