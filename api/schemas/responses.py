from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.models.currency import Currency, ServedFrom


class CamelModel(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InputEcho(CamelModel):
	currency: Currency = Field(..., description='Requested fiat currency')
	amount: str = Field(..., description='Fiat amount as supplied')


class BtcAmount(CamelModel):
	amount: str = Field(..., description='BTC amount, truncated to 8 decimal places')


class RateInfo(CamelModel):
	btc_per_unit: str = Field(..., description='BTC per unit of fiat, 12 significant digits')
	as_of_unix: int = Field(..., description='Upstream snapshot timestamp')
	source: str = Field(..., description='Rate provider')


class CacheInfo(CamelModel):
	ttl_seconds: int = Field(..., description='Seconds until the cached snapshot expires')
	served_from: ServedFrom = Field(..., description='Whether the rate came from cache or upstream')
	fetched_at_unix: int = Field(..., description='When the snapshot was fetched')


class BtcResponse(CamelModel):
	input: InputEcho
	btc: BtcAmount
	rate: RateInfo
	cache: CacheInfo

	model_config = ConfigDict(
		alias_generator=to_camel,
		populate_by_name=True,
		json_schema_extra={
			'example': {
				'input': {'currency': 'GBP', 'amount': '100'},
				'btc': {'amount': '0.00291139'},
				'rate': {
					'btcPerUnit': '0.0000291139240506',
					'asOfUnix': 1760860800,
					'source': 'exchangerate.host',
				},
				'cache': {'ttlSeconds': 1800, 'servedFrom': 'upstream', 'fetchedAtUnix': 1760860812},
			}
		},
	)


class ErrorBody(BaseModel):
	message: str
	details: str | None = None


class ErrorResponse(BaseModel):
	error: ErrorBody


class HealthCache(CamelModel):
	populated: bool
	expires_at_unix: int | None = None


class HealthResponse(BaseModel):
	status: str
	cache: HealthCache
