from .responses import (
	BtcAmount,
	BtcResponse,
	CacheInfo,
	ErrorBody,
	ErrorResponse,
	HealthCache,
	HealthResponse,
	InputEcho,
	RateInfo,
)

__all__ = [
	'BtcAmount',
	'BtcResponse',
	'CacheInfo',
	'ErrorBody',
	'ErrorResponse',
	'HealthCache',
	'HealthResponse',
	'InputEcho',
	'RateInfo',
]
