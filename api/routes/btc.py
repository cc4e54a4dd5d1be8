from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from api.dependencies import get_access_key, get_conversion_service
from api.schemas import BtcAmount, BtcResponse, CacheInfo, ErrorResponse, InputEcho, RateInfo
from application.services import ConversionService
from config.settings import Settings, get_settings
from domain.validation import validate_input

RATE_SOURCE = 'exchangerate.host'

router = APIRouter(prefix='/api', tags=['btc'])


@router.get(
	'/btc',
	response_model=BtcResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert a fiat amount to BTC',
	responses={
		400: {'model': ErrorResponse},
		500: {'model': ErrorResponse},
		502: {'model': ErrorResponse},
	},
)
async def convert_to_btc(
	response: Response,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
	settings: Annotated[Settings, Depends(get_settings)],
	currency: Annotated[str | None, Query(description='USD, GBP or JPY')] = None,
	amount: Annotated[str | None, Query(description='Positive decimal amount, e.g. 10.5')] = None,
) -> BtcResponse:
	request = validate_input(currency, amount)
	access_key = get_access_key(settings)
	result = await service.convert(request, access_key)

	response.headers['Cache-Control'] = (
		f'public, s-maxage={settings.CDN_S_MAXAGE_SECONDS}, '
		f'stale-while-revalidate={settings.CDN_STALE_WHILE_REVALIDATE_SECONDS}'
	)

	return BtcResponse(
		input=InputEcho(currency=request.currency, amount=request.amount),
		btc=BtcAmount(amount=result.btc_amount),
		rate=RateInfo(
			btc_per_unit=result.btc_per_unit,
			as_of_unix=result.as_of_unix,
			source=RATE_SOURCE,
		),
		cache=CacheInfo(
			ttl_seconds=result.ttl_seconds_remaining,
			served_from=result.served_from,
			fetched_at_unix=result.fetched_at_unix,
		),
	)
