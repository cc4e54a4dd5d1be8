from typing import Annotated

from fastapi import APIRouter, Depends

from api.dependencies import get_rate_cache
from api.schemas import HealthCache, HealthResponse
from infrastructure.cache.memory_cache import RateCache

router = APIRouter(tags=['health'])


@router.get('/health', response_model=HealthResponse, summary='Service liveness and cache state')
async def health(cache: Annotated[RateCache, Depends(get_rate_cache)]) -> HealthResponse:
	entry = cache.entry
	return HealthResponse(
		status='ok',
		cache=HealthCache(
			populated=entry is not None,
			expires_at_unix=entry.expires_at if entry is not None else None,
		),
	)
