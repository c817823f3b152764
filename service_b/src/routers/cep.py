"""
Postal code router.

``/cep/{cep}`` accepts any method, custom verbs included, so that the method
check and its 405 response happen in the handler, inside the request span.
"""

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from service_b.src.dependencies import get_temperature_service, get_tracing
from service_b.src.services import TemperatureService
from shared.errors import MethodError, ValidationError
from shared.http import ALL_METHODS, AnyMethodRoute
from shared.models import TemperatureReport
from shared.tracing import TracePropagation
from shared.validation import is_valid_cep

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Temperature"], route_class=AnyMethodRoute)


@router.api_route(
    "/cep/{cep:path}",
    methods=ALL_METHODS,
    response_model=TemperatureReport,
    summary="Temperature by postal code",
    responses={
        404: {"description": "Postal code not found"},
        405: {"description": "Method not allowed"},
        422: {"description": "Invalid postal code"},
        500: {"description": "Weather lookup or configuration failure"},
    },
)
async def handle_cep_request(
    cep: str,
    request: Request,
    tracing: TracePropagation = Depends(get_tracing),
    temperature_service: TemperatureService = Depends(get_temperature_service),
) -> JSONResponse:
    """Resolve the postal code's city and return its temperature."""
    parent = tracing.extract(request.headers)

    with tracing.span("handleCEPRequest", context=parent, **{"http.method": request.method}):
        logger.info("cep_request_received", method=request.method, path=request.url.path)

        if request.method != "GET":
            raise MethodError()

        # Re-validated even though the front service already checked it
        if not is_valid_cep(cep):
            raise ValidationError("invalid zipcode", status_code=422)

        report = await temperature_service.get_report(cep)

    return JSONResponse(content=report.model_dump())
