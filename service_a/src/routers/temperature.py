"""
Temperature router for the front service.

``/`` accepts any method; the handler checks, in order: method, body
parsing, presence of ``cep``, ``cep`` format, then delegates to the back
service.
"""

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from service_a.src.clients import TemperatureClient
from service_a.src.dependencies import get_temperature_client, get_tracing
from shared.errors import MethodError, ValidationError
from shared.http import ALL_METHODS, AnyMethodRoute
from shared.models import CepRequest, TemperatureReport
from shared.tracing import TracePropagation
from shared.validation import is_valid_cep

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Temperature"], route_class=AnyMethodRoute)


def parse_cep(body: bytes) -> str:
    """
    Extract the postal code from a request body.

    An empty body counts as an empty object.

    Raises:
        ValidationError: If the body is not a JSON object with a string
            ``cep`` (400) or ``cep`` is missing or empty (400)
    """
    try:
        request = CepRequest.model_validate_json(body or b"{}")
    except PydanticValidationError as e:
        logger.info("invalid_request_body", errors=e.error_count())
        raise ValidationError("Invalid request body") from e

    if not request.cep:
        raise ValidationError("CEP is required")
    return request.cep


@router.api_route(
    "/",
    methods=ALL_METHODS,
    response_model=TemperatureReport,
    summary="Temperature by postal code",
    responses={
        400: {"description": "Malformed body or missing CEP"},
        405: {"description": "Method not allowed"},
        422: {"description": "Invalid postal code"},
        500: {"description": "Back service failure"},
    },
)
async def handle_cep_request(
    request: Request,
    tracing: TracePropagation = Depends(get_tracing),
    temperature_client: TemperatureClient = Depends(get_temperature_client),
) -> JSONResponse:
    """Validate the postal code and relay the back service's report."""
    parent = tracing.extract(request.headers)

    with tracing.span("handleCEPRequest", context=parent, **{"http.method": request.method}):
        logger.info("cep_request_received", method=request.method, path=request.url.path)

        if request.method != "POST":
            raise MethodError()

        cep = parse_cep(await request.body())

        if not is_valid_cep(cep):
            raise ValidationError("invalid zipcode", status_code=422)

        report = await temperature_client.fetch_temperature_by_cep(cep)

    return JSONResponse(content=report)
