"""Pack analysis endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body

from truckpack.application.config import load_pack_document_from_dict
from truckpack.infrastructure import JsonExporter
from truckpack.web.dependencies import AnalyzeCommandDep
from truckpack.web.schemas.responses import ErrorResponseSchema, LoadReportSchema

router = APIRouter(prefix="/analyze", tags=["analyze"])


@router.post(
    "",
    response_model=LoadReportSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def analyze_pack(
    document: Annotated[dict[str, Any], Body(description="Pack document JSON")],
    command: AnalyzeCommandDep,
) -> LoadReportSchema:
    """Analyze a pack document.

    The body is validated with the same schema the CLI uses, so errors
    come back with the same categories and field paths.

    Args:
        document: Pack document JSON.
        command: Injected AnalyzePackCommand.

    Returns:
        Stats, center of gravity, warnings and usable zones.

    Raises:
        ConfigError: If the document is invalid (handled by exception handler).
    """
    result = command.execute(load_pack_document_from_dict(document))
    return LoadReportSchema.model_validate(JsonExporter().to_dict(result.report))
