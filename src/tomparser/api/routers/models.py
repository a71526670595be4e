"""Model parsing endpoints."""

from __future__ import annotations

from typing import Any, NoReturn

from fastapi import APIRouter, Depends, HTTPException, Request

from tomparser.api.deps import get_loader, get_settings
from tomparser.api.schemas import DescribeResponse, ParseRequest
from tomparser.models.errors import ErrorCode, TomParserError
from tomparser.models.options import ParseOptions
from tomparser.parser.loader import BimLoader
from tomparser.service.describe import describe_model
from tomparser.settings import Settings

router = APIRouter()


# -- helpers -----------------------------------------------------------------


def _raise_http(exc: TomParserError) -> NoReturn:
    status = 400 if exc.code is ErrorCode.INVALID_JSON else 422
    raise HTTPException(
        status_code=status, detail=exc.to_detail().model_dump(mode="json")
    ) from exc


def _options(body: ParseRequest, settings: Settings) -> ParseOptions:
    return body.options if body.options is not None else settings.parse_options()


# -- endpoints ---------------------------------------------------------------


@router.post("/parse")
async def parse(
    body: ParseRequest,
    settings: Settings = Depends(get_settings),  # noqa: B008
    loader: BimLoader = Depends(get_loader),  # noqa: B008
) -> dict[str, Any]:
    """Parse a BIM document supplied as JSON."""
    try:
        model = loader.load_value(body.bim, _options(body, settings))
    except TomParserError as exc:
        _raise_http(exc)
    return model.to_dict()


@router.post("/parse-file")
async def parse_file(
    request: Request,
    include_annotations: bool | None = None,
    include_hidden_objects: bool | None = None,
    settings: Settings = Depends(get_settings),  # noqa: B008
    loader: BimLoader = Depends(get_loader),  # noqa: B008
) -> dict[str, Any]:
    """Parse raw ``.bim`` bytes (UTF-8 or UTF-16) sent as the request body."""
    defaults = settings.parse_options()
    options = defaults.model_copy(
        update={
            "include_annotations": (
                defaults.include_annotations
                if include_annotations is None
                else include_annotations
            ),
            "include_hidden_objects": (
                defaults.include_hidden_objects
                if include_hidden_objects is None
                else include_hidden_objects
            ),
        }
    )
    data = await request.body()
    try:
        model = loader.load_bytes(data, options)
    except TomParserError as exc:
        _raise_http(exc)
    return model.to_dict()


@router.post("/describe", response_model=DescribeResponse)
async def describe(
    body: ParseRequest,
    settings: Settings = Depends(get_settings),  # noqa: B008
    loader: BimLoader = Depends(get_loader),  # noqa: B008
) -> DescribeResponse:
    """Parse a BIM document and return a structured summary."""
    try:
        model = loader.load_value(body.bim, _options(body, settings))
    except TomParserError as exc:
        _raise_http(exc)
    return DescribeResponse(**describe_model(model).to_dict())
