"""API route definitions."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query

from morphtags import __version__
from morphtags.api.models import (
    DescribeRequest,
    DescribeResponse,
    DescriptionModel,
    HealthModel,
)
from morphtags.decode import (
    DecodeResult,
    UnrecognizedCodeError,
    decode_rmac,
    decode_wivu,
    describe,
    require_decoded,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _respond(result: DecodeResult, strict: bool) -> DescriptionModel:
    if strict:
        try:
            require_decoded(result)
        except UnrecognizedCodeError as e:
            raise HTTPException(status_code=422, detail=str(e))
    return DescriptionModel.from_result(result)


@router.get("/health", response_model=HealthModel)
async def health_check():
    """Health check endpoint."""
    return HealthModel(status="ok", version=__version__)


@router.get("/rmac/{code}", response_model=DescriptionModel)
async def describe_rmac_code(
    code: str,
    strict: Annotated[bool, Query(description="Fail with 422 if not decodable")] = False,
):
    """Describe a Greek RMAC code, e.g. V-PAI-3S."""
    return _respond(decode_rmac(code), strict)


# WIVU tags contain slashes between parts
@router.get("/wivu/{code:path}", response_model=DescriptionModel)
async def describe_wivu_code(
    code: str,
    strict: Annotated[bool, Query(description="Fail with 422 if not decodable")] = False,
):
    """Describe a Hebrew/Aramaic WIVU tag, e.g. HC/Vqw3ms."""
    return _respond(decode_wivu(code), strict)


@router.get("/describe", response_model=DescriptionModel)
async def describe_code(
    code: Annotated[str, Query(description="RMAC or WIVU morphology code")],
    strict: Annotated[bool, Query(description="Fail with 422 if not decodable")] = False,
):
    """Describe a code of either scheme, detecting the scheme."""
    return _respond(describe(code), strict)


@router.post("/describe", response_model=DescribeResponse)
async def describe_codes(request: DescribeRequest):
    """Describe a batch of codes of either scheme."""
    results = [DescriptionModel.from_result(describe(code)) for code in request.codes]
    unrecognized = sum(1 for r in results if not r.recognized)
    if unrecognized:
        logger.debug("%d of %d codes unrecognized", unrecognized, len(results))
    return DescribeResponse(results=results)
