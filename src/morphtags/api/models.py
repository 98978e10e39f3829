"""Pydantic models for API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from morphtags.decode import DecodeResult


class DescriptionModel(BaseModel):
    """Decoded description for one morphology code."""

    code: str = Field(..., description="Morphology code as given")
    scheme: Optional[str] = Field(
        None, description="Coding scheme ('rmac' or 'wivu'), if known"
    )
    description: str = Field(
        ..., description="Display text; the code itself when unrecognized"
    )
    recognized: bool = Field(..., description="Whether the code decoded")

    @classmethod
    def from_result(cls, result: DecodeResult) -> "DescriptionModel":
        return cls(
            code=result.code,
            scheme=result.scheme.value if result.scheme else None,
            description=result.text,
            recognized=result.recognized,
        )


class DescribeRequest(BaseModel):
    """Batch describe request."""

    codes: List[str] = Field(..., description="Morphology codes of either scheme")


class DescribeResponse(BaseModel):
    """Batch describe response, one entry per requested code."""

    results: List[DescriptionModel]


class HealthModel(BaseModel):
    """Health check response."""

    status: str
    version: str
