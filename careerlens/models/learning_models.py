"""Contracts for the learning helper (study-material summarisation)."""

from __future__ import annotations

import re

from pydantic import Field, field_validator

from careerlens.models.contracts import ContractModel, RequestContract

DATA_URI_PATTERN = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>[A-Za-z0-9+/=\s]+)$"
)


class LearningMaterialRequest(RequestContract):
    """A PDF of study material, embedded as a base64 data URI."""

    pdf_data_uri: str = Field(
        ...,
        description=(
            "A PDF file of study material, as a data URI that must include a MIME "
            "type and use Base64 encoding. Expected format: "
            "'data:application/pdf;base64,<encoded_data>'."
        ),
    )

    @field_validator("pdf_data_uri")
    @classmethod
    def _check_data_uri(cls, value: str) -> str:
        if not DATA_URI_PATTERN.match(value):
            raise ValueError("must look like data:<mime-type>;base64,<payload>")
        return value


class LearningMaterialSummary(ContractModel):
    quick_points: list[str] = Field(
        ...,
        description="A summarized list of key points from the document in bullet format.",
    )
