"""Shared base model and explicit validation result for AI contracts."""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from careerlens.errors import ContractValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class ContractModel(BaseModel):
    """Base for every payload exchanged with the AI backend.

    Attributes are snake_case in Python and camelCase on the wire; both are
    accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RequestContract(ContractModel):
    """Input contracts reject fields they do not declare."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class FieldError(BaseModel):
    """One shape violation reported by ``validate_contract``."""

    field: str
    message: str
    kind: str


class ContractResult(BaseModel, Generic[ModelT]):
    """Either a validated value or the list of field errors."""

    value: Optional[ModelT] = None
    errors: list[FieldError] = []

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors

    def unwrap(self) -> ModelT:
        """Return the value or raise ``ContractValidationError``."""
        if not self.ok:
            raise ContractValidationError(
                "Request does not match the expected contract",
                details=[e.model_dump() for e in self.errors],
            )
        return self.value  # type: ignore[return-value]


def validate_contract(model: type[ModelT], payload: Any) -> ContractResult[ModelT]:
    """Validate ``payload`` against ``model`` without raising."""
    try:
        value = model.model_validate(payload)
    except ValidationError as exc:
        return ContractResult[model](errors=_field_errors(exc))  # type: ignore[valid-type]
    return ContractResult[model](value=value)  # type: ignore[valid-type]


def _field_errors(exc: ValidationError) -> list[FieldError]:
    return [
        FieldError(
            field=".".join(str(part) for part in err["loc"]) or "__root__",
            message=err["msg"],
            kind=err["type"],
        )
        for err in exc.errors()
    ]
