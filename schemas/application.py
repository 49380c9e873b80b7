from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ApplicationState(str, Enum):
    PENDING = "Pending"
    ACTIVATED = "Activated"
    IN_REVIEW = "InReview"
    CLOSED = "Closed"

    @property
    def description(self) -> str:
        """Human-readable label shown on documents."""
        return _STATE_DESCRIPTIONS[self]


_STATE_DESCRIPTIONS = {
    ApplicationState.PENDING: "Pending",
    ApplicationState.ACTIVATED: "Activated",
    ApplicationState.IN_REVIEW: "In Review",
    ApplicationState.CLOSED: "Closed",
}


class PersonSchema(BaseModel):
    first_name: str = Field(..., alias="firstName")
    surname: str

    model_config = {"populate_by_name": True}


class LegalEntitySchema(BaseModel):
    name: str
    registration_number: Optional[str] = Field(None, alias="registrationNumber")
    vat_number: Optional[str] = Field(None, alias="vatNumber")

    model_config = {"populate_by_name": True}


class FundSchema(BaseModel):
    fund_id: str = Field(..., alias="fundId")
    name: str
    amount: Decimal
    fees: Decimal = Decimal("0")

    model_config = {"populate_by_name": True}


class ProductSchema(BaseModel):
    name: str
    funds: list[FundSchema] = Field(default_factory=list)


class ReviewSchema(BaseModel):
    reason: str
    reviewed_on: Optional[date] = Field(None, alias="reviewedOn")

    model_config = {"populate_by_name": True}


class ApplicationRecord(BaseModel):
    """Read-only snapshot of an application as loaded from the store."""

    id: str
    # Kept as a plain string: the store may hold states this service cannot render
    state: str
    reference_number: str
    applied_on: date
    person: PersonSchema
    is_legal_entity: bool = False
    legal_entity: Optional[LegalEntitySchema] = None
    products: list[ProductSchema] = Field(default_factory=list)
    current_review: Optional[ReviewSchema] = None

    model_config = {"frozen": True}


class ApplicationCreate(BaseModel):
    state: ApplicationState = ApplicationState.PENDING
    reference_number: str = Field(..., alias="referenceNumber")
    applied_on: date = Field(..., alias="appliedOn")
    person: PersonSchema
    is_legal_entity: bool = Field(False, alias="isLegalEntity")
    legal_entity: Optional[LegalEntitySchema] = Field(None, alias="legalEntity")
    products: list[ProductSchema] = Field(default_factory=list)
    current_review: Optional[ReviewSchema] = Field(None, alias="currentReview")

    model_config = {"populate_by_name": True}


class ApplicationResponse(BaseModel):
    id: str
    state: str
    reference_number: str
    applied_on: date
    person: PersonSchema
    is_legal_entity: bool
    legal_entity: Optional[LegalEntitySchema] = None
    products: list[ProductSchema] = Field(default_factory=list)
    current_review: Optional[ReviewSchema] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
