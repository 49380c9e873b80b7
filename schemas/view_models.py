"""
Presentation models handed to the document templates.
One variant per renderable application state, discriminated by `kind`.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from schemas.application import FundSchema, LegalEntitySchema, ReviewSchema


class ApplicationViewModel(BaseModel):
    reference_number: str
    state: str
    full_name: str
    applied_on: date
    support_email: str
    signature: str


class PendingApplicationViewModel(ApplicationViewModel):
    kind: Literal["Pending"] = "Pending"


class ActivatedApplicationViewModel(ApplicationViewModel):
    kind: Literal["Activated"] = "Activated"
    legal_entity: Optional[LegalEntitySchema] = None
    portfolio_funds: list[FundSchema] = Field(default_factory=list)
    portfolio_total_amount: Decimal = Decimal("0")


class InReviewApplicationViewModel(ActivatedApplicationViewModel):
    kind: Literal["InReview"] = "InReview"
    in_review_message: str
    in_review_information: Optional[ReviewSchema] = None


ViewModel = Annotated[
    Union[
        PendingApplicationViewModel,
        ActivatedApplicationViewModel,
        InReviewApplicationViewModel,
    ],
    Field(discriminator="kind"),
]
