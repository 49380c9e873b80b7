"""
Builds the state-specific view models rendered into application documents.
Pure functions: application record + settings in, fresh view model out.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Callable, Optional

from config import Settings
from schemas.application import ApplicationRecord, ApplicationState, FundSchema, ReviewSchema
from schemas.view_models import (
    ActivatedApplicationViewModel,
    InReviewApplicationViewModel,
    PendingApplicationViewModel,
    ViewModel,
)

IN_REVIEW_MESSAGE_PREFIX = "Your application has been placed in review"

# Evaluated in order, first match wins; IN_REVIEW_DEFAULT_SUFFIX applies when none match.
IN_REVIEW_REASON_RULES: list[tuple[Callable[[str], bool], str]] = [
    (
        lambda reason: "address" in reason,
        " pending outstanding address verification for FICA purposes.",
    ),
    (
        lambda reason: "bank" in reason,
        " pending outstanding bank account verification.",
    ),
]

IN_REVIEW_DEFAULT_SUFFIX = " because of suspicious account behaviour. Please contact support ASAP."


def _state_label(state: str) -> str:
    try:
        return ApplicationState(state).description
    except ValueError:
        return state


def _base_fields(application: ApplicationRecord, settings: Settings) -> dict:
    return {
        "reference_number": application.reference_number,
        "state": _state_label(application.state),
        "full_name": f"{application.person.first_name} {application.person.surname}",
        "applied_on": application.applied_on,
        "support_email": settings.support_email,
        "signature": settings.signature,
    }


def portfolio_funds(application: ApplicationRecord) -> list[FundSchema]:
    """All funds across all products, in product order."""
    return [fund for product in application.products for fund in product.funds]


def portfolio_total(funds: list[FundSchema], tax_rate: Decimal) -> Decimal:
    """Sum of (amount - fees) * tax_rate over the given funds."""
    return sum(((f.amount - f.fees) * tax_rate for f in funds), Decimal("0"))


def _portfolio_fields(application: ApplicationRecord, settings: Settings) -> dict:
    funds = portfolio_funds(application)
    return {
        "legal_entity": application.legal_entity if application.is_legal_entity else None,
        "portfolio_funds": funds,
        "portfolio_total_amount": portfolio_total(funds, settings.tax_rate),
    }


def in_review_message(review: Optional[ReviewSchema]) -> str:
    reason = review.reason if review is not None else ""
    for matches, suffix in IN_REVIEW_REASON_RULES:
        if matches(reason):
            return IN_REVIEW_MESSAGE_PREFIX + suffix
    return IN_REVIEW_MESSAGE_PREFIX + IN_REVIEW_DEFAULT_SUFFIX


def build_pending_view_model(application: ApplicationRecord, settings: Settings) -> PendingApplicationViewModel:
    return PendingApplicationViewModel(**_base_fields(application, settings))


def build_activated_view_model(application: ApplicationRecord, settings: Settings) -> ActivatedApplicationViewModel:
    return ActivatedApplicationViewModel(
        **_base_fields(application, settings),
        **_portfolio_fields(application, settings),
    )


def build_in_review_view_model(application: ApplicationRecord, settings: Settings) -> InReviewApplicationViewModel:
    return InReviewApplicationViewModel(
        **_base_fields(application, settings),
        **_portfolio_fields(application, settings),
        in_review_message=in_review_message(application.current_review),
        in_review_information=application.current_review,
    )


_BUILDERS: dict[str, Callable[[ApplicationRecord, Settings], ViewModel]] = {
    ApplicationState.PENDING.value: build_pending_view_model,
    ApplicationState.ACTIVATED.value: build_activated_view_model,
    ApplicationState.IN_REVIEW.value: build_in_review_view_model,
}


def build_view_model(application: ApplicationRecord, settings: Settings) -> ViewModel | None:
    """
    Build the view model for the application's current state.
    Returns None when no document exists for that state (e.g. Closed or an unknown value).
    """
    builder = _BUILDERS.get(application.state)
    if builder is None:
        return None
    return builder(application, settings)
