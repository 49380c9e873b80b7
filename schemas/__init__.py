from schemas.application import (
    ApplicationCreate,
    ApplicationRecord,
    ApplicationResponse,
    ApplicationState,
    FundSchema,
    LegalEntitySchema,
    PersonSchema,
    ProductSchema,
    ReviewSchema,
)
from schemas.view_models import (
    ActivatedApplicationViewModel,
    ApplicationViewModel,
    InReviewApplicationViewModel,
    PendingApplicationViewModel,
    ViewModel,
)

__all__ = [
    "ApplicationCreate",
    "ApplicationRecord",
    "ApplicationResponse",
    "ApplicationState",
    "FundSchema",
    "LegalEntitySchema",
    "PersonSchema",
    "ProductSchema",
    "ReviewSchema",
    "ActivatedApplicationViewModel",
    "ApplicationViewModel",
    "InReviewApplicationViewModel",
    "PendingApplicationViewModel",
    "ViewModel",
]
