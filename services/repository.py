from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models import Application, Product
from schemas.application import (
    ApplicationRecord,
    FundSchema,
    LegalEntitySchema,
    PersonSchema,
    ProductSchema,
    ReviewSchema,
)


def application_to_record(app: Application) -> ApplicationRecord:
    """Map a loaded Application row (products and funds included) to a read-only record."""
    return ApplicationRecord(
        id=app.id,
        state=app.state,
        reference_number=app.reference_number,
        applied_on=app.applied_on,
        person=PersonSchema.model_validate(app.person),
        is_legal_entity=bool(app.is_legal_entity),
        legal_entity=LegalEntitySchema.model_validate(app.legal_entity) if app.legal_entity else None,
        products=[
            ProductSchema(
                name=p.name,
                funds=[
                    FundSchema(fund_id=f.fund_id, name=f.name, amount=f.amount, fees=f.fees)
                    for f in p.funds
                ],
            )
            for p in app.products
        ],
        current_review=ReviewSchema.model_validate(app.current_review) if app.current_review else None,
    )


class ApplicationRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, application_id: str) -> Optional[Application]:
        """Load the row with products and funds; raises if the id matches more than one row."""
        result = await self.session.execute(
            select(Application)
            .options(selectinload(Application.products).selectinload(Product.funds))
            .where(Application.id == application_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Application]:
        result = await self.session.execute(
            select(Application)
            .options(selectinload(Application.products).selectinload(Product.funds))
            .order_by(Application.updated_at.desc())
        )
        return list(result.scalars().all())

    async def find_by_id(self, application_id: str) -> Optional[ApplicationRecord]:
        app = await self.get(application_id)
        if app is None:
            return None
        return application_to_record(app)
