from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from models import Application, Fund, Product
from schemas.application import ApplicationCreate, ApplicationResponse
from services.repository import ApplicationRepository, application_to_record

router = APIRouter(prefix="/api/applications", tags=["applications"])

MSG_APPLICATION_NOT_FOUND = "Application not found"


def _app_to_response(app: Application) -> dict[str, Any]:
    """Serialize application to dict with camelCase keys for the frontend."""
    record = application_to_record(app)
    response = ApplicationResponse(
        **record.model_dump(),
        created_at=app.created_at,
        updated_at=app.updated_at,
    )
    return response.model_dump(mode="json", by_alias=True)


@router.get("")
async def list_applications(db: AsyncSession = Depends(get_db)):
    apps = await ApplicationRepository(db).list_all()
    return [_app_to_response(a) for a in apps]


@router.get("/{application_id}")
async def get_application(application_id: str, db: AsyncSession = Depends(get_db)):
    app = await ApplicationRepository(db).get(application_id)
    if not app:
        raise HTTPException(status_code=404, detail=MSG_APPLICATION_NOT_FOUND)
    return _app_to_response(app)


@router.post("", status_code=201)
async def create_application(body: ApplicationCreate, db: AsyncSession = Depends(get_db)):
    app_id = f"app-{uuid.uuid4().hex[:12]}"
    now = datetime.now(timezone.utc)
    app = Application(
        id=app_id,
        state=body.state.value,
        reference_number=body.reference_number,
        applied_on=body.applied_on,
        person=body.person.model_dump(mode="json", by_alias=False),
        is_legal_entity=body.is_legal_entity,
        legal_entity=body.legal_entity.model_dump(mode="json", by_alias=False) if body.legal_entity else None,
        current_review=body.current_review.model_dump(mode="json", by_alias=False) if body.current_review else None,
        created_at=now,
        updated_at=now,
    )
    for product_in in body.products:
        product = Product(id=f"{app_id}-{uuid.uuid4().hex[:8]}", name=product_in.name)
        product.funds = [
            Fund(
                id=f"{product.id}-{uuid.uuid4().hex[:6]}",
                fund_id=fund_in.fund_id,
                name=fund_in.name,
                amount=fund_in.amount,
                fees=fund_in.fees,
            )
            for fund_in in product_in.funds
        ]
        app.products.append(product)
    db.add(app)
    await db.flush()
    return _app_to_response(app)
