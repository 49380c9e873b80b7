"""
Seed one sample application per lifecycle state (including one without a document).
Run: python -m scripts.seed_applications (from the project root).
"""
import asyncio
import os
import sys
from datetime import date
from decimal import Decimal

# Add parent so we can import from the project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import select

from database import AsyncSessionLocal, init_db
from models import Application, Fund, Product


APPLICATIONS_DATA = [
    {
        "id": "app-pending",
        "state": "Pending",
        "reference_number": "REF-1001",
        "applied_on": date(2026, 9, 1),
        "person": {"first_name": "Thandi", "surname": "Mokoena"},
        "products": [],
    },
    {
        "id": "app-activated",
        "state": "Activated",
        "reference_number": "REF-1002",
        "applied_on": date(2026, 8, 14),
        "person": {"first_name": "Pieter", "surname": "van Wyk"},
        "is_legal_entity": True,
        "legal_entity": {"name": "Van Wyk Holdings (Pty) Ltd", "registration_number": "2019/123456/07"},
        "products": [
            {
                "id": "app-activated-ra",
                "name": "Retirement Annuity",
                "funds": [
                    {"id": "f-1", "fund_id": "BAL-01", "name": "Balanced Fund", "amount": Decimal("150000.00"), "fees": Decimal("1500.00")},
                    {"id": "f-2", "fund_id": "EQ-02", "name": "Equity Fund", "amount": Decimal("50000.00"), "fees": Decimal("750.00")},
                ],
            },
            {
                "id": "app-activated-ti",
                "name": "Tax-Free Investment",
                "funds": [
                    {"id": "f-3", "fund_id": "MM-01", "name": "Money Market Fund", "amount": Decimal("36000.00"), "fees": Decimal("0.00")},
                ],
            },
        ],
    },
    {
        "id": "app-in-review",
        "state": "InReview",
        "reference_number": "REF-1003",
        "applied_on": date(2026, 7, 30),
        "person": {"first_name": "Lerato", "surname": "Dlamini"},
        "current_review": {"reason": "proof of address mismatch", "reviewed_on": "2026-08-02"},
        "products": [
            {
                "id": "app-in-review-ua",
                "name": "Unit Trust",
                "funds": [
                    {"id": "f-4", "fund_id": "BAL-01", "name": "Balanced Fund", "amount": Decimal("20000.00"), "fees": Decimal("200.00")},
                ],
            },
        ],
    },
    {
        "id": "app-closed",
        "state": "Closed",
        "reference_number": "REF-1004",
        "applied_on": date(2025, 3, 11),
        "person": {"first_name": "Sipho", "surname": "Nkosi"},
        "products": [],
    },
]


async def seed():
    await init_db()
    async with AsyncSessionLocal() as session:
        for data in APPLICATIONS_DATA:
            existing = await session.execute(select(Application).where(Application.id == data["id"]))
            if existing.scalar_one_or_none():
                print(f"Application {data['id']} already exists, skipping")
                continue
            app = Application(
                id=data["id"],
                state=data["state"],
                reference_number=data["reference_number"],
                applied_on=data["applied_on"],
                person=data["person"],
                is_legal_entity=data.get("is_legal_entity", False),
                legal_entity=data.get("legal_entity"),
                current_review=data.get("current_review"),
            )
            session.add(app)
            await session.flush()
            for p in data["products"]:
                product = Product(id=p["id"], application_id=app.id, name=p["name"])
                session.add(product)
                for f in p["funds"]:
                    session.add(Fund(product_id=product.id, **f))
            print(f"Seeded application: {data['reference_number']} ({data['state']})")
        await session.commit()
    print("Seed complete.")


if __name__ == "__main__":
    asyncio.run(seed())
