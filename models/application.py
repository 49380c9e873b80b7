from sqlalchemy import JSON, Boolean, Column, Date, DateTime, ForeignKey, Numeric, String, func
from sqlalchemy.orm import relationship

from database import Base


class Application(Base):
    __tablename__ = "applications"

    id = Column(String(64), primary_key=True, index=True)
    # Pending | Activated | InReview | Closed; other values are tolerated on read
    state = Column(String(32), nullable=False, default="Pending", index=True)
    reference_number = Column(String(64), nullable=False, unique=True)
    applied_on = Column(Date, nullable=False)
    # {"first_name": ..., "surname": ...}
    person = Column(JSON, nullable=False)
    is_legal_entity = Column(Boolean, nullable=False, default=False)
    legal_entity = Column(JSON, nullable=True)
    # {"reason": ..., "reviewed_on": ...}; only set while in review
    current_review = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    products = relationship("Product", back_populates="application", cascade="all, delete-orphan")


class Product(Base):
    __tablename__ = "application_products"

    id = Column(String(64), primary_key=True, index=True)
    application_id = Column(String(64), ForeignKey("applications.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(256), nullable=False)

    application = relationship("Application", back_populates="products")
    funds = relationship("Fund", back_populates="product", cascade="all, delete-orphan")


class Fund(Base):
    __tablename__ = "application_funds"

    id = Column(String(64), primary_key=True, index=True)
    product_id = Column(String(64), ForeignKey("application_products.id", ondelete="CASCADE"), nullable=False, index=True)
    fund_id = Column(String(64), nullable=False)
    name = Column(String(256), nullable=False)
    amount = Column(Numeric(18, 2), nullable=False)
    fees = Column(Numeric(18, 2), nullable=False, default=0)

    product = relationship("Product", back_populates="funds")
