"""SQLAlchemy ORM models for application records"""

import uuid
from sqlalchemy import Column, String, Boolean, Date, DateTime, Integer, Numeric, ForeignKey, Text, Uuid
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


class ApplicationRecord(Base):
    """Application submitted by an applicant"""

    __tablename__ = "application"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    state = Column(Text, nullable=False, index=True)
    reference_number = Column(String(32), nullable=False, unique=True)
    applied_on = Column(Date, nullable=False)
    is_legal_entity = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    applicant = relationship("ApplicantRecord", back_populates="application", uselist=False, cascade="all, delete-orphan")
    legal_entity = relationship("LegalEntityRecord", back_populates="application", uselist=False, cascade="all, delete-orphan")
    products = relationship(
        "ProductRecord",
        back_populates="application",
        cascade="all, delete-orphan",
        order_by="ProductRecord.position",
    )
    current_review = relationship("ReviewRecord", back_populates="application", uselist=False, cascade="all, delete-orphan")


class ApplicantRecord(Base):
    """Person who made the application"""

    __tablename__ = "applicant"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    application_id = Column(Uuid(as_uuid=True), ForeignKey("application.id", ondelete="CASCADE"), nullable=False, unique=True)
    first_name = Column(Text, nullable=False)
    surname = Column(Text, nullable=False)

    application = relationship("ApplicationRecord", back_populates="applicant")


class LegalEntityRecord(Base):
    """Company an application is made on behalf of"""

    __tablename__ = "legal_entity"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    application_id = Column(Uuid(as_uuid=True), ForeignKey("application.id", ondelete="CASCADE"), nullable=False, unique=True)
    company_name = Column(Text, nullable=False)
    registration_number = Column(Text, nullable=False)

    application = relationship("ApplicationRecord", back_populates="legal_entity")


class ProductRecord(Base):
    """Product held by an application"""

    __tablename__ = "product"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    application_id = Column(Uuid(as_uuid=True), ForeignKey("application.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    name = Column(Text, nullable=False)

    application = relationship("ApplicationRecord", back_populates="products")
    funds = relationship(
        "FundRecord",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="FundRecord.position",
    )


class FundRecord(Base):
    """Fund within a product"""

    __tablename__ = "fund"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    product_id = Column(Uuid(as_uuid=True), ForeignKey("product.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    name = Column(Text, nullable=False)
    amount = Column(Numeric(18, 2), nullable=False)
    fees = Column(Numeric(18, 2), nullable=False, default=0)

    product = relationship("ProductRecord", back_populates="funds")


class ReviewRecord(Base):
    """Open manual review of an application"""

    __tablename__ = "application_review"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    application_id = Column(Uuid(as_uuid=True), ForeignKey("application.id", ondelete="CASCADE"), nullable=False, unique=True)
    reason = Column(Text, nullable=False)
    opened_on = Column(Date, nullable=True)

    application = relationship("ApplicationRecord", back_populates="current_review")
