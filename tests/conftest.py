"""Pytest fixtures for testing"""

import uuid
import pytest
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Generator, List, Optional, Tuple
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from application_docs.api.dependencies import get_pdf_renderer
from application_docs.api.main import create_app
from application_docs.domain.models import (
    Application,
    ApplicationState,
    Fund,
    LegalEntity,
    PdfDocument,
    PdfOptions,
    Person,
    Product,
    Review,
)
from application_docs.domain.ports import PdfRenderer
from application_docs.infrastructure.database.models import (
    ApplicantRecord,
    ApplicationRecord,
    Base,
    FundRecord,
    LegalEntityRecord,
    ProductRecord,
    ReviewRecord,
)
from application_docs.infrastructure.database.session import get_db


# Test database
TEST_DATABASE_URL = "sqlite:///./test_documents.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@dataclass(frozen=True)
class DocumentSettings:
    """Stand-in for the values DocumentGenerator reads from settings"""

    support_email: str = "help@example.com"
    signature: str = "Client Services"
    tax_rate: Decimal = Decimal("0.2")


class FakePdfRenderer(PdfRenderer):
    """Records what it was asked to render instead of running WeasyPrint"""

    def __init__(self):
        self.calls: List[Tuple[str, PdfOptions]] = []

    def render(self, html: str, options: PdfOptions) -> PdfDocument:
        self.calls.append((html, options))
        return PdfDocument(content=b"%PDF-1.7 test document")


def _make_application(
    state: ApplicationState = ApplicationState.PENDING,
    products: Optional[List[Product]] = None,
    review: Optional[Review] = None,
    is_legal_entity: bool = False,
    legal_entity: Optional[LegalEntity] = None,
) -> Application:
    """Build a domain application snapshot with sensible defaults"""
    return Application(
        id=uuid.uuid4(),
        state=state,
        reference_number="APP-1001",
        person=Person(first_name="Thandi", surname="Nkosi"),
        applied_on=date(2024, 3, 1),
        is_legal_entity=is_legal_entity,
        legal_entity=legal_entity,
        products=products if products is not None else [],
        current_review=review,
    )


@pytest.fixture
def application_factory():
    return _make_application


@pytest.fixture
def document_settings() -> DocumentSettings:
    return DocumentSettings()


@pytest.fixture
def sample_products() -> List[Product]:
    """Two products: (100, 10) and (50, 5)"""
    return [
        Product(name="Growth", funds=[Fund(name="Equity Fund", amount=Decimal("100"), fees=Decimal("10"))]),
        Product(name="Income", funds=[Fund(name="Bond Fund", amount=Decimal("50"), fees=Decimal("5"))]),
    ]


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def seed_application(db: Session):
    """Insert an application with applicant and products; returns its id"""

    def _seed(
        state: str = "Activated",
        review_reason: Optional[str] = None,
        legal_entity: bool = False,
    ) -> uuid.UUID:
        record = ApplicationRecord(
            state=state,
            reference_number=f"APP-{uuid.uuid4().hex[:8].upper()}",
            applied_on=date(2024, 3, 1),
            is_legal_entity=legal_entity,
        )
        record.applicant = ApplicantRecord(first_name="Thandi", surname="Nkosi")
        if legal_entity:
            record.legal_entity = LegalEntityRecord(company_name="Nkosi Holdings", registration_number="2019/123456/07")
        record.products = [
            ProductRecord(
                position=0,
                name="Growth",
                funds=[
                    FundRecord(position=0, name="Equity Fund", amount=Decimal("100.00"), fees=Decimal("10.00")),
                    FundRecord(position=1, name="Property Fund", amount=Decimal("20.00"), fees=Decimal("0.00")),
                ],
            ),
            ProductRecord(
                position=1,
                name="Income",
                funds=[FundRecord(position=0, name="Bond Fund", amount=Decimal("50.00"), fees=Decimal("5.00"))],
            ),
        ]
        if review_reason is not None:
            record.current_review = ReviewRecord(reason=review_reason, opened_on=date(2024, 3, 5))

        db.add(record)
        db.commit()
        return record.id

    return _seed


@pytest.fixture
def pdf_renderer() -> FakePdfRenderer:
    return FakePdfRenderer()


@pytest.fixture
def client(db: Session, pdf_renderer: FakePdfRenderer) -> TestClient:
    """Create FastAPI test client with test database and fake PDF renderer"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_pdf_renderer] = lambda: pdf_renderer
    return TestClient(app)
