"""Data access layer for application records"""

import uuid
from typing import Optional
from sqlalchemy.orm import Session, selectinload
from application_docs.infrastructure.database.models import ApplicationRecord, ProductRecord
from application_docs.domain.models import (
    Application,
    ApplicationState,
    Fund,
    LegalEntity,
    Person,
    Product,
    Review,
)
from application_docs.domain.ports import ApplicationRepository as ApplicationRepositoryPort


class ApplicationRepository(ApplicationRepositoryPort):
    """Repository for applications, returning read-only domain snapshots"""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, application_id: uuid.UUID) -> Optional[Application]:
        """Fetch application with applicant, products, funds and review"""
        record = (
            self.db.query(ApplicationRecord)
            .options(
                selectinload(ApplicationRecord.applicant),
                selectinload(ApplicationRecord.legal_entity),
                selectinload(ApplicationRecord.products).selectinload(ProductRecord.funds),
                selectinload(ApplicationRecord.current_review),
            )
            .filter(ApplicationRecord.id == application_id)
            .first()
        )

        if record is None:
            return None

        return _to_domain(record)


def _to_domain(record: ApplicationRecord) -> Application:
    legal_entity = None
    if record.legal_entity is not None:
        legal_entity = LegalEntity(
            company_name=record.legal_entity.company_name,
            registration_number=record.legal_entity.registration_number,
        )

    review = None
    if record.current_review is not None:
        review = Review(
            reason=record.current_review.reason,
            opened_on=record.current_review.opened_on,
        )

    return Application(
        id=record.id,
        state=ApplicationState(record.state),
        reference_number=record.reference_number,
        person=Person(
            first_name=record.applicant.first_name,
            surname=record.applicant.surname,
        ),
        applied_on=record.applied_on,
        is_legal_entity=record.is_legal_entity,
        legal_entity=legal_entity,
        products=[
            Product(
                name=product.name,
                funds=[Fund(name=f.name, amount=f.amount, fees=f.fees) for f in product.funds],
            )
            for product in record.products
        ],
        current_review=review,
    )
