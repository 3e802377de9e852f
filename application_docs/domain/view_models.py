"""View models for each renderable application state"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional

from application_docs.domain.exceptions import MissingReviewError
from application_docs.domain.models import Application, ApplicationState, Fund, LegalEntity, Review
from application_docs.domain.ports import DocumentSettings
from application_docs.domain.portfolio import portfolio_funds, portfolio_total_amount
from application_docs.domain.review import build_in_review_message


@dataclass(frozen=True)
class PendingApplicationViewModel:
    reference_number: str
    state: str
    full_name: str
    applied_on: date
    support_email: str
    signature: str


@dataclass(frozen=True)
class ActivatedApplicationViewModel(PendingApplicationViewModel):
    legal_entity: Optional[LegalEntity]
    portfolio_funds: List[Fund]
    portfolio_total_amount: Decimal


@dataclass(frozen=True)
class InReviewApplicationViewModel(ActivatedApplicationViewModel):
    in_review_message: str
    in_review_information: Review


def _common_fields(application: Application, settings: DocumentSettings) -> Dict[str, Any]:
    person = application.person
    return {
        "reference_number": application.reference_number,
        "state": application.state.description,
        "full_name": f"{person.first_name} {person.surname}",
        "applied_on": application.applied_on,
        "support_email": settings.support_email,
        "signature": settings.signature,
    }


def _portfolio_fields(application: Application, settings: DocumentSettings) -> Dict[str, Any]:
    funds = portfolio_funds(application)
    return {
        "legal_entity": application.legal_entity if application.is_legal_entity else None,
        "portfolio_funds": funds,
        # Tax rate read at call time, never cached
        "portfolio_total_amount": portfolio_total_amount(funds, settings.tax_rate),
    }


def build_pending_view_model(application: Application, settings: DocumentSettings) -> PendingApplicationViewModel:
    """Fields copied straight from the application and settings"""
    return PendingApplicationViewModel(**_common_fields(application, settings))


def build_activated_view_model(application: Application, settings: DocumentSettings) -> ActivatedApplicationViewModel:
    return ActivatedApplicationViewModel(
        **_common_fields(application, settings),
        **_portfolio_fields(application, settings),
    )


def build_in_review_view_model(application: Application, settings: DocumentSettings) -> InReviewApplicationViewModel:
    """
    Activated fields plus the review message and the raw review record.

    Raises:
        MissingReviewError: application has no current review
    """
    review = application.current_review
    if review is None:
        raise MissingReviewError(
            f"Application '{application.reference_number}' is in review but has no current review"
        )

    return InReviewApplicationViewModel(
        **_common_fields(application, settings),
        **_portfolio_fields(application, settings),
        in_review_message=build_in_review_message(review.reason),
        in_review_information=review,
    )


@dataclass(frozen=True)
class StateView:
    """Template and view model builder for one renderable state"""

    template_name: str
    build: Callable[[Application, DocumentSettings], Any]


# States missing from this table cannot be rendered
STATE_VIEWS: Dict[ApplicationState, StateView] = {
    ApplicationState.PENDING: StateView("PendingApplication", build_pending_view_model),
    ApplicationState.ACTIVATED: StateView("ActivatedApplication", build_activated_view_model),
    ApplicationState.IN_REVIEW: StateView("InReviewApplication", build_in_review_view_model),
}
