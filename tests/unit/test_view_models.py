"""Unit tests for state-specific view model builders"""

from datetime import date
from decimal import Decimal
import pytest
from application_docs.domain.exceptions import MissingReviewError
from application_docs.domain.models import ApplicationState, LegalEntity, Review
from application_docs.domain.view_models import (
    STATE_VIEWS,
    ActivatedApplicationViewModel,
    InReviewApplicationViewModel,
    PendingApplicationViewModel,
    build_activated_view_model,
    build_in_review_view_model,
    build_pending_view_model,
)

ACME = LegalEntity(company_name="Acme (Pty) Ltd", registration_number="2010/000001/07")


def test_pending_view_model_copies_fields(application_factory, document_settings):
    application = application_factory(state=ApplicationState.PENDING)

    view_model = build_pending_view_model(application, document_settings)

    assert view_model == PendingApplicationViewModel(
        reference_number="APP-1001",
        state="Pending",
        full_name="Thandi Nkosi",
        applied_on=date(2024, 3, 1),
        support_email="help@example.com",
        signature="Client Services",
    )


def test_activated_view_model_portfolio(application_factory, document_settings, sample_products):
    application = application_factory(state=ApplicationState.ACTIVATED, products=sample_products)

    view_model = build_activated_view_model(application, document_settings)

    assert isinstance(view_model, ActivatedApplicationViewModel)
    assert view_model.state == "Activated"
    assert [f.name for f in view_model.portfolio_funds] == ["Equity Fund", "Bond Fund"]
    assert view_model.portfolio_total_amount == Decimal("27")


def test_activated_view_model_uses_current_tax_rate(application_factory, document_settings, sample_products):
    """Tax rate is read from settings on every build"""
    application = application_factory(state=ApplicationState.ACTIVATED, products=sample_products)

    class MutableSettings:
        support_email = document_settings.support_email
        signature = document_settings.signature
        tax_rate = Decimal("0.2")

    settings = MutableSettings()
    assert build_activated_view_model(application, settings).portfolio_total_amount == Decimal("27")

    settings.tax_rate = Decimal("1")
    assert build_activated_view_model(application, settings).portfolio_total_amount == Decimal("135")


@pytest.mark.parametrize(
    "is_legal_entity, legal_entity, expected",
    [
        (True, ACME, ACME),
        (False, ACME, None),  # Data present but flag off
        (False, None, None),
    ],
)
def test_legal_entity_only_when_flagged(application_factory, document_settings, is_legal_entity, legal_entity, expected):
    application = application_factory(
        state=ApplicationState.ACTIVATED,
        is_legal_entity=is_legal_entity,
        legal_entity=legal_entity,
    )

    assert build_activated_view_model(application, document_settings).legal_entity == expected
    assert build_in_review_view_model(
        application_factory(
            state=ApplicationState.IN_REVIEW,
            is_legal_entity=is_legal_entity,
            legal_entity=legal_entity,
            review=Review(reason="unknown issue"),
        ),
        document_settings,
    ).legal_entity == expected


def test_in_review_view_model(application_factory, document_settings, sample_products):
    review = Review(reason="Address mismatch", opened_on=date(2024, 3, 5))
    application = application_factory(state=ApplicationState.IN_REVIEW, products=sample_products, review=review)

    view_model = build_in_review_view_model(application, document_settings)

    assert isinstance(view_model, InReviewApplicationViewModel)
    assert view_model.state == "In Review"
    assert view_model.in_review_message == (
        "Your application has been placed in review pending outstanding address verification for FICA purposes."
    )
    assert view_model.in_review_information is review
    assert view_model.portfolio_total_amount == Decimal("27")


def test_in_review_without_review_raises(application_factory, document_settings):
    application = application_factory(state=ApplicationState.IN_REVIEW, review=None)

    with pytest.raises(MissingReviewError):
        build_in_review_view_model(application, document_settings)


def test_state_views_cover_renderable_states():
    assert set(STATE_VIEWS) == {ApplicationState.PENDING, ApplicationState.ACTIVATED, ApplicationState.IN_REVIEW}
    assert STATE_VIEWS[ApplicationState.PENDING].template_name == "PendingApplication"
    assert STATE_VIEWS[ApplicationState.ACTIVATED].template_name == "ActivatedApplication"
    assert STATE_VIEWS[ApplicationState.IN_REVIEW].template_name == "InReviewApplication"
