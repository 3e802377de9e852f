"""Unit tests for in-review message selection"""

import pytest
from application_docs.domain.review import (
    ADDRESS_VERIFICATION_SUFFIX,
    BANK_VERIFICATION_SUFFIX,
    IN_REVIEW_PREFIX,
    SUSPICIOUS_BEHAVIOUR_SUFFIX,
    build_in_review_message,
    classify_review_reason,
)


@pytest.mark.parametrize(
    "reason, expected",
    [
        ("Address mismatch", ADDRESS_VERIFICATION_SUFFIX),
        ("Bank details invalid", BANK_VERIFICATION_SUFFIX),
        ("unknown issue", SUSPICIOUS_BEHAVIOUR_SUFFIX),
        ("PROOF OF ADDRESS OUTSTANDING", ADDRESS_VERIFICATION_SUFFIX),
        ("bAnK statement missing", BANK_VERIFICATION_SUFFIX),
        ("", SUSPICIOUS_BEHAVIOUR_SUFFIX),
    ],
)
def test_classify_review_reason(reason, expected):
    assert classify_review_reason(reason) == expected


def test_address_takes_precedence_over_bank():
    """Both keywords present: address wins"""
    assert classify_review_reason("Bank address could not be verified") == ADDRESS_VERIFICATION_SUFFIX


def test_build_in_review_message():
    message = build_in_review_message("Bank details invalid")

    assert message == "Your application has been placed in review pending outstanding bank account verification."
    assert message.startswith(IN_REVIEW_PREFIX)


def test_default_message_text():
    assert build_in_review_message("unknown issue") == (
        "Your application has been placed in review"
        " because of suspicious account behaviour. Please contact support ASAP."
    )
