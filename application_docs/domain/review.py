"""In-review messaging based on the review reason"""

from typing import Callable, Tuple

IN_REVIEW_PREFIX = "Your application has been placed in review"

ADDRESS_VERIFICATION_SUFFIX = " pending outstanding address verification for FICA purposes."
BANK_VERIFICATION_SUFFIX = " pending outstanding bank account verification."
SUSPICIOUS_BEHAVIOUR_SUFFIX = " because of suspicious account behaviour. Please contact support ASAP."


def _mentions(keyword: str) -> Callable[[str], bool]:
    return lambda reason: keyword in reason.lower()


# Evaluated in order, first match wins
REVIEW_REASON_RULES: Tuple[Tuple[Callable[[str], bool], str], ...] = (
    (_mentions("address"), ADDRESS_VERIFICATION_SUFFIX),
    (_mentions("bank"), BANK_VERIFICATION_SUFFIX),
)


def classify_review_reason(reason: str) -> str:
    """Return the message suffix for a review reason (case-insensitive)"""
    for matches, suffix in REVIEW_REASON_RULES:
        if matches(reason):
            return suffix
    return SUSPICIOUS_BEHAVIOUR_SUFFIX


def build_in_review_message(reason: str) -> str:
    return IN_REVIEW_PREFIX + classify_review_reason(reason)
