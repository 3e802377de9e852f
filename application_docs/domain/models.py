"""Domain models - pure Python dataclasses representing business entities"""

import uuid
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional


class ApplicationState(str, Enum):
    """Lifecycle stage of an application"""

    PENDING = "Pending"
    ACTIVATED = "Activated"
    IN_REVIEW = "InReview"
    CLOSED = "Closed"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value):
        # States added to the data store before this service knows them
        return cls.UNKNOWN

    def __str__(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        """Human-readable label shown on documents"""
        return _STATE_DESCRIPTIONS[self]


_STATE_DESCRIPTIONS = {
    ApplicationState.PENDING: "Pending",
    ApplicationState.ACTIVATED: "Activated",
    ApplicationState.IN_REVIEW: "In Review",
    ApplicationState.CLOSED: "Closed",
    ApplicationState.UNKNOWN: "Unknown",
}


@dataclass(frozen=True)
class Person:
    """Applicant"""

    first_name: str
    surname: str


@dataclass(frozen=True)
class LegalEntity:
    """Company details for applications made on behalf of a legal entity"""

    company_name: str
    registration_number: str


@dataclass(frozen=True)
class Fund:
    """Holding within a product; amounts share one currency unit"""

    name: str
    amount: Decimal
    fees: Decimal


@dataclass(frozen=True)
class Product:
    """Product held by an application"""

    name: str
    funds: List[Fund] = field(default_factory=list)


@dataclass(frozen=True)
class Review:
    """Reason an application was placed under manual review"""

    reason: str
    opened_on: Optional[date] = None


@dataclass(frozen=True)
class Application:
    """Read-only snapshot of an application record"""

    id: uuid.UUID
    state: ApplicationState
    reference_number: str
    person: Person
    applied_on: date
    is_legal_entity: bool = False
    legal_entity: Optional[LegalEntity] = None
    products: List[Product] = field(default_factory=list)
    current_review: Optional[Review] = None


class PageNumbers(str, Enum):
    """Page number style printed in the page footer"""

    NONE = "none"
    NUMERIC = "numeric"
    ROMAN = "roman"


class HeaderRepeat(str, Enum):
    """Pages the document header is printed on"""

    ALL_PAGES = "all_pages"
    FIRST_PAGE_ONLY = "first_page_only"


@dataclass(frozen=True)
class HeaderOptions:
    header_repeat: HeaderRepeat
    header_html: str


@dataclass(frozen=True)
class PdfOptions:
    """Layout options passed to the PDF renderer"""

    page_numbers: PageNumbers
    header_options: HeaderOptions


@dataclass(frozen=True)
class PdfDocument:
    """Rendered PDF"""

    content: bytes

    def to_bytes(self) -> bytes:
        return self.content
