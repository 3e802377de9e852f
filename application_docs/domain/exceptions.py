"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class TemplateNotFoundError(DomainException):
    """No template path is registered for a logical template name"""

    pass


class ViewRenderingError(DomainException):
    """Template could not be loaded or rendered to HTML"""

    pass


class PdfRenderingError(DomainException):
    """HTML could not be converted to a PDF document"""

    pass


class MissingReviewError(DomainException):
    """Application is in review but carries no current review record"""

    pass
