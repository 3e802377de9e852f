"""Portfolio aggregation across an application's products"""

from decimal import Decimal
from typing import List
from application_docs.domain.models import Application, Fund


def portfolio_funds(application: Application) -> List[Fund]:
    """
    Flatten every fund across every product.

    Order follows product order, then fund order within each product.
    Duplicates are preserved.
    """
    return [fund for product in application.products for fund in product.funds]


def portfolio_total_amount(funds: List[Fund], tax_rate: Decimal) -> Decimal:
    """
    Sum of each fund's net amount after fees, multiplied by the tax rate.

    Example:
        funds (100, 10) and (50, 5), tax_rate 0.2
        ((100 - 10) * 0.2) + ((50 - 5) * 0.2) = 27
    """
    return sum(((fund.amount - fund.fees) * tax_rate for fund in funds), Decimal("0"))
