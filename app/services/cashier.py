import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import List, Optional

from app.constants.discount_unit import DiscountUnit
from app.models.cart import Cart, LineItem
from app.models.promotion import PromotionConfig
from app.services.cashier_errors import (
    EmptyEligibleListError,
    RoundingError,
    UnsupportedDiscountUnitError,
)

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
HUNDRED = Decimal("100")
ZERO = Decimal("0")


def round_amount(amount: Decimal) -> Decimal:
    """Round to cents, halves away from zero (39.995 -> 40.00)."""
    if not amount.is_finite():
        raise RoundingError(amount)
    with localcontext() as ctx:
        # integer digits + cents + one for a carry (999.995 -> 1000.00)
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        try:
            return amount.quantize(CENT, rounding=ROUND_HALF_UP)
        except InvalidOperation as e:
            raise RoundingError(amount) from e


class Cashier:
    """
    Prices a cart against one promotion rule.

    If any line item carries a prerequisite SKU, the cheapest line item
    with an eligible SKU is discounted. Every line item sharing that SKU
    gets the same discount, not only the cheapest occurrence.
    """

    def __init__(self, config: PromotionConfig):
        self.config = config

    def compute(self, cart: Cart) -> Cart:
        items = cart.line_items

        eligible_items: List[LineItem] = []
        if self.has_prerequisite_sku(items):
            eligible_items = self.get_eligible_for_discount(items)

        discounted_sku: Optional[str] = None
        discount_amount = ZERO
        if eligible_items:
            cheapest = self.get_cheapest_product(eligible_items)
            discount_amount = self.calculate_discount(cheapest.price)
            discounted_sku = cheapest.sku
            logger.debug(
                f"Cart {cart.reference}: discounting {discounted_sku} by {discount_amount}"
            )
        else:
            logger.debug(f"Cart {cart.reference}: promotion not applicable")

        priced_items = []
        total = ZERO
        for item in items:
            item_discount = discount_amount if item.sku == discounted_sku else ZERO
            discounted_price = round_amount(item.price - item_discount)
            total += discounted_price
            priced_items.append(
                item.model_copy(update={"discounted_price": discounted_price})
            )

        return Cart(
            reference=cart.reference,
            line_items=priced_items,
            total=round_amount(total),
        )

    def has_prerequisite_sku(self, items: List[LineItem]) -> bool:
        return any(item.sku in self.config.prerequisite_skus for item in items)

    def get_eligible_for_discount(self, items: List[LineItem]) -> List[LineItem]:
        return [item for item in items if item.sku in self.config.eligible_skus]

    def get_cheapest_product(self, items: List[LineItem]) -> LineItem:
        if not items:
            raise EmptyEligibleListError()

        cheapest = items[0]
        for item in items:
            # strict comparison keeps the first of equally priced items
            if item.price < cheapest.price:
                cheapest = item

        return cheapest

    def calculate_discount(self, amount: Decimal) -> Decimal:
        if self.config.discount_unit == DiscountUnit.PERCENTAGE:
            return amount * self.config.discount_value / HUNDRED

        raise UnsupportedDiscountUnitError(self.config.discount_unit)
