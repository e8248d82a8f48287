from decimal import Decimal
from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field

from app.constants.discount_unit import DiscountUnit


class PromotionConfig(BaseModel):
    """
    A single "discount the cheapest eligible product" rule.

    SKU lists are coerced to frozensets when the rule is built, so
    membership checks are O(1) for every request served afterwards.
    discount_unit stays a plain string: an unknown unit is rejected by
    the Cashier when it tries to price a discount, not at load time.
    """

    model_config = ConfigDict(frozen=True)

    prerequisite_skus: FrozenSet[str]
    eligible_skus: FrozenSet[str]
    discount_unit: str = DiscountUnit.PERCENTAGE.value
    discount_value: Decimal = Field(ge=0)
