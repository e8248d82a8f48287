# Deployment constants for the single active promotion.
# Not user input and not reloaded at runtime.
from decimal import Decimal

from app.constants.discount_unit import DiscountUnit
from app.models.promotion import PromotionConfig

PREREQUISITE_SKUS = ["PEANUT-BUTTER", "COCOA", "FRUITY"]
ELIGIBLE_SKUS = ["BANANA-CAKE", "COCOA", "CHOCOLATE"]
DISCOUNT_UNIT = DiscountUnit.PERCENTAGE.value
DISCOUNT_VALUE = Decimal("50.0")

PROMOTION = PromotionConfig(
    prerequisite_skus=PREREQUISITE_SKUS,
    eligible_skus=ELIGIBLE_SKUS,
    discount_unit=DISCOUNT_UNIT,
    discount_value=DISCOUNT_VALUE,
)
