from typing import List

from pydantic import BaseModel, Field

from app.models.cart import Cart, Money


class CartRequest(BaseModel):
    # a missing cart decodes as an empty one and is rejected as "empty cart"
    cart: Cart = Field(default_factory=Cart)


class PromotionResponse(BaseModel):
    prerequisite_skus: List[str]
    eligible_skus: List[str]
    discount_unit: str
    discount_value: Money
