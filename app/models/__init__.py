from app.models.cart import Cart, LineItem
from app.models.promotion import PromotionConfig

__all__ = [
    "Cart",
    "LineItem",
    "PromotionConfig",
]
