import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException

from app.constants.promotion import PROMOTION
from app.models.cart import Cart
from app.schemas.cart_schemas import CartRequest, PromotionResponse
from app.services.cashier import Cashier
from app.services.cashier_errors import CashierError

logger = logging.getLogger(__name__)

router = APIRouter()


@lru_cache(maxsize=1)
def get_cashier() -> Cashier:
    return Cashier(PROMOTION)


# Cart Total

@router.post("/total", response_model=Cart)
def calculate_cart_total(
    data: CartRequest,
    cashier: Cashier = Depends(get_cashier)
):
    cart = data.cart

    if not cart.line_items:
        raise HTTPException(status_code=400, detail="empty cart")

    try:
        priced_cart = cashier.compute(cart)
    except CashierError as e:
        logger.error(f"Could not price cart {cart.reference}: {e}")
        raise HTTPException(status_code=400, detail="invalid cart data")

    logger.info(
        f"Priced cart {priced_cart.reference}: "
        f"{len(priced_cart.line_items)} items, total {priced_cart.total}"
    )
    return priced_cart


# Active Promotion

@router.get("/promotion", response_model=PromotionResponse)
def get_promotion(cashier: Cashier = Depends(get_cashier)):
    config = cashier.config
    return PromotionResponse(
        prerequisite_skus=sorted(config.prerequisite_skus),
        eligible_skus=sorted(config.eligible_skus),
        discount_unit=config.discount_unit,
        discount_value=config.discount_value,
    )
