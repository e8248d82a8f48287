from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator

# Decimals go out as JSON numbers, like the prices clients send in.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class LineItem(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    price: Money = Field(ge=0)
    sku: str
    discounted_price: Optional[Money] = Field(default=None, alias="discountedPrice")

    @field_validator("discounted_price", mode="before")
    @classmethod
    def drop_client_discounted_price(cls, value):
        # only the Cashier sets this, always as a Decimal
        return value if isinstance(value, Decimal) else None


class Cart(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    reference: str = ""
    line_items: List[LineItem] = Field(default_factory=list, alias="lineItems")
    total: Money = Decimal("0")

    @field_validator("total", mode="before")
    @classmethod
    def drop_client_total(cls, value):
        # recomputed by the Cashier, whatever the client sent
        return value if isinstance(value, Decimal) else Decimal("0")
