"""Errors raised while pricing a cart."""


class CashierError(Exception):
    """Cart could not be priced."""


class UnsupportedDiscountUnitError(CashierError):
    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"unsupported discount method: {unit}")


class EmptyEligibleListError(CashierError):
    def __init__(self):
        super().__init__("empty list of products")


class RoundingError(CashierError):
    def __init__(self, amount):
        self.amount = amount
        super().__init__(f"could not round amount: {amount}")
