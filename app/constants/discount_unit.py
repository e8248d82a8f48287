from enum import Enum


class DiscountUnit(str, Enum):
    PERCENTAGE = "percentage"
