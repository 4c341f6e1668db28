import enum


class OrderState(str, enum.Enum):
    open = "OPEN"
    shipped = "SHIPPED"
