from enum import StrEnum


class MenuAction(StrEnum):
    ORDER_COFFEE = "1"
    VIEW_CART = "2"
    CHECK_OUT = "3"
    EXIT = "4"


class LoopState(StrEnum):
    AWAITING_ACTION = "awaiting-action"
    AWAITING_SELECTION = "awaiting-selection"
    AWAITING_QUANTITY = "awaiting-quantity"
    TERMINATED = "terminated"
