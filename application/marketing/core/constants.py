"""
Core constants for the promotion engine

Reward variants, amount kinds, promotion kinds and ordering directions shared
by the models, the evaluators and the combination policy.
"""

class RewardType:
    SHIPMENT = "shipment"
    CATALOG_ITEM = "catalog_item"
    CART_SUBTOTAL = "cart_subtotal"
    GIFT = "gift"


class RewardAmountKind:
    """How a reward amount is read against the current value"""
    RELATIVE = "relative"  # percent of the current price
    ABSOLUTE = "absolute"  # fixed currency amount


class PromotionKind:
    STATIC = "static"
    REWARD_TREE = "reward_tree"


class PriorityOrder:
    """Direction in which promotion priorities are applied"""
    DESCENDING = "desc"  # higher priority value applied first
    ASCENDING = "asc"    # lower priority value applied first

    @classmethod
    def parse(cls, value: str) -> str:
        normalized = (value or "").strip().lower()
        if normalized in ("desc", "descending"):
            return cls.DESCENDING
        if normalized in ("asc", "ascending"):
            return cls.ASCENDING
        raise ValueError(f"Unsupported priority order: {value}")
