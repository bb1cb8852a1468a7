from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field

from marketing.core.constants import RewardAmountKind, RewardType

DEFAULT_PRECISION = Decimal("0.01")
HUNDRED = Decimal("100")

AmountKind = Literal["relative", "absolute"]


class PromotionReward(BaseModel):
    """Fields shared by every reward a promotion can produce"""
    id: Optional[str] = Field(None, description="Reward identifier within its promotion")
    description: Optional[str] = Field(None, description="Human readable description")
    coupon: Optional[str] = Field(None, description="Coupon code the reward was unlocked with")
    is_valid: bool = Field(True, description="Set by the promotion's own matching logic")
    promotion_id: Optional[str] = Field(None, description="Id of the promotion that produced the reward")


class AmountBasedReward(PromotionReward):
    amount: Decimal = Field(..., description="Percent for relative rewards, currency for absolute ones")
    amount_kind: AmountKind = Field(RewardAmountKind.ABSOLUTE, description="relative or absolute")
    max_limit: Optional[Decimal] = Field(None, description="Upper bound for a relative discount")

    def get_reward_amount(self, price: Decimal, precision: Decimal = DEFAULT_PRECISION) -> Decimal:
        """Discount this reward takes off ``price``.

        Relative amounts are a percentage of ``price`` and respect ``max_limit``.
        Absolute amounts ignore ``price``. The result is quantized to ``precision``.
        """
        if self.amount_kind == RewardAmountKind.RELATIVE:
            discount = price * self.amount / HUNDRED
            if self.max_limit is not None and self.max_limit > 0:
                discount = min(discount, self.max_limit)
        else:
            discount = self.amount
        return discount.quantize(precision, rounding=ROUND_HALF_UP)


class ShipmentReward(AmountBasedReward):
    reward_type: Literal["shipment"] = RewardType.SHIPMENT
    shipping_method: Optional[str] = Field(None, description="Shipment method code; None matches any method")

    def matches_shipment(self, shipment_method_code: Optional[str]) -> bool:
        if shipment_method_code is None:
            return False
        return self.shipping_method is None or self.shipping_method == shipment_method_code


class CatalogItemReward(AmountBasedReward):
    reward_type: Literal["catalog_item"] = RewardType.CATALOG_ITEM
    product_id: str
    quantity: Optional[int] = Field(None, ge=0, description="Units covered; None or 0 covers every unit")

    def covered_quantity(self, entry_quantity: int) -> int:
        if not self.quantity:
            return entry_quantity
        return min(self.quantity, entry_quantity)


class CartSubtotalReward(AmountBasedReward):
    reward_type: Literal["cart_subtotal"] = RewardType.CART_SUBTOTAL


class GiftReward(PromotionReward):
    reward_type: Literal["gift"] = RewardType.GIFT
    product_id: str
    quantity: int = Field(1, ge=1, description="Number of gift units")


Reward = Annotated[
    Union[ShipmentReward, CatalogItemReward, CartSubtotalReward, GiftReward],
    Field(discriminator="reward_type"),
]


def tag_reward(reward: PromotionReward, promotion_id: str) -> PromotionReward:
    """Copy of ``reward`` owned by ``promotion_id``; the source reward is left untouched."""
    return reward.model_copy(update={"promotion_id": promotion_id}, deep=True)
