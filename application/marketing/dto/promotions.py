from typing import List, Optional, Type
from decimal import Decimal
from pydantic import BaseModel, Field

from marketing.core.constants import RewardAmountKind
from marketing.promotions.rewards import CartSubtotalReward, GiftReward, PromotionReward, Reward


class PromoEntry(BaseModel):
    """Cart line the promotion engine may discount"""
    product_id: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0, description="Current unit price, lowered as catalog rewards apply")
    quantity: int = Field(1, ge=1)
    original_price: Optional[Decimal] = Field(None, ge=0, description="Unit price before any promotion")
    discounted_quantity: int = Field(0, ge=0, description="Units covered by applied catalog rewards")
    unit_prices: List[Decimal] = Field(default_factory=list, description="Current price of each unit; the first unit carries every applied catalog reward")

    def model_post_init(self, __context) -> None:
        """Set original_price to price if not provided and price every unit at price"""
        if self.original_price is None:
            self.original_price = self.price
        if not self.unit_prices:
            self.unit_prices = [self.price] * self.quantity

    def discount_units(self, covered: int, prices: List[Decimal]) -> None:
        """Replace the prices of the first ``covered`` units"""
        self.unit_prices[:covered] = prices
        self.price = self.unit_prices[0]
        self.discounted_quantity = max(self.discounted_quantity, covered)

    @property
    def line_total(self) -> Decimal:
        return sum(self.unit_prices, Decimal("0"))


class EvaluationContext(BaseModel):
    """Mutable inputs of one promotion evaluation"""
    promo_entries: List[PromoEntry] = Field(default_factory=list)
    shipment_method_code: Optional[str] = Field(None, description="Selected shipment method")
    shipment_method_price: Optional[Decimal] = Field(None, ge=0, description="Current shipment price")
    store_id: Optional[str] = None
    currency: Optional[str] = None
    customer_id: Optional[str] = None

    def entries_for(self, product_id: str) -> List[PromoEntry]:
        return [entry for entry in self.promo_entries if entry.product_id == product_id]


class PromotionSearchCriteria(BaseModel):
    only_active: bool = True
    store_id: Optional[str] = None
    shipment_method_code: Optional[str] = None
    product_ids: List[str] = Field(default_factory=list)
    promotion_ids: List[str] = Field(default_factory=list)
    take: Optional[int] = Field(None, ge=0)


class EvaluationResult(BaseModel):
    rewards: List[Reward] = Field(default_factory=list, description="Applied rewards in application order")
    context: EvaluationContext

    @property
    def applied_promotion_ids(self) -> List[str]:
        seen = []
        for reward in self.rewards:
            if reward.promotion_id not in seen:
                seen.append(reward.promotion_id)
        return seen

    def rewards_of_type(self, reward_class: Type[PromotionReward]) -> List[PromotionReward]:
        return [reward for reward in self.rewards if isinstance(reward, reward_class)]

    @property
    def cart_subtotal_discount(self) -> Decimal:
        """Sum of absolute cart subtotal rewards; relative ones are left to the caller"""
        return sum(
            (reward.amount for reward in self.rewards_of_type(CartSubtotalReward)
             if reward.amount_kind == RewardAmountKind.ABSOLUTE),
            Decimal("0"),
        )

    @property
    def gifts(self) -> List[GiftReward]:
        return self.rewards_of_type(GiftReward)
