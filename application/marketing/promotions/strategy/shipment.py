from decimal import Decimal

from marketing.promotions.rewards import ShipmentReward
from marketing.promotions.strategy.base import BaseRewardStrategy
from marketing.logging.utils import get_app_logger

logger = get_app_logger("marketing.promotions.strategy.shipment")

ZERO = Decimal("0")


class ShipmentRewardStrategy(BaseRewardStrategy):
    """Discounts the shipment price; the price is clamped at zero, never skipped"""

    def apply(self, reward: ShipmentReward, context) -> bool:
        if not reward.matches_shipment(context.shipment_method_code):
            logger.info(f"shipment_reward_not_matched | promotion={reward.promotion_id} method={reward.shipping_method} context_method={context.shipment_method_code}")
            return False
        if context.shipment_method_price is None:
            logger.info(f"shipment_reward_no_price | promotion={reward.promotion_id} method={context.shipment_method_code}")
            return False

        price = Decimal(context.shipment_method_price)
        discount = reward.get_reward_amount(price, self.precision)
        new_price = price - discount
        if new_price < ZERO:
            logger.info(f"shipment_price_clamped | promotion={reward.promotion_id} price={price} discount={discount}")
            new_price = ZERO

        context.shipment_method_price = new_price
        logger.info(f"shipment_reward_applied | promotion={reward.promotion_id} price_before={price} price_after={new_price}")
        return True
