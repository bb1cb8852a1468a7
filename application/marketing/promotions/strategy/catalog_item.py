from decimal import Decimal

from marketing.promotions.rewards import CatalogItemReward
from marketing.promotions.strategy.base import BaseRewardStrategy
from marketing.logging.utils import get_app_logger

logger = get_app_logger("marketing.promotions.strategy.catalog_item")

ZERO = Decimal("0")


class CatalogItemRewardStrategy(BaseRewardStrategy):
    """
    Discounts the first covered units of every cart entry holding the reward's product.

    Unlike shipment rewards, a catalog reward that would push a unit price
    below zero is skipped for that entry and its units are left as they were.
    The reward counts as applied when at least one entry was discounted.
    """

    def apply(self, reward: CatalogItemReward, context) -> bool:
        entries = context.entries_for(reward.product_id)
        if not entries:
            logger.info(f"catalog_reward_no_entry | promotion={reward.promotion_id} product={reward.product_id}")
            return False

        applied = False
        for entry in entries:
            covered = reward.covered_quantity(entry.quantity)
            before = entry.unit_prices[:covered]
            after = [unit - reward.get_reward_amount(unit, self.precision) for unit in before]
            if any(unit < ZERO for unit in after):
                logger.info(f"catalog_reward_skipped_negative_price | promotion={reward.promotion_id} product={entry.product_id} price={entry.price} covered={covered}")
                continue

            entry.discount_units(covered, after)
            applied = True
            logger.info(f"catalog_reward_applied | promotion={reward.promotion_id} product={entry.product_id} price_before={before[0]} price_after={entry.price} covered={covered} line_total={entry.line_total}")

        return applied
