from marketing.promotions.strategy.base import BaseRewardStrategy
from marketing.logging.utils import get_app_logger

logger = get_app_logger("marketing.promotions.strategy.advisory")


class AdvisoryRewardStrategy(BaseRewardStrategy):
    """
    Cart subtotal and gift rewards.
    They are recorded as applied but never change a price here; checkout consumes them downstream.
    """

    def apply(self, reward, context) -> bool:
        logger.info(f"advisory_reward_recorded | promotion={reward.promotion_id} reward_type={reward.reward_type}")
        return True
