from typing import List

from marketing.promotions.rewards import Reward, tag_reward
from marketing.logging.utils import get_app_logger

logger = get_app_logger("marketing.promotions.events.static_rewards")


def evaluate(promotion, context) -> List[Reward]:
    """Configured rewards of a static promotion, copied and tagged with the promotion id."""
    rewards = [tag_reward(reward, promotion.id) for reward in promotion.rewards]
    logger.info(f"static_rewards_evaluated | promotion={promotion.id} count={len(rewards)}")
    return rewards
