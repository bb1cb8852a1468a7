from typing import List

from marketing.promotions.rewards import Reward, tag_reward
from marketing.logging.utils import get_app_logger

logger = get_app_logger("marketing.promotions.events.reward_tree")


def evaluate(promotion, context) -> List[Reward]:
    """
    Flatten the promotion's reward tree into a tagged reward list.

    Blocks are walked depth-first in child order, so the rewards keep the
    order in which they were configured. A promotion without a tree yields nothing.
    """
    if promotion.reward_block is None:
        logger.warning(f"reward_tree_missing | promotion={promotion.id}")
        return []

    rewards = [tag_reward(reward, promotion.id) for reward in promotion.reward_block.get_rewards()]
    logger.info(f"reward_tree_evaluated | promotion={promotion.id} count={len(rewards)}")
    return rewards
