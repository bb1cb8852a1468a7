from marketing.core.constants import PromotionKind
from marketing.promotions.events import reward_tree, static_rewards


class UnknownPromotionKindError(ValueError):
    """Raised when a promotion kind has no evaluator"""


PROMOTION_EVALUATORS = {
    PromotionKind.STATIC: static_rewards.evaluate,
    PromotionKind.REWARD_TREE: reward_tree.evaluate,
}
