import time
from decimal import Decimal
from typing import Dict, List, Optional

# Repository
from marketing.repository.promotions import PromotionSource

# Models
from marketing.dto.promotions import EvaluationContext, EvaluationResult, PromotionSearchCriteria
from marketing.promotions.models import Promotion
from marketing.promotions.rewards import Reward, tag_reward

# Constants
from marketing.core.constants import PriorityOrder, RewardType

# Strategies
from marketing.promotions.strategy.advisory import AdvisoryRewardStrategy
from marketing.promotions.strategy.catalog_item import CatalogItemRewardStrategy
from marketing.promotions.strategy.shipment import ShipmentRewardStrategy

# Settings
from marketing.config.settings import MarketingConfigs
from marketing.config.sentry import capture_exception
configs = MarketingConfigs()

# Logging
from marketing.logging.config import LoggingConfig
from marketing.logging.context import close_evaluation_scope, open_evaluation_scope
from marketing.logging.utils import get_app_logger, init_audit_logger
logger = get_app_logger("marketing.promotions.policy")
audit_logger = init_audit_logger("promotion-evaluations") if LoggingConfig.AUDIT_LOGGING_ENABLED else None


class CombineStackablePromotionPolicy:
    """Combines the rewards of every matched promotion and applies them to the evaluation context.

    Exclusive promotions win over stackable ones; only the exclusive promotion
    with the best priority is kept. Stackable rewards are applied one after
    the other in priority order, each reading the price the previous one left.
    """

    def __init__(self, promotion_source: PromotionSource, priority_order: Optional[str] = None, precision: Optional[Decimal] = None):
        """Initialize the policy.
        Args:
            promotion_source: Source queried for candidate promotions
            priority_order: "desc" applies higher priority values first, "asc" lower ones;
                defaults to PROMOTION_PRIORITY_ORDER
            precision: Quantum discounts are rounded to; defaults to PRICE_PRECISION
        """
        self.promotion_source = promotion_source
        self.priority_order = PriorityOrder.parse(priority_order or configs.PROMOTION_PRIORITY_ORDER)
        self.precision = precision if precision is not None else Decimal(configs.PRICE_PRECISION)

        advisory = AdvisoryRewardStrategy(self.precision)
        self.strategies = {
            RewardType.SHIPMENT: ShipmentRewardStrategy(self.precision),
            RewardType.CATALOG_ITEM: CatalogItemRewardStrategy(self.precision),
            RewardType.CART_SUBTOTAL: advisory,
            RewardType.GIFT: advisory,
        }

    async def evaluate_promotion(self, context: EvaluationContext) -> EvaluationResult:
        """Evaluate every candidate promotion against ``context`` and apply the combined rewards.

        Args:
            context: Cart entries and shipment; mutated in place

        Returns:
            EvaluationResult with the applied rewards in application order and the same context

        Raises:
            Whatever the promotion source raises; the context is untouched in that case
        """
        scope_token = open_evaluation_scope(store_id=context.store_id, customer_id=context.customer_id)
        started = time.time()
        try:
            criteria = self.build_search_criteria(context)
            try:
                promotions = await self.promotion_source.search_promotions(criteria)
            except Exception as e:
                logger.error(f"promotion_search_error | store={context.store_id} error={e}", exc_info=True)
                capture_exception(e)
                raise

            promotions_by_id = self._index(promotions)
            rewards = self.collect_rewards(promotions, context)
            rewards = self.resolve_exclusivity(rewards, promotions_by_id)
            rewards = self.order_by_priority(rewards, promotions_by_id)
            applied = self.apply_rewards(rewards, context)

            result = EvaluationResult(rewards=applied, context=context)
            logger.info(f"evaluate_promotion_result | candidates={len(promotions)} eligible={len(rewards)} applied={len(applied)} promotions={result.applied_promotion_ids}")
            self._audit(result, len(promotions), time.time() - started)
            return result
        finally:
            close_evaluation_scope(scope_token)

    @staticmethod
    def build_search_criteria(context: EvaluationContext) -> PromotionSearchCriteria:
        product_ids = []
        for entry in context.promo_entries:
            if entry.product_id not in product_ids:
                product_ids.append(entry.product_id)
        return PromotionSearchCriteria(
            only_active=True,
            store_id=context.store_id,
            shipment_method_code=context.shipment_method_code,
            product_ids=product_ids,
        )

    def collect_rewards(self, promotions: List[Promotion], context: EvaluationContext) -> List[Reward]:
        """Valid rewards of every promotion in source order, each tagged with its promotion id."""
        rewards = []
        for promotion in promotions:
            produced = promotion.evaluate(context)
            if not produced:
                logger.info(f"promotion_without_rewards | promotion={promotion.id}")
                continue
            for reward in produced:
                if reward.promotion_id != promotion.id:
                    reward = tag_reward(reward, promotion.id)
                if not reward.is_valid:
                    logger.info(f"invalid_reward_dropped | promotion={promotion.id} reward_type={reward.reward_type}")
                    continue
                rewards.append(reward)
        return rewards

    def resolve_exclusivity(self, rewards: List[Reward], promotions_by_id: Dict[str, Promotion]) -> List[Reward]:
        exclusive = [reward for reward in rewards if promotions_by_id[reward.promotion_id].is_exclusive]
        if not exclusive:
            return list(rewards)

        winner = self.order_by_priority(exclusive, promotions_by_id)[0].promotion_id
        logger.info(f"exclusive_promotion_selected | promotion={winner} exclusive_rewards={len(exclusive)} dropped={len(rewards) - len(exclusive)}")
        return [reward for reward in rewards if reward.promotion_id == winner]

    def order_by_priority(self, rewards: List[Reward], promotions_by_id: Dict[str, Promotion]) -> List[Reward]:
        """Stable sort; rewards of equal priority keep their source order."""
        sign = -1 if self.priority_order == PriorityOrder.DESCENDING else 1
        return sorted(rewards, key=lambda reward: sign * promotions_by_id[reward.promotion_id].priority)

    def apply_rewards(self, rewards: List[Reward], context: EvaluationContext) -> List[Reward]:
        applied = []
        for reward in rewards:
            if self.strategies[reward.reward_type].apply(reward, context):
                applied.append(reward)
            else:
                logger.info(f"reward_not_applied | promotion={reward.promotion_id} reward_type={reward.reward_type}")
        return applied

    @staticmethod
    def _index(promotions: List[Promotion]) -> Dict[str, Promotion]:
        promotions_by_id = {}
        for promotion in promotions:
            if promotion.id in promotions_by_id:
                logger.warning(f"duplicate_promotion_id | promotion={promotion.id}")
                continue
            promotions_by_id[promotion.id] = promotion
        return promotions_by_id

    def _audit(self, result: EvaluationResult, candidate_count: int, duration: float) -> None:
        if audit_logger is None:
            return
        context = result.context
        audit_logger.info(
            "promotion_evaluation",
            extra={
                "duration": round(duration, 6),
                "candidate_count": candidate_count,
                "applied_count": len(result.rewards),
                "applied_promotions": result.applied_promotion_ids,
                "shipment_price": context.shipment_method_price,
                "entry_prices": {entry.product_id: entry.price for entry in context.promo_entries},
            },
        )
