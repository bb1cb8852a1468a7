from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, Protocol

from marketing.dto.promotions import PromotionSearchCriteria
from marketing.promotions.models import Promotion

from marketing.logging.utils import get_app_logger
logger = get_app_logger("marketing.promotions_repository")


class PromotionSource(Protocol):
    async def search_promotions(self, criteria: PromotionSearchCriteria) -> List[Promotion]: ...


class InMemoryPromotionsRepository:
    """Promotion source backed by a list held in memory; keeps insertion order"""

    def __init__(self, promotions: Optional[Iterable[Promotion]] = None, clock: Optional[Callable[[], datetime]] = None):
        self._promotions: List[Promotion] = list(promotions or [])
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def add(self, promotion: Promotion) -> None:
        self._promotions.append(promotion)

    async def search_promotions(self, criteria: PromotionSearchCriteria) -> List[Promotion]:
        try:
            now = self._clock()
            promotions = []
            for promotion in self._promotions:
                if criteria.only_active and not promotion.is_available(now):
                    continue
                if criteria.store_id and promotion.store_ids and criteria.store_id not in promotion.store_ids:
                    continue
                if criteria.promotion_ids and promotion.id not in criteria.promotion_ids:
                    continue
                promotions.append(promotion)

            if criteria.take is not None:
                promotions = promotions[:criteria.take]

            logger.info(f"search_promotions_result | store={criteria.store_id} only_active={criteria.only_active} total={len(self._promotions)} hits={len(promotions)}")
            return promotions
        except Exception as e:
            logger.error(f"search_promotions_error | store={criteria.store_id} error={e}", exc_info=True)
            raise
