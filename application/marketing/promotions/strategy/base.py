from abc import ABC, abstractmethod
from decimal import Decimal

from marketing.promotions.rewards import DEFAULT_PRECISION


class BaseRewardStrategy(ABC):
    def __init__(self, precision: Decimal = DEFAULT_PRECISION):
        self.precision = precision

    @abstractmethod
    def apply(self, reward, context) -> bool:
        """Apply ``reward`` to ``context`` in place; return whether it took effect."""
        pass
