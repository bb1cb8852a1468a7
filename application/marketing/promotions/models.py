from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, Field

from marketing.core.constants import PromotionKind
from marketing.promotions.rewards import Reward
from marketing.promotions.events import PROMOTION_EVALUATORS, UnknownPromotionKindError


class RewardExpression(BaseModel):
    """Leaf of a reward tree holding a single configured reward"""
    node_type: Literal["reward"] = "reward"
    reward: Reward

    def get_rewards(self) -> List[Reward]:
        return [self.reward]


class RewardBlock(BaseModel):
    """Node of a reward tree; gathers the rewards of all its children in order"""
    node_type: Literal["block"] = "block"
    children: List[RewardNode] = Field(default_factory=list)

    def get_rewards(self) -> List[Reward]:
        rewards = []
        for child in self.children:
            rewards.extend(child.get_rewards())
        return rewards


RewardNode = Annotated[Union[RewardBlock, RewardExpression], Field(discriminator="node_type")]
RewardBlock.model_rebuild()


class Promotion(BaseModel):
    id: str = Field(..., min_length=1)
    name: Optional[str] = None
    description: Optional[str] = None
    kind: Literal["static", "reward_tree"] = PromotionKind.STATIC
    priority: int = Field(0, description="Precedence; see PriorityOrder for the direction")
    is_exclusive: bool = Field(False, description="Suppresses every stackable promotion when matched")

    # Availability, read by promotion sources only
    is_active: bool = True
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    store_ids: List[str] = Field(default_factory=list)

    # Variant payloads
    rewards: List[Reward] = Field(default_factory=list, description="Rewards of a static promotion")
    reward_block: Optional[RewardBlock] = Field(None, description="Reward tree of a reward_tree promotion")

    def evaluate(self, context) -> List[Reward]:
        """Rewards this promotion grants for ``context``, tagged with its id."""
        evaluator = PROMOTION_EVALUATORS.get(self.kind)
        if evaluator is None:
            raise UnknownPromotionKindError(f"No evaluator registered for promotion kind: {self.kind}")
        return evaluator(self, context)

    def is_available(self, now: datetime) -> bool:
        if not self.is_active:
            return False
        now = _as_utc(now)
        if self.start_date is not None and _as_utc(self.start_date) > now:
            return False
        if self.end_date is not None and _as_utc(self.end_date) < now:
            return False
        return True


def _as_utc(value: datetime) -> datetime:
    # naive datetimes are read as UTC
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value
