import asyncio
import os
import tempfile

# keep test log files out of the working tree; settings are read at import time
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="marketing-logs-"))

import pytest

from marketing.dto.promotions import EvaluationContext, PromoEntry
from marketing.promotions.models import Promotion
from marketing.promotions.policy import CombineStackablePromotionPolicy
from marketing.promotions.rewards import CartSubtotalReward, CatalogItemReward, GiftReward, ShipmentReward
from marketing.repository.promotions import InMemoryPromotionsRepository


def build_catalog():
    return [
        Promotion(
            id="FedEx Get 50% Off",
            rewards=[ShipmentReward(shipping_method="FedEx", amount=50, amount_kind="relative", is_valid=True)],
            priority=1,
        ),
        Promotion(
            id="FedEx Get 30% Off",
            rewards=[ShipmentReward(shipping_method="FedEx", amount=30, amount_kind="relative", is_valid=True)],
            priority=2,
        ),
        Promotion(
            id="Exclusive ProductB Get 10$ Off",
            rewards=[CatalogItemReward(product_id="ProductB", amount=10, amount_kind="absolute", is_valid=True)],
            priority=10,
            is_exclusive=True,
        ),
        Promotion(
            id="Get ProductA Free",
            rewards=[CatalogItemReward(product_id="ProductA", amount=100, amount_kind="relative", is_valid=True)],
            priority=100,
        ),
        Promotion(
            id="Get ProductA With 25$ Off",
            rewards=[CatalogItemReward(product_id="ProductA", amount=25, amount_kind="absolute", is_valid=True)],
            priority=80,
        ),
        Promotion(
            id="ProductA and ProductB Get 2 With 50% Off",
            rewards=[
                CatalogItemReward(product_id="ProductA", amount=50, quantity=2, amount_kind="relative", is_valid=True),
                CatalogItemReward(product_id="ProductB", amount=50, quantity=2, amount_kind="relative", is_valid=True),
            ],
            priority=15,
        ),
        Promotion(
            id="Buy Order with 55% Off",
            rewards=[CartSubtotalReward(amount=55, is_valid=True)],
            priority=20,
        ),
        Promotion(
            id="Get Gift",
            rewards=[GiftReward(product_id="ProductA", is_valid=True)],
            priority=0,
        ),
    ]


@pytest.fixture
def catalog():
    return build_catalog()


@pytest.fixture
def pick(catalog):
    """Promotions of the catalog with the given ids, in catalog order."""
    def _pick(*ids):
        return [promotion for promotion in catalog if promotion.id in ids]
    return _pick


@pytest.fixture
def policy_for():
    def _policy_for(promotions, **kwargs):
        return CombineStackablePromotionPolicy(InMemoryPromotionsRepository(promotions), **kwargs)
    return _policy_for


@pytest.fixture
def evaluate():
    def _evaluate(policy, context):
        return asyncio.run(policy.evaluate_promotion(context))
    return _evaluate


@pytest.fixture
def cart():
    def _cart(*entries, shipment_method_code=None, shipment_method_price=None):
        return EvaluationContext(
            promo_entries=[PromoEntry(product_id=product_id, price=price, quantity=quantity) for product_id, price, quantity in entries],
            shipment_method_code=shipment_method_code,
            shipment_method_price=shipment_method_price,
        )
    return _cart
