"""
Cantina Domain Events

Published after the surrounding transaction commits.
"""

from dataclasses import dataclass
from datetime import datetime

from shared.domain.base import DomainEvent


@dataclass
class CantinaSubscriptionCreated(DomainEvent):
    subscription_id: int
    user_id: int
    plan_type: str


@dataclass
class CantinaMealUsed(DomainEvent):
    subscription_id: int
    user_id: int
    meals_remaining: int


@dataclass
class CantinaSubscriptionRenewed(DomainEvent):
    subscription_id: int
    user_id: int
    renews_at: datetime


@dataclass
class CantinaSubscriptionUpgraded(DomainEvent):
    subscription_id: int
    user_id: int
    old_plan_type: str
    new_plan_type: str
