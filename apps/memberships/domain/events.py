"""
Membership Domain Events

Published after the surrounding transaction commits.
"""

from dataclasses import dataclass
from datetime import datetime

from shared.domain.base import DomainEvent


@dataclass
class MembershipCreated(DomainEvent):
    membership_id: int
    user_id: int
    membership_type: str
    amenity_tier: str
    starts_at: datetime
    ends_at: datetime


@dataclass
class MembershipExtended(DomainEvent):
    """ends_at pushed forward by one increment."""
    membership_id: int
    user_id: int
    old_ends_at: datetime
    new_ends_at: datetime
