"""
Data layer: record models and the data sources that serve them.
"""

from got_members.data.base_repository import BaseRepository
from got_members.data.member_db import create_member_db, default_members
from got_members.data.memory_repository import InMemoryRepository
from got_members.data.models import ROYAL_TITLES, House, Member, SalaryStatistics, Title

__all__ = [
    "BaseRepository",
    "InMemoryRepository",
    "House",
    "Member",
    "ROYAL_TITLES",
    "SalaryStatistics",
    "Title",
    "create_member_db",
    "default_members",
]
