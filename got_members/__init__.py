"""
Read-only queries, groupings and salary statistics over the members of
the noble houses.
"""

from got_members.data import House, Member, SalaryStatistics, Title, create_member_db
from got_members.domain import MemberDAO, MemberQueryService

__version__ = "0.1.0"

__all__ = [
    "House",
    "Member",
    "MemberDAO",
    "MemberQueryService",
    "SalaryStatistics",
    "Title",
    "create_member_db",
]
