"""
Domain logic module for member queries.

This package contains the query interface and its in-memory
implementation, independent of where the member data comes from.
"""

from got_members.domain.member_dao import MemberDAO
from got_members.domain.member_query_service import MemberQueryService

__all__ = ["MemberDAO", "MemberQueryService"]
