# tests/conftest.py
from datetime import date

import pytest

from got_members.data.member_db import create_member_db
from got_members.data.models import House, Member, Title
from got_members.domain.member_query_service import MemberQueryService


@pytest.fixture
def member_db():
    """Create a repository over the canonical members"""
    return create_member_db()


@pytest.fixture
def service(member_db):
    """Create a MemberQueryService over the canonical members"""
    return MemberQueryService(member_db)


@pytest.fixture
def small_members():
    """Three members with salaries 10, 20 and 30"""
    return [
        Member(1, "Ann", House.STARK, Title.LADY, date(1990, 1, 1), 10.0),
        Member(2, "Bob", House.STARK, Title.KING, date(1980, 6, 1), 20.0),
        Member(3, "Cat", House.TULLY, Title.QUEEN, date(1985, 3, 1), 30.0),
    ]


@pytest.fixture
def small_service(small_members):
    """Create a MemberQueryService over the three small members"""
    return MemberQueryService.from_members(small_members)


@pytest.fixture
def empty_service():
    """Create a MemberQueryService over no members at all"""
    return MemberQueryService.from_members([])
