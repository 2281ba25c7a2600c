# tests/test_models.py
import dataclasses
import math
from datetime import date

import pytest

from got_members.data.models import ROYAL_TITLES, House, Member, SalaryStatistics, Title
from got_members.utils.error_handling import InvalidArgumentError


@pytest.fixture
def tywin():
    """Create a sample member"""
    return Member(10, "Tywin", House.LANNISTER, Title.LORD, date(1946, 10, 10), 200000.0)


def test_house_ordinal_follows_declaration_order():
    """Test that ordinals match declaration order"""
    assert [house.ordinal for house in House] == list(range(len(House)))
    assert House.ARRYN.ordinal < House.LANNISTER.ordinal < House.TYRELL.ordinal


def test_house_from_string():
    """Test converting strings to houses"""
    assert House.from_string("STARK") is House.STARK
    assert House.from_string("Targaryen") is House.TARGARYEN

    with pytest.raises(InvalidArgumentError) as exc_info:
        House.from_string("Hightower")

    assert "STARK" in exc_info.value.details["allowed"]


def test_title_royalty():
    """Test that only kings and queens are royalty"""
    assert ROYAL_TITLES == {Title.KING, Title.QUEEN}
    assert [title for title in Title if title.is_royalty] == [Title.KING, Title.QUEEN]
    assert Title.from_string("Prince") is Title.PRINCE


def test_member_is_immutable(tywin):
    """Test that members cannot be modified"""
    with pytest.raises(dataclasses.FrozenInstanceError):
        tywin.salary = 0.0


def test_member_to_dict(tywin):
    """Test converting a member to a dictionary"""
    assert tywin.to_dict() == {
        "id": 10,
        "name": "Tywin",
        "house": "LANNISTER",
        "title": "LORD",
        "dob": "1946-10-10",
        "salary": 200000.0
    }


def test_member_from_dict(tywin):
    """Test creating a member from a dictionary"""
    data = {
        "id": "10",
        "name": "Tywin",
        "house": "Lannister",
        "title": Title.LORD,
        "dob": "1946-10-10",
        "salary": 200000
    }

    assert Member.from_dict(data) == tywin
    assert Member.from_dict(tywin.to_dict()) == tywin


def test_salary_statistics_of():
    """Test summarizing salaries"""
    stats = SalaryStatistics.of([10.0, 20.0, 30.0])

    assert stats.count == 3
    assert stats.sum == 60.0
    assert stats.min == 10.0
    assert stats.max == 30.0
    assert stats.average == pytest.approx(20.0)


def test_salary_statistics_empty():
    """Test the empty-set sentinel"""
    stats = SalaryStatistics.of([])

    assert stats == SalaryStatistics()
    assert stats.to_dict() == {
        "count": 0,
        "sum": 0.0,
        "min": math.inf,
        "max": -math.inf,
        "average": 0.0
    }
