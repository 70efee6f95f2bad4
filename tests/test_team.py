import pytest

from crobf.consts import TEAM_MEMBERS, TeamMember
from crobf.utils import team


def make_member(**overrides):
    fields = {
        "full_name": "Someone",
        "email": "someone@example.com",
        "github": "https://github.com/someone",
        "link": "/founders/someone",
    }
    fields.update(overrides)
    return TeamMember(**fields)


def test_get_team_member_returns_record():
    member = team.get_team_member("Ezequiel")

    assert member.full_name == "Casiano Ezequiel"
    assert member is TEAM_MEMBERS["Ezequiel"]


def test_get_team_member_unknown_key():
    with pytest.raises(team.TeamMemberNotFound):
        team.get_team_member("Nadie")


def test_not_found_is_a_key_error():
    with pytest.raises(KeyError):
        team.get_team_member("juan")


def test_find_by_link():
    assert team.find_by_link("/founders/valentina_osorio") is TEAM_MEMBERS["Valentina"]
    assert team.find_by_link("/founders/valentina_osorio/") is TEAM_MEMBERS["Valentina"]
    assert team.find_by_link("/founders/unknown") is None


def test_list_team_members_keeps_order():
    pairs = team.list_team_members()

    assert [key for key, _ in pairs] == list(TEAM_MEMBERS)
    assert pairs[-1][1].full_name == "Rodriguez Magali"


def test_shipped_table_is_valid():
    assert team.validate_team_members() == len(TEAM_MEMBERS)


@pytest.mark.parametrize("field", ["full_name", "email", "link"])
def test_validate_rejects_empty_required_field(field):
    with pytest.raises(team.InvalidTeamMember) as exc_info:
        team.validate_team_members({"Someone": make_member(**{field: ""})})

    assert exc_info.value.key == "Someone"
    assert exc_info.value.field == field


def test_validate_rejects_none_for_absent_value():
    with pytest.raises(team.InvalidTeamMember) as exc_info:
        team.validate_team_members({"Someone": make_member(linkedin=None)})

    assert exc_info.value.field == "linkedin"


def test_validate_rejects_link_outside_founders():
    with pytest.raises(team.InvalidTeamMember, match="link"):
        team.validate_team_members({"Someone": make_member(link="founders/someone")})


def test_validate_rejects_relative_profile_url():
    with pytest.raises(team.InvalidTeamMember) as exc_info:
        team.validate_team_members({"Someone": make_member(github="github.com/someone")})

    assert exc_info.value.field == "github"
    assert isinstance(exc_info.value, ValueError)


def test_validate_rejects_duplicate_links():
    members = {
        "One": make_member(),
        "Two": make_member(full_name="Other", link="/founders/someone/"),
    }

    with pytest.raises(team.InvalidTeamMember, match="already used by 'One'"):
        team.validate_team_members(members)


def test_validate_accepts_empty_optional_values():
    members = {"Someone": make_member(logo="", linkedin="")}

    assert team.validate_team_members(members) == 1


@pytest.mark.parametrize("field", ["full_name", "email", "github", "link", "logo", "linkedin"])
def test_validate_rejects_non_string_field(field):
    with pytest.raises(team.InvalidTeamMember) as exc_info:
        team.validate_team_members({"Someone": make_member(**{field: 5})})

    assert exc_info.value.key == "Someone"
    assert exc_info.value.field == field


def test_validate_rejects_bare_founders_link():
    with pytest.raises(team.InvalidTeamMember) as exc_info:
        team.validate_team_members({"Someone": make_member(link="/founders/")})

    assert exc_info.value.field == "link"


@pytest.mark.parametrize("key", ["", 7])
def test_validate_rejects_bad_key(key):
    with pytest.raises(team.InvalidTeamMember) as exc_info:
        team.validate_team_members({key: make_member()})

    assert exc_info.value.field == "key"
