import pytest

from tenancy_client.core.request import RequestPlan


def test_plan_from_relative_url():
    plan = RequestPlan.from_url("/v2/spaces/s1/developers?order-direction=asc&page=2")
    assert plan.path == "/v2/spaces/s1/developers"
    assert plan.query == (("order-direction", "asc"), ("page", "2"))


def test_plan_from_absolute_url_keeps_path_and_query_only():
    plan = RequestPlan.from_url("https://api.example.com:8443/v2/users?page=3#fragment")
    assert plan == RequestPlan("/v2/users", (("page", "3"),))


def test_plan_from_url_keeps_order_repeated_keys_and_blanks():
    plan = RequestPlan.from_url("/v2/users?z=1&q=name:a&q=name:b&cursor=")
    assert plan.query == (("z", "1"), ("q", "name:a"), ("q", "name:b"), ("cursor", ""))


def test_plan_from_url_without_query():
    plan = RequestPlan.from_url("/v2/users")
    assert plan.query == ()
    assert plan.url() == "/v2/users"


def test_plan_from_url_without_path():
    with pytest.raises(ValueError):
        RequestPlan.from_url("?page=2")


@pytest.mark.parametrize(
    "query,expected",
    [
        (None, ()),
        ({"recursive": "true"}, (("recursive", "true"),)),
        ([("page", 2), ("page", 3)], (("page", "2"), ("page", "3"))),
    ],
)
def test_plan_build(query, expected):
    assert RequestPlan.build("/v2/organizations", query).query == expected


def test_plan_url():
    plan = RequestPlan.build("/v2/users", [("page", "2"), ("results-per-page", "50")])
    assert plan.url() == "/v2/users?page=2&results-per-page=50"


def test_plan_is_immutable():
    plan = RequestPlan("/v2/users")
    with pytest.raises(AttributeError):
        plan.path = "/v2/spaces"
