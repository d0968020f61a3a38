import pytest

from auth_adapter.db.resolver import LookupStrategy, UserCriteria, select_strategy


@pytest.mark.parametrize(
    "criteria,expected",
    [
        (UserCriteria(id="u1"), LookupStrategy.BY_ID),
        (UserCriteria(email="a@x.com"), LookupStrategy.BY_EMAIL),
        (UserCriteria(provider="google", provider_account_id="42"), LookupStrategy.BY_ACCOUNT),
        (UserCriteria(provider_account_id="42"), LookupStrategy.BY_PROVIDER_ACCOUNT_ID),
        (UserCriteria(provider="google"), LookupStrategy.BY_PROVIDER),
        (UserCriteria(), LookupStrategy.ALL),
    ],
)
def test_single_criterion_selects_its_strategy(criteria, expected):
    assert select_strategy(criteria) is expected


def test_id_wins_over_every_other_criterion():
    criteria = UserCriteria(id="u1", email="a@x.com", provider="google", provider_account_id="42")
    assert select_strategy(criteria) is LookupStrategy.BY_ID


def test_email_wins_over_account_criteria():
    criteria = UserCriteria(email="a@x.com", provider="google", provider_account_id="42")
    assert select_strategy(criteria) is LookupStrategy.BY_EMAIL


def test_blank_values_count_as_absent():
    assert select_strategy(UserCriteria(id="", email="  ")) is LookupStrategy.ALL
    assert select_strategy(UserCriteria(id=" ", provider="github")) is LookupStrategy.BY_PROVIDER
