import pytest

from aprioriminer.AprioriMiner import mine


@pytest.fixture
def basket_transactions():
    return [['a', 'b', 'c'], ['a', 'b'], ['a', 'c'], ['a', 'd'], ['b', 'c']]


@pytest.fixture
def basket_data(basket_transactions):
    return mine(basket_transactions, 0.4)


@pytest.fixture
def triple_data():
    # {a, b, c} is frequent at 0.5
    return mine([['a', 'b', 'c'], ['a', 'b', 'c'], ['a', 'b'], ['a']], 0.5)
