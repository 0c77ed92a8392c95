"""Общие фикстуры: документы с долями."""

import pytest


@pytest.fixture
def linear_document():
    """Четыре доли на f(x) = 4x + 6 в разных основаниях, k = 3."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "16", "value": "a"},
        "2": {"base": "8", "value": "16"},
        "3": {"base": "16", "value": "12"},
        "4": {"base": "10", "value": "22"},
    }


@pytest.fixture
def quadratic_document():
    """f(x) = x^2 + 3, k = 3; доля x = 6 не войдёт в выборку."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }


@pytest.fixture
def fractional_document():
    """Прямая через (1, 1) и (3, 2): f(0) = 1/2."""
    return {
        "keys": {"n": 2, "k": 2},
        "1": {"base": 10, "value": "1"},
        "3": {"base": 10, "value": "2"},
    }
