"""Pytest configuration and fixtures for Mustang tests."""

import pytest

from mustang import DEFAULT_CONFIG, AccessorCache, Resolver

from .models import Article, Book, Person


@pytest.fixture
def resolver():
    """Create a Resolver with the default configuration."""
    return Resolver(DEFAULT_CONFIG)


@pytest.fixture
def cache(resolver):
    """Create an empty AccessorCache over the default resolver."""
    return AccessorCache(resolver)


@pytest.fixture
def article():
    return Article(title="Hello", body="A long article body", tags=["a", "b"])


@pytest.fixture
def book():
    return Book("Dune")


@pytest.fixture
def person():
    return Person("Upper", "lower")
