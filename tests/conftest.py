import pytest


class FixedAgeRegistry:
    """Domain-age provider with a fixed answer and no technical details."""

    def __init__(self, age):
        self.age = age
        self.hosts = []

    def domain_age(self, host):
        self.hosts.append(host)
        return self.age


@pytest.fixture
def fixed_age():
    return FixedAgeRegistry


@pytest.fixture
def established():
    return FixedAgeRegistry(400)


@pytest.fixture
def young():
    return FixedAgeRegistry(10)
