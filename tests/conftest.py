import pytest

import ipnetwork


@pytest.fixture
def ipv4_address():
    return ipnetwork.IPv4Address("1.2.3.4")


@pytest.fixture
def ipv6_address():
    return ipnetwork.IPv6Address("2001:658:22a:cafe:200::1")


@pytest.fixture
def ipv4_network():
    return ipnetwork.IPv4Network("1.2.3.0/24")


@pytest.fixture
def ipv6_network():
    return ipnetwork.IPv6Network("2001:658:22a:cafe::/64")
