"""Tests for the prefix arithmetic functions."""

import pytest

import ipnetwork
from ipnetwork import (
    IPV4LENGTH,
    IPV6LENGTH,
    MAX_IPV4,
    MAX_IPV6,
    InvalidMask,
    PrefixLenError,
)


@pytest.mark.parametrize(
    "prefixlen,expected",
    [
        (0, 0),
        (1, 0x80000000),
        (8, 0xFF000000),
        (24, 0xFFFFFF00),
        (31, 0xFFFFFFFE),
        (32, MAX_IPV4),
    ],
)
def test_netmask_ipv4(prefixlen, expected):
    assert ipnetwork.netmask_int(prefixlen, IPV4LENGTH) == expected


def test_netmask_ipv6_bounds():
    assert ipnetwork.netmask_int(0, IPV6LENGTH) == 0
    assert ipnetwork.netmask_int(128, IPV6LENGTH) == MAX_IPV6
    assert ipnetwork.netmask_int(64, IPV6LENGTH) == MAX_IPV6 ^ (2**64 - 1)


def test_hostmask_is_complement_of_netmask():
    for width in (IPV4LENGTH, IPV6LENGTH):
        full = 2**width - 1
        for prefixlen in range(width + 1):
            netmask = ipnetwork.netmask_int(prefixlen, width)
            assert ipnetwork.hostmask_int(prefixlen, width) == netmask ^ full


@pytest.mark.parametrize("prefixlen", [-1, 33, 200])
def test_netmask_bad_prefixlen(prefixlen):
    with pytest.raises(PrefixLenError):
        ipnetwork.netmask_int(prefixlen, IPV4LENGTH)
    with pytest.raises(PrefixLenError):
        ipnetwork.hostmask_int(prefixlen, IPV4LENGTH)


def test_network_and_broadcast_int():
    ip = int(ipnetwork.IPv4Address("192.168.1.77"))
    assert ipnetwork.network_int(ip, 24, IPV4LENGTH) == int(
        ipnetwork.IPv4Address("192.168.1.0")
    )
    assert ipnetwork.broadcast_int(ip, 24, IPV4LENGTH) == int(
        ipnetwork.IPv4Address("192.168.1.255")
    )
    assert ipnetwork.network_int(ip, 0, IPV4LENGTH) == 0
    assert ipnetwork.broadcast_int(ip, 0, IPV4LENGTH) == MAX_IPV4
    assert ipnetwork.network_int(ip, 32, IPV4LENGTH) == ip
    assert ipnetwork.broadcast_int(ip, 32, IPV4LENGTH) == ip


def test_network_int_clears_host_bits():
    ip = int(ipnetwork.IPv6Address("2001:db8:ffff:ffff:ffff:ffff:ffff:ffff"))
    for prefixlen in range(IPV6LENGTH + 1):
        network = ipnetwork.network_int(ip, prefixlen, IPV6LENGTH)
        assert network & ipnetwork.hostmask_int(prefixlen, IPV6LENGTH) == 0
        # a cleared address is always a valid strict network
        ipnetwork.IPv6Network.strict_new(network, prefixlen)


@pytest.mark.parametrize(
    "mask,expected",
    [
        (0, 0),
        (0xFF000000, 8),
        (0xFFFFFF00, 24),
        (0xFFFFFFFE, 31),
        (MAX_IPV4, 32),
    ],
)
def test_prefixlen_from_netmask(mask, expected):
    assert ipnetwork.prefixlen_from_netmask(mask, IPV4LENGTH) == expected


@pytest.mark.parametrize(
    "mask", [0xFF00FF00, 0x00FFFFFF, 0x1, 0xFFFFFFFD, -1, 2**32]
)
def test_prefixlen_from_netmask_invalid(mask):
    with pytest.raises(InvalidMask):
        ipnetwork.prefixlen_from_netmask(mask, IPV4LENGTH)


def test_prefixlen_from_netmask_ipv6():
    mask = int(ipnetwork.IPv6Address("ffff:ffff:ffff:ffff::"))
    assert ipnetwork.prefixlen_from_netmask(mask, IPV6LENGTH) == 64
    with pytest.raises(InvalidMask):
        ipnetwork.prefixlen_from_netmask(
            int(ipnetwork.IPv6Address("ffff::ffff")), IPV6LENGTH
        )
