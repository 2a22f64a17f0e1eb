"""Tests for the IPv4Network and IPv6Network classes."""

import pickle

import pytest

import ipnetwork
from ipnetwork import (
    AddressValueError,
    HostBitsSetError,
    InvalidMask,
    IPv4Address,
    IPv4Network,
    IPv6Address,
    IPv6MulticastScope,
    IPv6Network,
    ParseError,
    PrefixLenError,
)


# =============================================================================
# Construction
# =============================================================================


def test_strict_new_rejects_host_bits():
    with pytest.raises(HostBitsSetError):
        IPv4Network.strict_new(IPv4Address("192.168.1.1"), 24)


def test_truncating_new_masks_host_bits():
    net = IPv4Network.truncating_new(IPv4Address("192.168.1.1"), 24)
    assert str(net) == "192.168.1.0/24"
    assert net.network_address == IPv4Address("192.168.1.0")
    net = IPv4Network.truncating_new(IPv4Address("192.168.1.1"), 16)
    assert str(net) == "192.168.0.0/16"


def test_strict_new_keeps_network_address():
    net = IPv4Network.strict_new(IPv4Address("192.168.1.0"), 24)
    assert net.network_address == IPv4Address("192.168.1.0")
    assert net.prefixlen == 24
    net = IPv6Network.strict_new(int(IPv6Address("2001:db8::")), 32)
    assert str(net) == "2001:db8::/32"


@pytest.mark.parametrize("prefixlen", [-1, 33])
def test_ipv4_prefixlen_out_of_range(prefixlen):
    addr = IPv4Address("0.0.0.0")
    with pytest.raises(PrefixLenError):
        IPv4Network.strict_new(addr, prefixlen)
    with pytest.raises(PrefixLenError):
        IPv4Network.truncating_new(addr, prefixlen)
    with pytest.raises(PrefixLenError):
        IPv4Network.is_host_bits_set(addr, prefixlen)


def test_ipv6_prefixlen_out_of_range():
    with pytest.raises(PrefixLenError):
        IPv6Network.strict_new(IPv6Address("::"), 129)
    # 128 is fine for IPv6
    assert IPv6Network.strict_new(IPv6Address("::1"), 128).prefixlen == 128


@pytest.mark.parametrize(
    "cls,address,prefixlen",
    [
        (IPv4Network, "192.168.1.1", 24),
        (IPv4Network, "192.168.1.0", 24),
        (IPv4Network, "10.0.0.1", 31),
        (IPv4Network, "10.0.0.1", 32),
        (IPv4Network, "255.255.255.255", 0),
        (IPv6Network, "2001:db8::1", 64),
        (IPv6Network, "2001:db8::", 64),
        (IPv6Network, "::1", 127),
        (IPv6Network, "::1", 128),
    ],
)
def test_host_bits_set_matches_strict(cls, address, prefixlen):
    addr = cls._address_class(address)
    truncated = cls.truncating_new(addr, prefixlen)
    if cls.is_host_bits_set(addr, prefixlen):
        assert truncated.network_address != addr
        with pytest.raises(HostBitsSetError):
            cls.strict_new(addr, prefixlen)
    else:
        assert truncated.network_address == addr
        assert cls.strict_new(addr, prefixlen) == truncated


def test_constructor_forms():
    expected = IPv4Network("10.1.0.0/16")
    assert IPv4Network(("10.1.0.0", 16)) == expected
    assert IPv4Network((IPv4Address("10.1.0.0"), 16)) == expected
    assert IPv4Network((0x0A010000, "16")) == expected
    assert IPv4Network(("10.1.0.0", "255.255.0.0")) == expected
    assert IPv4Network("10.1.0.0/255.255.0.0") == expected
    assert IPv4Network("10.1.2.3/16", strict=False) == expected
    assert IPv4Network(expected) == expected
    assert IPv4Network(IPv4Address("10.1.2.3")) == IPv4Network("10.1.2.3/32")
    assert IPv4Network(0x0A010203).prefixlen == 32
    assert IPv6Network(IPv6Address("::1")) == IPv6Network("::1/128")


@pytest.mark.parametrize(
    "value",
    [(1, 2, 3), (IPv6Address("::"), 0), 2**32, 1.0, ("10.0.0.0", 8.0)],
)
def test_constructor_bad_values(value):
    with pytest.raises((AddressValueError, PrefixLenError)):
        IPv4Network(value)


# =============================================================================
# Parsing and formatting
# =============================================================================


@pytest.mark.parametrize(
    "txt",
    [
        "10.0.0.0/8",
        "0.0.0.0/0",
        "192.168.0.0/30",
        "255.255.255.255/32",
        "2001:db8::/32",
        "::/0",
        "::1/128",
        "fe80::/10",
        "2001:db8:0:1::/64",
        "1:0:0:2::/64",
    ],
)
def test_parse_format_round_trip(txt):
    net = ipnetwork.ip_network(txt)
    assert str(net) == txt
    assert str(ipnetwork.ip_network(str(net))) == txt
    assert net.with_prefixlen == txt


def test_parse_ipv4():
    net = IPv4Network("10.0.0.0/8")
    assert net.network_address == IPv4Address("10.0.0.0")
    assert net.prefixlen == 8
    assert str(net) == "10.0.0.0/8"
    assert repr(net) == "IPv4Network('10.0.0.0/8')"


def test_parse_ipv6_canonicalises():
    net = IPv6Network("2001:0DB8:0000::/32")
    assert str(net) == "2001:db8::/32"
    assert net.exploded == "2001:0db8:0000:0000:0000:0000:0000:0000/32"


@pytest.mark.parametrize(
    "txt",
    [
        "10.0.0.0",
        "10.0.0.0/",
        "/8",
        "/",
        "10.0.0.0/8/8",
        "10.0.0.0//8",
        "10.0.0.0/08",
        "10.0.0.0/00",
        "10.0.0.0/33",
        "10.0.0.0/-1",
        "10.0.0.0/+8",
        "10.0.0.0/ 8",
        "10.0.0.0/8 ",
        "10.0.0.0/٨",
        "10.0.0/8",
        "10.0.0.256/8",
        "10.0.0.0/1.2.3",
    ],
)
def test_parse_ipv4_errors(txt):
    with pytest.raises(ParseError):
        IPv4Network(txt)


@pytest.mark.parametrize(
    "txt",
    ["2001:db8::", "2001:db8::/129", "2001:db8::/032", "2001::db8::/32",
     "2001:db8::/", "2001:db8::/32/32", "2001:db8::%1/32"],
)
def test_parse_ipv6_errors(txt):
    with pytest.raises(ParseError):
        IPv6Network(txt)


def test_parse_host_bits_set():
    with pytest.raises(HostBitsSetError):
        IPv4Network("192.168.1.1/24")
    with pytest.raises(HostBitsSetError):
        IPv6Network("2001:db8::1/64")


def test_parse_non_contiguous_netmask():
    with pytest.raises(InvalidMask):
        IPv4Network("10.0.0.0/255.0.255.0")


def test_from_string_and_to_string():
    assert IPv4Network.from_string("1.2.3.0/24") == (0x01020300, 24)
    assert IPv6Network.from_string("::/0") == (0, 0)
    assert IPv4Network.to_string(0x01020300, 24) == "1.2.3.0/24"
    with pytest.raises(PrefixLenError):
        IPv4Network.to_string(0, 33)
    with pytest.raises(AddressValueError):
        IPv6Network.to_string(-1, 0)


# =============================================================================
# Accessors
# =============================================================================


def test_ipv4_accessors(ipv4_network):
    assert ipv4_network.network_address == IPv4Address("1.2.3.0")
    assert ipv4_network.broadcast_address == IPv4Address("1.2.3.255")
    assert ipv4_network.netmask == IPv4Address("255.255.255.0")
    assert ipv4_network.hostmask == IPv4Address("0.0.0.255")
    assert ipv4_network.num_addresses == 256
    assert ipv4_network.max_prefixlen == 32
    assert ipv4_network.version == 4
    assert ipv4_network.with_netmask == "1.2.3.0/255.255.255.0"
    assert ipv4_network.with_hostmask == "1.2.3.0/0.0.0.255"


def test_ipv6_accessors(ipv6_network):
    assert ipv6_network.network_address == IPv6Address("2001:658:22a:cafe::")
    assert ipv6_network.broadcast_address == IPv6Address(
        "2001:658:22a:cafe:ffff:ffff:ffff:ffff"
    )
    assert ipv6_network.netmask == IPv6Address("ffff:ffff:ffff:ffff::")
    assert ipv6_network.hostmask == IPv6Address("::ffff:ffff:ffff:ffff")
    assert ipv6_network.num_addresses == 2**64
    assert ipv6_network.version == 6


def test_whole_address_space():
    net = IPv6Network("::/0")
    assert net.num_addresses == 2**128
    assert net.broadcast_address == IPv6Address(ipnetwork.MAX_IPV6)
    assert net.netmask == IPv6Address("::")
    assert IPv4Network("0.0.0.0/0").broadcast_address == IPv4Address(
        "255.255.255.255"
    )


def test_getitem(ipv4_network):
    assert ipv4_network[0] == IPv4Address("1.2.3.0")
    assert ipv4_network[5] == IPv4Address("1.2.3.5")
    assert ipv4_network[-1] == IPv4Address("1.2.3.255")
    with pytest.raises(IndexError):
        ipv4_network[256]
    with pytest.raises(IndexError):
        ipv4_network[-257]
    with pytest.raises(TypeError):
        ipv4_network["1"]
    assert IPv6Network("::/0")[-1] == IPv6Address(ipnetwork.MAX_IPV6)


# =============================================================================
# Containment, ordering and equality
# =============================================================================


def test_contains_networks():
    net = IPv4Network("10.0.0.0/8")
    assert net.contains(IPv4Network("10.0.0.0/8"))
    assert net.contains(IPv4Network("10.20.0.0/16"))
    assert net.contains(IPv4Network("10.255.255.255/32"))
    assert not net.contains(IPv4Network("0.0.0.0/0"))
    assert not net.contains(IPv4Network("11.0.0.0/16"))
    assert not net.contains(IPv4Network("8.0.0.0/6"))
    assert IPv4Network("10.20.0.0/16") in net
    assert IPv4Network("0.0.0.0/0").contains(net)


def test_contains_addresses(ipv6_network):
    assert IPv6Address("2001:658:22a:cafe::1") in ipv6_network
    assert IPv6Address("2001:658:22a:caff::") not in ipv6_network
    assert IPv4Address("1.2.3.4") not in ipv6_network
    assert not ipv6_network.contains("2001:658:22a:cafe::1")


def test_contains_other_family():
    assert not IPv4Network("0.0.0.0/0").contains(IPv6Network("::/128"))
    assert IPv6Network("::/128") not in IPv4Network("0.0.0.0/0")


def test_overlaps_and_subnet_of():
    a = IPv4Network("10.0.0.0/8")
    b = IPv4Network("10.1.0.0/16")
    c = IPv4Network("11.0.0.0/8")
    assert a.overlaps(b) and b.overlaps(a)
    assert not a.overlaps(c)
    assert b.subnet_of(a) and not a.subnet_of(b)
    assert a.supernet_of(b) and not b.supernet_of(a)
    with pytest.raises(TypeError):
        a.overlaps(IPv6Network("::/0"))


def test_ordering_is_address_then_prefixlen():
    nets = [
        IPv4Network("10.0.0.0/16"),
        IPv4Network("9.0.0.0/8"),
        IPv4Network("10.0.0.0/8"),
        IPv4Network("10.0.0.0/24"),
    ]
    assert sorted(nets) == [
        IPv4Network("9.0.0.0/8"),
        IPv4Network("10.0.0.0/8"),
        IPv4Network("10.0.0.0/16"),
        IPv4Network("10.0.0.0/24"),
    ]
    assert IPv4Network("10.0.0.0/8") < IPv4Network("10.0.0.0/9")
    assert IPv4Network("10.0.0.0/30") < IPv4Network("10.0.0.4/30")
    assert IPv4Network("10.0.0.0/8") <= IPv4Network("10.0.0.0/8")
    assert IPv4Network("10.0.0.4/30") >= IPv4Network("10.0.0.0/8")
    with pytest.raises(TypeError):
        IPv4Network("10.0.0.0/8") < IPv6Network("::/0")


def test_equality_and_hash():
    a = IPv4Network("10.0.0.0/8")
    assert a == IPv4Network(("10.0.0.0", 8))
    assert a != IPv4Network("10.0.0.0/9")
    assert a != IPv6Network("::a00:0/104")
    assert len({a, IPv4Network("10.0.0.0/8"), IPv4Network("10.0.0.0/9")}) == 2


def test_pickle(ipv4_network, ipv6_network):
    for net in (ipv4_network, ipv6_network):
        assert pickle.loads(pickle.dumps(net)) == net


# =============================================================================
# Supernets
# =============================================================================


def test_supernet():
    net = IPv4Network("192.168.1.0/24")
    assert net.supernet() == IPv4Network("192.168.0.0/23")
    assert net.supernet(3) == IPv4Network("192.168.0.0/21")
    assert net.supernet(new_prefix=16) == IPv4Network("192.168.0.0/16")
    assert IPv4Network("0.0.0.0/0").supernet() is None
    assert IPv6Network("2001:db8::/32").supernet() == IPv6Network("2001:db8::/31")
    with pytest.raises(PrefixLenError):
        net.supernet(new_prefix=25)
    with pytest.raises(PrefixLenError):
        net.supernet(25)


def test_supernetwork():
    net = IPv4Network("192.168.1.0/24")
    assert net.supernetwork(0) == net
    assert net.supernetwork(preflen=0) == IPv4Network("0.0.0.0/0")
    with pytest.raises(ValueError):
        net.supernetwork()
    with pytest.raises(ValueError):
        net.supernetwork(1, 23)


# =============================================================================
# Network predicates
# =============================================================================


def test_ipv4_network_predicates():
    assert IPv4Network("127.0.0.0/16").is_loopback
    assert not IPv4Network("126.0.0.0/7").is_loopback
    assert IPv4Network("10.0.0.0/8").is_private
    assert not IPv4Network("10.0.0.0/7").is_private
    assert IPv4Network("224.0.0.0/24").is_multicast
    assert IPv4Network("169.254.1.0/24").is_link_local
    assert IPv4Network("198.51.100.0/25").is_documentation
    assert IPv4Network("198.18.0.0/15").is_benchmarking
    assert IPv4Network("255.255.255.255/32").is_broadcast
    assert not IPv4Network("255.255.255.254/31").is_broadcast
    assert IPv4Network("100.64.0.0/12").is_shared
    assert IPv4Network("0.0.0.0/32").is_unspecified
    assert not IPv4Network("0.0.0.0/31").is_unspecified
    assert IPv4Network("8.8.8.0/24").is_global
    assert not IPv4Network("10.0.0.0/16").is_global


def test_ipv6_network_predicates():
    assert IPv6Network("::/128").is_unspecified
    assert not IPv6Network("::/127").is_unspecified
    assert IPv6Network("::1/128").is_loopback
    assert IPv6Network("ff00::/8").is_multicast
    assert not IPv6Network("fe00::/7").is_multicast
    assert IPv6Network("fd00::/8").is_unique_local
    assert IPv6Network("fd00::/8").is_private
    assert IPv6Network("fe80::/64").is_link_local
    assert IPv6Network("fec0::/10").is_site_local
    assert IPv6Network("2001:db8:1::/48").is_documentation
    assert not IPv6Network("2001:db8::/31").is_documentation
    assert IPv6Network("2001:2::/48").is_benchmarking
    assert IPv6Network("ff0e::/32").multicast_scope is IPv6MulticastScope.GLOBAL
    assert IPv6Network("ff0e::/32").is_global
    assert not IPv6Network("ff02::/16").is_global
    assert IPv6Network("::ffff:0:0/96").multicast_scope is None
    assert IPv6Network("2a00::/16").is_global
    assert not IPv6Network("2001:db8::/32").is_global


@pytest.mark.parametrize(
    "prefixlen,expected",
    [(8, False), ("8", False), ("255.0.0.0", False), (4, True), ("4", True)],
)
def test_host_bits_set_accepts_constructor_prefixes(prefixlen, expected):
    addr = IPv4Address("10.0.0.0")
    assert IPv4Network.is_host_bits_set(addr, prefixlen) is expected
    if expected:
        with pytest.raises(HostBitsSetError):
            IPv4Network.strict_new(addr, prefixlen)
    else:
        assert IPv4Network.strict_new(addr, prefixlen).prefixlen == 8


@pytest.mark.parametrize("prefixlen", [8.0, True, False, [8], b"8", 33, -1])
def test_bad_prefix_types_rejected_alike(prefixlen):
    addr = IPv4Address("10.0.0.0")
    with pytest.raises(PrefixLenError):
        IPv4Network.strict_new(addr, prefixlen)
    with pytest.raises(PrefixLenError):
        IPv4Network.truncating_new(addr, prefixlen)
    with pytest.raises(PrefixLenError):
        IPv4Network.is_host_bits_set(addr, prefixlen)


def test_supernet_of_whole_space_with_new_prefix():
    whole = IPv4Network("0.0.0.0/0")
    assert whole.supernet() is None
    assert whole.supernet(new_prefix=0) == whole
    assert whole.supernet(new_prefix=0) == whole.supernetwork(preflen=0)
    with pytest.raises(PrefixLenError):
        whole.supernet(new_prefix=1)
    assert IPv6Network("::/0").supernet(new_prefix=0) == IPv6Network("::/0")
