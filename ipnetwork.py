"""A lightweight IPv4/IPv6 network prefix library in Python.

This module is used to create, inspect and iterate over IPv4 and IPv6
addresses and networks (CIDR blocks).  Addresses and networks are
immutable value types, holding the address as an integer; networks also
hold a prefix length, and always store the network address, with all
host bits zero.
"""

import enum
import logging

# =============================================================================
# Module specific constants
# =============================================================================

__version__ = '0.1.0'

# IP version numbers
IPV4 = 4
IPV6 = 6

# IP address length, in bits
IPV4LENGTH = 32
IPV6LENGTH = 128

# Max IP address integer
MAX_IPV4 = 2**IPV4LENGTH - 1
MAX_IPV6 = 2**IPV6LENGTH - 1

# Address family tags used by the PostgreSQL binary cidr format
CIDR_WIRE_IPV4 = 2
CIDR_WIRE_IPV6 = 3

_log = logging.getLogger(__name__)

# =============================================================================
# Module specific exceptions
# =============================================================================

class IPNetworkError(ValueError):
    """Base class for the errors raised by this module."""

class AddressValueError(IPNetworkError):
    """An address value is out of range, or of an unsupported type."""

class ParseError(IPNetworkError):
    """An address or network string is malformed."""

class InvalidLength(IPNetworkError):
    """Packed address or network data is not of the expected length."""

class PrefixLenError(IPNetworkError):
    """A prefix length is out of range for the address or network."""

class HostBitsSetError(IPNetworkError):
    """A network address has bits set beyond the prefix length."""

class InvalidMask(IPNetworkError):
    """A netmask is not a contiguous run of ones followed by zeros."""

# =============================================================================
# Factory functions
# =============================================================================

def ip_address(address):
    """Take an IP string/int/bytes and return an object of the correct type.

    Args:
        address: A string, integer or packed bytes, the IP address.
            Strings containing a ':' are IPv6 addresses; integers less
            than 2**32 are IPv4 addresses; packed bytes must be 4 (IPv4)
            or 16 (IPv6) bytes long.

    Returns:
        An IPv4Address or IPv6Address object.

    Raises:
        ParseError: if an address string is not valid.
        InvalidLength: if packed bytes are not 4 or 16 bytes long.
        AddressValueError: if address is not a v4 or a v6 address.
    """
    if isinstance(address, _BaseIPAddress):
        return address
    return _network_class_of(address)._address_class(address)

def ip_network(address, strict=True):
    """Take an IP string/int/tuple and return an object of the correct type.

    Args:
        address: A string, integer, address object, or a tuple of
            (address, prefix) representing the IP network.  Strings
            must be in CIDR form, 'address/prefix'.

        strict: A boolean. If True, ensure that the IP address is a
          true network address, i.e. the host bits (after the prefix)
          must all be zero.

    Returns:
        An IPv4Network or IPv6Network object.

    Raises:
        ParseError: if a network string is not valid.
        PrefixLenError: if the prefix length is out of range.
        HostBitsSetError: if it has host bits set and strict is True.
        AddressValueError: if address is not a v4 or a v6 network.
    """
    if isinstance(address, _BaseIPNetwork):
        return address
    if isinstance(address, tuple) and address:
        net_class = _network_class_of(address[0])
    else:
        net_class = _network_class_of(address)
    return net_class(address, strict)

def ip_network_from_packed(data):
    """Rebuild a network from its packed form, see IPv4Network.packed.

    Args:
        data: 5 bytes for an IPv4 network, or 17 bytes for IPv6.

    Returns:
        An IPv4Network or IPv6Network object.

    Raises:
        InvalidLength: if data is neither 5 nor 17 bytes long.
        PrefixLenError: if the prefix length byte is out of range.
        HostBitsSetError: if the address has host bits set.
    """
    if len(data) == IPV4LENGTH // 8 + 1:
        return IPv4Network.from_packed(data)
    if len(data) == IPV6LENGTH // 8 + 1:
        return IPv6Network.from_packed(data)
    _log.debug('rejected packed network of %d bytes', len(data))
    raise InvalidLength('packed network must be 5 or 17 bytes: %r' %
                        (bytes(data),))

def ip_network_from_cidr_wire(data):
    """Rebuild a network from PostgreSQL binary cidr data.

    The address family byte selects IPv4Network or IPv6Network.

    Args:
        data: The cidr value in PostgreSQL's binary format.

    Returns:
        An IPv4Network or IPv6Network object.

    Raises:
        ParseError: if the address family is not IPv4 or IPv6.
        InvalidLength: if the data is truncated or too long.
        PrefixLenError: if the prefix length is out of range.
        HostBitsSetError: if the address has host bits set.
    """
    if not data:
        raise InvalidLength('empty cidr value')
    if data[0] == CIDR_WIRE_IPV4:
        return IPv4Network.from_cidr_wire(data)
    if data[0] == CIDR_WIRE_IPV6:
        return IPv6Network.from_cidr_wire(data)
    _log.debug('rejected cidr value with address family %d', data[0])
    raise ParseError('cidr is not IP version 4 or 6: family %r' % (data[0],))

def _network_class_of(value):
    """Select the network class for a network or address value.

    Strings with a ':' are IPv6, packed bytes are selected by length and
    integers greater than 2**32 - 1 are IPv6; everything else is IPv4,
    for the IPv4 classes to validate.
    """
    if isinstance(value, _BaseIP):
        return value._network_class
    if isinstance(value, str):
        return IPv6Network if ':' in value else IPv4Network
    if isinstance(value, (bytes, bytearray, memoryview)):
        value = bytes(value)
        if len(value) == IPV6LENGTH // 8:
            return IPv6Network
        if len(value) != IPV4LENGTH // 8:
            raise InvalidLength('packed address must be 4 or 16 bytes: %r' %
                                (value,))
    elif isinstance(value, int) and value > MAX_IPV4:
        return IPv6Network
    return IPv4Network

# =============================================================================
# Utility functions
# =============================================================================

_HEX_DIGITS = frozenset('0123456789ABCDEFabcdef')
_DECIMAL_DIGITS = frozenset('0123456789')

def ishexdigit(txt):
    """Returns True if all characters are hex digits"""
    for digit in txt:
        if digit not in _HEX_DIGITS:
            return False
    # an empty string is not hex
    return txt != ''

def isdecimal(txt):
    """Returns True if all characters are ASCII decimal digits"""
    for digit in txt:
        if digit not in _DECIMAL_DIGITS:
            return False
    return txt != ''

def _count_righthand_zero_bits(number, bits):
    """Count the number of zero bits on the right hand side.

    Args:
        number: An integer.
        bits: Maximum number of bits to count.

    Returns:
        The number of zero bits on the right hand side of the number.
    """
    if number == 0:
        return bits
    return min(bits, (~number & (number - 1)).bit_length())

# =============================================================================
# Prefix arithmetic
# =============================================================================

def _check_prefixlen(prefixlen, width):
    if not 0 <= prefixlen <= width:
        raise PrefixLenError('invalid prefix length %r for a %d bit address' %
                             (prefixlen, width))

def netmask_int(prefixlen, width):
    """The network mask for a prefix length, as an integer.

    Args:
        prefixlen: The prefix length, 0 to width inclusive.
        width: The address length, in bits.

    Returns:
        An integer with the top prefixlen bits set, the rest zero.

    Raises:
        PrefixLenError: if prefixlen is out of range.
    """
    _check_prefixlen(prefixlen, width)
    return ((1 << prefixlen) - 1) << (width - prefixlen)

def hostmask_int(prefixlen, width):
    """The host mask for a prefix length: the complement of the netmask.

    Raises:
        PrefixLenError: if prefixlen is out of range.
    """
    _check_prefixlen(prefixlen, width)
    return (1 << (width - prefixlen)) - 1

def network_int(ip, prefixlen, width):
    """The network address of ip, with all host bits cleared."""
    return ip & netmask_int(prefixlen, width)

def broadcast_int(ip, prefixlen, width):
    """The broadcast (last) address of ip, with all host bits set."""
    return ip | hostmask_int(prefixlen, width)

def prefixlen_from_netmask(mask, width):
    """Convert a network mask integer to a prefix length.

    Args:
        mask: The netmask, as an integer.
        width: The address length, in bits.

    Returns:
        The number of leading one bits in mask.

    Raises:
        InvalidMask: if mask is not a run of ones followed by zeros,
            starting from the most significant bit.
    """
    if not 0 <= mask < 1 << width:
        raise InvalidMask('netmask out of range for %d bits: %r' %
                          (width, mask))
    prefixlen = width - _count_righthand_zero_bits(mask, width)
    if mask != netmask_int(prefixlen, width):
        raise InvalidMask('%x is not a valid netmask value' % (mask,))
    return prefixlen

# =============================================================================
# IP Base classes for addresses and networks
# =============================================================================

class _BaseIP:
    """A base class for IP addresses and networks.

    The following attributes must be provided by derived classes:
        _version        The IP version number, IPV4 or IPV6
        _address_len    The address length, in bits
        _constants      The well-known networks of this IP version
    The following methods must be implemented in derived classes:
        __str__         Return the value as a string
        _in_nets        Test if the value is within any of some networks
        from_packed     Convert packed bytes to a new object
    """

    __slots__ = ()

    def __repr__(self):
        """A string representation of this object."""
        return "%s('%s')" % (self.__class__.__name__, self.__str__())

    @property
    def version(self):
        """The IP version of this object."""
        return self._version

    @property
    def max_prefixlen(self):
        """Returns the maximum prefix length for networks of this type."""
        return self._address_len

    @property
    def compressed(self):
        """The short string representation of this object."""
        return self.__str__()

    @property
    def is_unspecified(self):
        """Test if this is the unspecified address, or its /32 or /128.

        Returns:
            A boolean, True if this is the unspecified address, as
            defined in RFC 5735 3 (IPv4) or RFC 4291 2.5.2 (IPv6).
        """
        return self._in_nets(self._constants._unspecified_nets)

    @property
    def is_loopback(self):
        """Test if this is within the loopback range.

        Returns:
            A boolean, True if this is a loopback per RFC 1122 (IPv4)
            or RFC 4291 2.5.3 (IPv6).
        """
        return self._in_nets(self._constants._loopback_nets)

    @property
    def is_private(self):
        """Test if this is allocated for private networks.

        Returns:
            A boolean, True if this is private per RFC 1918 (IPv4), or
            unique local per RFC 4193 (IPv6).
        """
        return self._in_nets(self._constants._private_nets)

    @property
    def is_link_local(self):
        """Test if this is reserved for link-local.

        Returns:
            A boolean, True if this is link-local per RFC 3927 (IPv4)
            or RFC 4291 (IPv6).
        """
        return self._in_nets(self._constants._linklocal_nets)

    @property
    def is_multicast(self):
        """Test if this is reserved for multicast use.

        Returns:
            A boolean, True if this is multicast.
            See RFC 5771 for details (IPv4) or RFC 4291 2.7 (IPv6).
        """
        return self._in_nets(self._constants._multicast_nets)

    @property
    def is_documentation(self):
        """Test if this is reserved for documentation.

        Returns:
            A boolean, True if this is in TEST-NET-1, -2 or -3 per
            RFC 5737 (IPv4), or in 2001:db8::/32 per RFC 3849 (IPv6).
        """
        return self._in_nets(self._constants._documentation_nets)

    @property
    def is_benchmarking(self):
        """Test if this is reserved for benchmarking.

        Returns:
            A boolean, True if this is in 198.18.0.0/15 per RFC 2544
            (IPv4), or in 2001:2::/48 per RFC 5180 (IPv6).
        """
        return self._in_nets(self._constants._benchmarking_nets)

    @property
    def is_reserved(self):
        """Test if this is otherwise IETF reserved.

        Returns:
            A boolean, True if this is within one of the reserved
            IPv4 or IPv6 ranges.
        """
        return self._in_nets(self._constants._reserved_nets)

    @classmethod
    def _validate(cls, value):
        """Convert a value to an instance of this class, for pydantic.

        Args:
            value: an instance of this class, its canonical string, or
                its packed bytes.

        Returns:
            An instance of this class.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value)
        if isinstance(value, (bytes, bytearray)):
            return cls.from_packed(value)
        raise AddressValueError('cannot convert %r to %s' %
                                (value, cls.__name__))

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        """Let pydantic models use this class as a field type.

        Values are validated with _validate, and serialized to JSON as
        their canonical string.
        """
        from pydantic_core import core_schema
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used='json'))

class _BaseIPv4:
    """A base class mix-in for IPv4 classes."""

    __slots__ = ()

    _version = IPV4
    _max_address = MAX_IPV4
    _address_len = IPV4LENGTH
    _cidr_wire_family = CIDR_WIRE_IPV4

    @property
    def exploded(self):
        """The fully expanded string representation of this object"""
        return self.__str__()

    @property
    def is_broadcast(self):
        """Test if this is the limited broadcast address 255.255.255.255."""
        return self._in_nets(self._constants._broadcast_nets)

    @property
    def is_shared(self):
        """Test if this is in the shared address space, see RFC 6598."""
        return self._in_nets(self._constants._shared_nets)

    @property
    def is_global(self):
        """Test if this is allocated for public networks.

        Returns:
            A boolean, True if this is not within any of the
            non-global ranges of the iana-ipv4-special-registry.
        """
        return not self._in_nets(self._constants._non_global_nets)

class IPv6MulticastScope(enum.Enum):
    """IPv6 multicast address scopes, as defined in RFC 7346."""

    INTERFACE_LOCAL = 0x1
    LINK_LOCAL = 0x2
    REALM_LOCAL = 0x3
    ADMIN_LOCAL = 0x4
    SITE_LOCAL = 0x5
    ORGANIZATION_LOCAL = 0x8
    GLOBAL = 0xe

_MULTICAST_SCOPES = {scope.value: scope for scope in IPv6MulticastScope}

class _BaseIPv6:
    """A Base class mix-in for IPv6 classes."""

    __slots__ = ()

    _version = IPV6
    _max_address = MAX_IPV6
    _address_len = IPV6LENGTH
    _cidr_wire_family = CIDR_WIRE_IPV6

    @property
    def is_unique_local(self):
        """Test if this is a unique local address, see RFC 4193."""
        return self._in_nets(self._constants._private_nets)

    @property
    def is_site_local(self):
        """Test if this is reserved for site-local.

        Note that the site-local address space has been deprecated by
        RFC 3879.  Use is_unique_local to test if this is in the space
        of unique local addresses as defined by RFC 4193.

        Returns:
            A boolean, True if this is reserved per RFC 3513 2.5.6.
        """
        return self._in_nets(self._constants._sitelocal_nets)

    @property
    def multicast_scope(self):
        """The multicast scope, or None if this is not multicast.

        Returns:
            An IPv6MulticastScope, or None if this is not multicast or
            the scope value is unassigned.
        """
        if not self.is_multicast:
            return None
        return _MULTICAST_SCOPES.get(self._ip >> 112 & 0xf)

    @property
    def is_global(self):
        """Test if this is globally routable.

        Multicast is global only with the global scope; unicast is
        global unless it is loopback, link-local, site-local, unique
        local, unspecified or documentation.
        """
        if self.is_multicast:
            return self.multicast_scope is IPv6MulticastScope.GLOBAL
        return not self._in_nets(self._constants._non_global_nets)

# =============================================================================
# IP Address classes
# =============================================================================

class _BaseIPAddress(_BaseIP):
    """A base class for an IP Address, do not instantiate directly.

    The following attributes must be provided by derived classes:
        _version        The IP version number, IPV4 or IPV6
        _max_address    The maximum integer value for this address type
        _address_len    The address length, in bits
    The following methods must be implemented in derived classes:
        from_string     Convert an address string to an integer
        _to_string      Convert an address integer to a string
    """

    __slots__ = ()

    def __init__(self, address):
        """Instantiate a new IP address.

        Args:
            address: The address value as a string, an integer, packed
                bytes in network (big-endian) order, or an address of
                the same type.

        Raises:
            ParseError: If an address string is not valid.
            InvalidLength: If packed bytes are not the address length.
            AddressValueError: If an address integer is out of range, or
                address is of an unsupported type.
        """
        if isinstance(address, int) and not isinstance(address, bool):
            self._ip = address
        elif isinstance(address, (bytes, bytearray, memoryview)):
            address = bytes(address)
            if len(address) != self._address_len // 8:
                raise InvalidLength('packed %s must be %d bytes: %r' %
                                    (self.__class__.__name__,
                                     self._address_len // 8, address))
            self._ip = int.from_bytes(address, 'big')
        elif isinstance(address, str):
            self._ip = self.from_string(address)
        elif isinstance(address, self.__class__):
            self._ip = address._ip
        else:
            raise AddressValueError('invalid address: %r' % (address,))
        if not 0 <= self._ip <= self._max_address:
            raise AddressValueError('invalid address: %r' % (address,))

    @classmethod
    def from_packed(cls, data):
        """Create an address from packed bytes in network order."""
        return cls(bytes(data))

    @classmethod
    def to_string(cls, ip):
        """Convert an integer to an IP address string.

        Args:
            ip: The address integer

        Returns:
            The address string

        Raises:
            AddressValueError if the ip address is not valid
        """
        if not 0 <= ip <= cls._max_address:
            raise AddressValueError('IPv%d integer out of range: %r' %
                                    (cls._version, ip))
        return cls._to_string(ip)

    def __str__(self):
        return self._to_string(self._ip)

    def __int__(self):
        """The IP address as an integer."""
        return self._ip

    def __add__(self, delta):
        """Get a new IP address whose integer value is self._ip+delta.

        Args:
            delta: The integer to add to this IP address.

        Returns:
            A new IP address (of the same type as this).

        Raises:
            AddressValueError: if the result is out of range.
        """
        if not isinstance(delta, int):
            return NotImplemented
        return self.__class__(self._ip + delta)

    def __sub__(self, delta):
        """Get a new IP address whose integer value is self._ip-delta.

        Args:
            delta: The integer to subtract from this IP address.

        Returns:
            A new IP address (of the same type as this).

        Raises:
            AddressValueError: if the result is out of range.
        """
        if not isinstance(delta, int):
            return NotImplemented
        return self.__class__(self._ip - delta)

    def __reduce__(self):
        return self.__class__, (self._ip,)

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._ip == other._ip

    def __ne__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._ip != other._ip

    def __lt__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._ip < other._ip

    def __le__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._ip <= other._ip

    def __gt__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._ip > other._ip

    def __ge__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._ip >= other._ip

    def __hash__(self):
        return hash(self._ip)

    @property
    def packed(self):
        """The binary representation of this address."""
        return self._ip.to_bytes(self._address_len // 8, 'big')

    def _in_nets(self, nets):
        """Check if this address is in any of the networks in nets."""
        for net in nets:
            if net._contains(self._ip):
                return True
        return False

# =============================================================================

class IPv4Address(_BaseIPAddress, _BaseIPv4):
    """An IPv4 Address."""

    __slots__ = ('_ip',)

    @staticmethod
    def from_string(txt):
        """Convert an IPv4 address string to an integer.

        The string format is "a.b.c.d", where a, b, c and d are decimal
        integers in the range 0 to 255, inclusive.  Spaces, or leading
        zeros, are not permitted.

        Args:
            txt: An IPv4 address string

        Returns:
            The IPv4 address as an integer

        Raises:
            ParseError if the string is not a valid IPv4 address.
        """
        words = txt.split('.')
        if len(words) != 4:
            raise ParseError('IPv4 string is not n.n.n.n: %r' % (txt,))
        ip = 0
        for word in words:
            if not isdecimal(word):
                raise ParseError('non-decimal word: %r' % (txt,))
            if word[0] == '0' and len(word) != 1:
                raise ParseError('leading zero not allowed: %r' % (txt,))
            val = int(word, 10)
            if val > 255:
                raise ParseError('value too big: %r' % (txt,))
            ip = (ip << 8) + val
        return ip

    @staticmethod
    def _to_string(ip):
        """Convert an integer to an IPv4 address string.

        Args:
            ip: The address integer

        Returns:
            The address string
        """
        return '%s.%s.%s.%s' % (ip >> 24 & 0xff, ip >> 16 & 0xff,
                                ip >>  8 & 0xff, ip >>  0 & 0xff)

# =============================================================================

class IPv6Address(_BaseIPAddress, _BaseIPv6):
    """An IPv6 Address."""

    __slots__ = ('_ip',)

    @staticmethod
    def from_string(txt):
        """Convert an IPv6 address string to an integer.

        The string format is "n1:n2:n3:n4:n5:n6:n7:n8", where n1 to n8
        are hexadecimal integers in the range 0 to FFFF, inclusive.  A
        single sequence of consecutive words with a value of 0 may be
        represented as '::'.

        The last two hexadecimal integers, n7 and n8, may alternatively
        be expressed as an IPv4 address in the format "a.b.c.d", where
        a, b, c and d are decimal integers in the range 0 to 255,
        inclusive.  Leading zeros are permitted in n1 to n8, up to a
        maximum of 4 hex digits.  Leading zeros are not permitted in a
        to d.

        Spaces and zone identifiers ('%scope') are not permitted.

        Args:
            txt: An IPv6 address string

        Returns:
            The IPv6 address as an integer

        Raises:
            ParseError if the string is not a valid IPv6 address.
        """
        parts = txt.split('::')
        numparts = len(parts)
        if numparts > 2:
            raise ParseError('multiple "::" ranges: %r' % (txt,))
        # store lists of values before (head) and after (tail) the '::'
        head, tail = [], []
        values = head
        ipv4_part = None
        for i in range(numparts):
            if parts[i]:
                for word in parts[i].split(':'):
                    if ipv4_part is not None:
                        # nothing allowed after the IPv4 part of the address
                        raise ParseError('invalid address: %r' % (txt,))
                    if not ishexdigit(word):
                        if i + 1 == numparts:
                            # an IPv4 address may be at the end of the last part
                            try:
                                ipv4_part = IPv4Address.from_string(word)
                            except ParseError:
                                raise ParseError('invalid address: %r' % (txt,))
                            values.extend([ipv4_part >> 16, ipv4_part & 0xffff])
                            continue
                        raise ParseError('invalid address: %r' % (txt,))
                    if len(word) > 4:
                        raise ParseError('invalid address: %r' % (txt,))
                    values.append(int(word, 16))
            values = tail
        # build a single list of values, filling the gap with 0's
        if numparts == 2:
            numwords = len(head) + len(tail)
            if numwords >= 8:
                raise ParseError('too many words: %r' % (txt,))
            head.extend([0] * (8 - numwords))
            head.extend(tail)
        elif len(head) != 8:
            raise ParseError('too many/few words: %r' % (txt,))
        ip = 0
        for val in head:
            ip = (ip << 16) + val
        return ip

    @staticmethod
    def _to_string(ip):
        """Convert an integer to an IPv6 address string.

        The longest run of two or more zero words is compressed to '::',
        the leftmost run if there is a tie; other words are lowercase hex
        without leading zeros.

        Args:
            ip: The address integer

        Returns:
            The address string
        """
        words = (ip >> 112 & 0xffff,
                 ip >>  96 & 0xffff,
                 ip >>  80 & 0xffff,
                 ip >>  64 & 0xffff,
                 ip >>  48 & 0xffff,
                 ip >>  32 & 0xffff,
                 ip >>  16 & 0xffff,
                 ip >>   0 & 0xffff)
        # find the longest sequence of zeros (start, length)
        zeros = 0, 0
        start, length = 0, 0
        for index, word in enumerate(words):
            if word == 0:
                if length == 0:
                    start = index
                length += 1
            elif length > 0:
                if length > zeros[1]:
                    zeros = start, length
                length = 0
        # a trailing run only wins if it is strictly longer
        if length <= zeros[1]:
            start, length = zeros
        if length > 1:
            head = ':'.join(('%x' % x for x in words[:start]))
            tail = ':'.join(('%x' % x for x in words[start + length:]))
            return '::'.join([head, tail])
        return ':'.join(('%x' % x for x in words))

    @staticmethod
    def _to_string_exploded(ip):
        """Convert an integer to an exploded IPv6 address string.

        Args:
            ip: The address integer

        Returns:
            The address string, eight words of four hex digits
        """
        return '%04x:%04x:%04x:%04x:%04x:%04x:%04x:%04x' % (ip >> 112 & 0xffff,
                                                           ip >>  96 & 0xffff,
                                                           ip >>  80 & 0xffff,
                                                           ip >>  64 & 0xffff,
                                                           ip >>  48 & 0xffff,
                                                           ip >>  32 & 0xffff,
                                                           ip >>  16 & 0xffff,
                                                           ip >>   0 & 0xffff)

    @classmethod
    def to_string_exploded(cls, ip):
        """Convert an integer to an exploded IPv6 address string.

        Raises:
            AddressValueError if the ip address is not valid
        """
        if not 0 <= ip <= MAX_IPV6:
            raise AddressValueError('IPv6 integer out of range: %r' % (ip,))
        return cls._to_string_exploded(ip)

    @property
    def exploded(self):
        """The fully expanded string representation of the IP address."""
        return self._to_string_exploded(self._ip)

    @property
    def ipv4_mapped(self):
        """Return the IPv4 mapped address, if there is one, or None."""
        if self._ip >> 32 == 0xffff:
            return IPv4Address(self._ip & 0xffffffff)
        return None

# =============================================================================
# IP Network classes
# =============================================================================

class _BaseIPNetwork(_BaseIP):
    """A base class for an IP Network, do not instantiate directly.

    A network holds the network address integer, _ip, and the prefix
    length, _prefixlen; the host bits of _ip are always zero.

    The following attributes must be provided by derived classes:
        _version        The IP version number, IPV4 or IPV6
        _max_address    The maximum integer value for this address type
        _address_len    The address length, in bits
        _address_class  The class for addresses of the same IP version
    """

    __slots__ = ()

    def __init__(self, address, strict=True):
        """Instantiate a new IPv4/IPv6 Network object.

        Args:
            address: A string, integer, address object, network object,
                or tuple of (address, prefix), representing the IP
                network.

                If the address is a single string, it must be in CIDR
                form: the network IP address, a '/' character and the
                prefix.

                If the address is an integer, packed bytes or an address
                object, the prefix is the full address length, 32 bits
                for IPv4 and 128 bits for IPv6.

                If the prefix is given as an integer, it must be:
                0 <= prefix <= 32 (IPv4) or 0 <= prefix <= 128 (IPv6).

                The prefix may also be specified as a string: a decimal
                prefix length, or a netmask address string, with the
                most significant bits set, defining the prefix length,
                and the remaining host bits all zero.

            strict: A boolean. If True, ensure that the IP address is a
                true network address, i.e. the host bits (after the
                prefix) must all be zero.  If False, the host bits are
                silently cleared.

        Raises:
            ParseError: If a network string is not valid.
            AddressValueError: If the address is not valid.
            InvalidLength: If packed bytes are not the address length.
            PrefixLenError: If the prefix length is out of range.
            InvalidMask: If a netmask string is not contiguous.
            HostBitsSetError: If strict is True and any host bits are set.
        """
        prefix = None
        if isinstance(address, self.__class__):
            address, prefix = address._ip, address._prefixlen
        elif isinstance(address, tuple):
            if len(address) != 2:
                raise AddressValueError('expected (address, prefix): %r' %
                                        (address,))
            address, prefix = address
        if isinstance(address, str):
            if prefix is None:
                ip, prefix = self.from_string(address)
            else:
                ip = self._address_class.from_string(address)
        else:
            ip = self._address_class(address)._ip
        prefix = self._prefixlen_of(prefix)
        mask = netmask_int(prefix, self._address_len)
        if strict and ip & mask != ip:
            raise HostBitsSetError('%s/%d has host bits set' %
                                   (self._address_class._to_string(ip), prefix))
        self._ip = ip & mask
        self._prefixlen = prefix
        self._netmask = mask

    @classmethod
    def strict_new(cls, address, prefixlen):
        """Create a network, rejecting an address with host bits set.

        Args:
            address: The network address, an address object or integer.
            prefixlen: The prefix length, an integer.

        Raises:
            PrefixLenError: If the prefix length is out of range.
            HostBitsSetError: If any bits beyond prefixlen are set.
        """
        return cls((address, prefixlen))

    @classmethod
    def truncating_new(cls, address, prefixlen):
        """Create a network, clearing any host bits set in the address.

        Raises:
            PrefixLenError: If the prefix length is out of range.
        """
        return cls((address, prefixlen), False)

    @classmethod
    def is_host_bits_set(cls, address, prefixlen):
        """Check if an address has bits set beyond a prefix length.

        This is True exactly when strict_new(address, prefixlen) raises
        HostBitsSetError, and truncating_new() changes the address.

        Raises:
            PrefixLenError: If the prefix length is out of range.
        """
        ip = cls._address_class(address)._ip
        prefixlen = cls._prefixlen_of(prefixlen)
        return network_int(ip, prefixlen, cls._address_len) != ip

    @classmethod
    def _prefixlen_of(cls, prefix):
        """Convert a prefix, as given to the constructor, to a prefix length.

        Args:
            prefix: An integer, a prefix or netmask string, or None for
                the full address length.

        Raises:
            PrefixLenError: If the prefix is out of range, or not an
                integer or string.
            ParseError: If a prefix string is not valid.
            InvalidMask: If a netmask string is not contiguous.
        """
        if isinstance(prefix, str):
            return cls._prefix_from_string(prefix)
        if prefix is None:
            return cls._address_len
        if isinstance(prefix, bool) or not isinstance(prefix, int):
            raise PrefixLenError('invalid prefix: %r' % (prefix,))
        _check_prefixlen(prefix, cls._address_len)
        return prefix

    @classmethod
    def _prefix_from_string(cls, txt):
        """Convert an IPv4/6 prefix string to a prefix length.

        Acceptable strings are a decimal integer in the range 0 to 32
        (IPv4) or 128 (IPv6), without leading zeros; or a network mask
        expressed as an address of the same IP version.

        Args:
            txt: A prefix string, e.g. '24' or '255.255.255.0'

        Returns:
            the prefix length as an integer

        Raises:
            ParseError if the string is not a valid prefix.
            InvalidMask if a netmask is not contiguous.
        """
        if isdecimal(txt):
            if txt[0] == '0' and len(txt) != 1:
                raise ParseError('leading zero in prefix: %r' % (txt,))
            preflen = int(txt)
            if preflen > cls._address_len:
                raise ParseError('prefix length too big: %r' % (txt,))
            return preflen
        try:
            mask = cls._address_class.from_string(txt)
        except ParseError:
            raise ParseError('invalid prefix: %r' % (txt,))
        return prefixlen_from_netmask(mask, cls._address_len)

    @classmethod
    def from_string(cls, txt):
        """Convert a string to an IPv4/6 integer value and prefix length.

        Acceptable strings are in the format "address/prefix", where
        address is a valid IPv4/6 address string, and prefix is a
        decimal prefix length or a netmask, see _prefix_from_string.

        Args:
            txt: An IPv4/6 address/prefix string, e.g. '1.2.3.0/24'

        Returns:
            The IPv4/6 network and prefix length, as integers

        Raises:
            ParseError if the string is not a valid network.
            InvalidMask if a netmask is not contiguous.
        """
        words = txt.split('/')
        if len(words) != 2:
            raise ParseError('network is not address/prefix: %r' % (txt,))
        addr, prefix = words
        if not addr or not prefix:
            raise ParseError('network is not address/prefix: %r' % (txt,))
        return cls._address_class.from_string(addr), cls._prefix_from_string(prefix)

    @classmethod
    def _to_string(cls, ip, preflen):
        """Convert an integer IP address & prefix length to a string.

        Returns:
            The IPv4/6 network as a string, e.g. '1.2.3.0/24'
        """
        return f'{cls._address_class._to_string(ip)}/{preflen}'

    @classmethod
    def to_string(cls, ip, preflen):
        """Convert an integer IP address & prefix length to a string.

        Args:
            ip: The network integer
            preflen: The prefix length

        Returns:
            The IPv4/6 network as a string, e.g. '1.2.3.0/24'

        Raises:
            AddressValueError if the ip address is not valid
            PrefixLenError if the prefix length is not valid
        """
        if not 0 <= ip <= cls._max_address:
            raise AddressValueError('IPv%d integer out of range: %r' %
                                    (cls._version, ip))
        _check_prefixlen(preflen, cls._address_len)
        return cls._to_string(ip, preflen)

    def __str__(self):
        return self._to_string(self._ip, self._prefixlen)

    def __hash__(self):
        return hash((self._ip, self._prefixlen))

    def __reduce__(self):
        return self.__class__, ((self._ip, self._prefixlen),)

    @classmethod
    def from_packed(cls, data):
        """Create a network from its packed form.

        Args:
            data: The address bytes, in network order, followed by one
                byte for the prefix length.

        Raises:
            InvalidLength: If data is not the address length plus one.
            PrefixLenError: If the prefix length is out of range.
            HostBitsSetError: If the address has host bits set.
        """
        size = cls._address_len // 8
        if len(data) != size + 1:
            _log.debug('rejected packed %s of %d bytes',
                       cls.__name__, len(data))
            raise InvalidLength('packed %s must be %d bytes: %r' %
                                (cls.__name__, size + 1, bytes(data)))
        try:
            return cls((bytes(data[:size]), data[size]))
        except IPNetworkError as exc:
            _log.debug('rejected packed %s %r: %s', cls.__name__, data, exc)
            raise

    @property
    def packed(self):
        """The binary representation: address bytes, then prefix length."""
        return (self._ip.to_bytes(self._address_len // 8, 'big') +
                bytes((self._prefixlen,)))

    @classmethod
    def from_cidr_wire(cls, data):
        """Create a network from PostgreSQL binary cidr data.

        The layout is one byte each of address family, prefix length,
        is-cidr flag and address length, followed by the address bytes.

        Raises:
            ParseError: If the address family or flag is not valid.
            InvalidLength: If the address length is not valid.
            PrefixLenError: If the prefix length is out of range.
            HostBitsSetError: If the address has host bits set.
        """
        size = cls._address_len // 8
        try:
            if len(data) < 4:
                raise InvalidLength('truncated cidr value: %r' % (bytes(data),))
            family, prefixlen, is_cidr, nbytes = data[:4]
            if family != cls._cidr_wire_family:
                raise ParseError('cidr family %r is not IPv%d' %
                                 (family, cls._version))
            if is_cidr not in (0, 1):
                raise ParseError('invalid cidr flag: %r' % (is_cidr,))
            if nbytes != size or len(data) != 4 + size:
                raise InvalidLength('invalid cidr address length: %r' %
                                    (bytes(data),))
            return cls((bytes(data[4:]), prefixlen))
        except IPNetworkError as exc:
            _log.debug('rejected cidr %s %r: %s', cls.__name__, data, exc)
            raise

    def to_cidr_wire(self):
        """The network in PostgreSQL binary cidr format, see from_cidr_wire."""
        size = self._address_len // 8
        return (bytes((self._cidr_wire_family, self._prefixlen, 1, size)) +
                self._ip.to_bytes(size, 'big'))

    def __iter__(self):
        """Iterate over all the IP addresses in this network."""
        return AddressIterator(self.network_address, self.broadcast_address)

    def hosts(self, exclude=True):
        """Iterate over the host addresses in this network.

        Args:
            exclude: If True, skip the network and broadcast addresses.
                Networks with a prefix length of max_prefixlen - 1 or
                max_prefixlen have no distinct network and broadcast
                addresses, so all their addresses are hosts.

        Returns:
            An AddressIterator, in increasing address order.
        """
        first, last = self._ip, self._broadcast_int
        if exclude and self._prefixlen <= self._address_len - 2:
            first += 1
            last -= 1
        return AddressIterator(self._address_class(first),
                               self._address_class(last))

    def __getitem__(self, n):
        """Get an indexed IP address within this network.

        Args:
            n: The integer index of the IP address to return

        Returns:
            An IPv4Address/IPv6Address for the indexed IP address

        Slice index notation is not supported
        """
        if not isinstance(n, int):
            raise TypeError('invalid index type: %r' % (n,))
        size = self.num_addresses
        i = n if n >= 0 else size + n
        if 0 <= i < size:
            return self._address_class(self._ip + i)
        raise IndexError('IP network index out of range: %r' % (n,))

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._ip == other._ip and self._prefixlen == other._prefixlen

    def __ne__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._ip != other._ip or self._prefixlen != other._prefixlen

    def __lt__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return (self._ip < other._ip or
                (self._ip == other._ip and self._prefixlen < other._prefixlen))

    def __le__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return (self._ip < other._ip or
                (self._ip == other._ip and self._prefixlen <= other._prefixlen))

    def __gt__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return (self._ip > other._ip or
                (self._ip == other._ip and self._prefixlen > other._prefixlen))

    def __ge__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return (self._ip > other._ip or
                (self._ip == other._ip and self._prefixlen >= other._prefixlen))

    def _contains(self, ip_int):
        """Check if IP integer value is in this network.

        Args:
            ip_int: the IP integer to check

        Returns:
            True if ip_int is in this network; otherwise False
        """
        return self._ip == ip_int & self._netmask

    def _contains_net(self, net):
        """Check if an IP network is contained in this network.

        Args:
            net: the IP network to check

        Returns:
            True if net is in this network; otherwise False
        """
        return (self._prefixlen <= net._prefixlen and
                self._ip == net._ip & self._netmask)

    def _in_nets(self, nets):
        """Check if this network is within any of the networks in nets."""
        for net in nets:
            if net._contains_net(self):
                return True
        return False

    def contains(self, other):
        """Check if an IP address, or another network, is in this network.

        A network is contained if its prefix is at least as long as this
        network's, and its leading prefixlen bits match.

        Args:
            other: the IP network, or address, to check

        Returns:
            True if other is in this network; otherwise False, including
            when other is of a different IP version.
        """
        if isinstance(other, self._address_class):
            return self._contains(other._ip)
        if isinstance(other, self.__class__):
            return self._contains_net(other)
        return False

    def __contains__(self, other):
        return self.contains(other)

    def overlaps(self, other):
        """Check if another IP network overlaps this one.

        Args:
            other: The IP network to check

        Returns:
            A boolean: True if other is in this network, or vice versa.

        Raises:
            TypeError: If self and other are of different types.
        """
        if not isinstance(other, self.__class__):
            raise TypeError('self (%r) and other (%r) must be the same type' %
                            (self, other))
        return self._contains(other._ip) or other._contains(self._ip)

    def subnet_of(self, other):
        """Return True if this network is a subnet of other."""
        return other.contains(self)

    def supernet_of(self, other):
        """Return True if this network is a supernet of other."""
        return self.contains(other)

    @property
    def network_address(self):
        """The IP network base IP address."""
        return self._address_class(self._ip)

    @property
    def _broadcast_int(self):
        """Returns the broadcast IP address for the network, as an integer."""
        return self._ip | (self._netmask ^ self._max_address)

    @property
    def broadcast_address(self):
        """Returns the broadcast (last) IP address for the network."""
        return self._address_class(self._broadcast_int)

    @property
    def netmask(self):
        """Returns the network mask for the network, as an IP address"""
        return self._address_class(self._netmask)

    @property
    def hostmask(self):
        """Returns the host mask for the network, as an IP address."""
        return self._address_class(self._netmask ^ self._max_address)

    @property
    def with_prefixlen(self):
        """Returns the network address and prefix length as a string."""
        return self.__str__()

    @property
    def with_netmask(self):
        """Returns the network address and network mask as a string."""
        return '%s/%s' % (self._address_class._to_string(self._ip),
                          self._address_class._to_string(self._netmask))

    @property
    def with_hostmask(self):
        """Returns the network address and host mask as a string."""
        return '%s/%s' % (self._address_class._to_string(self._ip),
                          self._address_class._to_string(
                              self._netmask ^ self._max_address))

    @property
    def num_addresses(self):
        """The number of addresses in this network."""
        return 1 << (self._address_len - self._prefixlen)

    @property
    def prefixlen(self):
        """The network prefix length, in bits."""
        return self._prefixlen

    def subnetworks(self, diff=None, preflen=None):
        """The subnets which join to make the current subnet.

        In the case that preflen equals the current prefix length, the
        iterator produces just this network.

        Args:
            diff: An integer, the amount the prefix length should be
                increased by. This should be None if preflen is set.
            preflen: The desired new prefix length. This must be a
                larger number (smaller prefix) than the existing prefix.
                This should not be set if diff is also set.

        Returns:
            A NetworkIterator of IPv(4|6)Network objects.

        Raises:
            ValueError: if diff and preflen are both set, or neither.
            PrefixLenError: if the new prefix length is smaller than the
                current prefix (a smaller prefix means a larger
                network), or larger than the address length.
        """
        if preflen is not None:
            if diff is not None:
                raise ValueError('cannot set both the prefix length '
                                 'difference and the new prefix length')
        elif diff is None:
            raise ValueError('either the prefix length difference or the '
                             'new prefix length must be specified')
        else:
            preflen = self._prefixlen + diff
        return NetworkIterator(self, preflen)

    def subnets(self, prefixlen_diff=1, new_prefix=None):
        """The subnets which join to make the current subnet.

        Args:
            prefixlen_diff: An integer, the amount the prefix length
                should be increased by. Ignored if new_prefix is set.
            new_prefix: The desired new prefix length.

        Returns:
            A NetworkIterator of IPv(4|6)Network objects.

        Raises:
            PrefixLenError: if the new prefix length is not valid.
        """
        if new_prefix is not None:
            return self.subnetworks(preflen=new_prefix)
        return self.subnetworks(prefixlen_diff)

    def supernetwork(self, diff=None, preflen=None):
        """Get a supernet of this network.

        Args:
            diff: An integer, the amount the prefix length should be
                decreased by. This should be None if preflen is set.
            preflen: The desired new prefix length. This must be a
                smaller number (larger network) than the existing prefix.
                This should not be set if diff is also set.

        Returns:
            An IP network object.

        Raises:
            ValueError: if diff and preflen are both set, or neither.
            PrefixLenError: if the new prefix length is larger than the
                current prefix, or negative.
        """
        if preflen is not None:
            if diff is not None:
                raise ValueError('cannot set both the prefix length '
                                 'difference and the new prefix length')
        elif diff is None:
            raise ValueError('either the prefix length difference or the '
                             'new prefix length must be specified')
        else:
            preflen = self._prefixlen - diff
        if not 0 <= preflen <= self._prefixlen:
            raise PrefixLenError('new prefix length %r is invalid for '
                                 'network %r' % (preflen, self))
        if preflen == self._prefixlen:
            return self
        return self.__class__((self._ip, preflen), False)

    def supernet(self, prefixlen_diff=1, new_prefix=None):
        """The supernet containing the current network.

        Args:
            prefixlen_diff: An integer, the amount the prefix length of
                the network should be decreased by.  For example, given
                a /24 network and a prefixlen_diff of 3, a supernet with
                a /21 netmask is returned.  Ignored if new_prefix is set.
            new_prefix: The desired new prefix length.

        Returns:
            An IP network object, or None if this network has a prefix
            length of 0 and new_prefix is not set.

        Raises:
            PrefixLenError: if the new prefix length is not valid.
        """
        if new_prefix is not None:
            return self.supernetwork(preflen=new_prefix)
        if self._prefixlen == 0:
            return None
        return self.supernetwork(prefixlen_diff)

# =============================================================================

class IPv4Network(_BaseIPNetwork, _BaseIPv4):
    """An IPv4 Network."""

    __slots__ = ('_ip', '_prefixlen', '_netmask')

    _address_class = IPv4Address

# =============================================================================

class IPv6Network(_BaseIPNetwork, _BaseIPv6):
    """An IPv6 Network."""

    __slots__ = ('_ip', '_prefixlen', '_netmask')

    _address_class = IPv6Address

    @classmethod
    def _to_string_exploded(cls, ip, preflen):
        """IP address integer & prefix length to an exploded string.

        Returns:
            The IPv6 network as a string, e.g.:
            '0001:0002:0003:0000:0000:0000:0000:0000/48'
        """
        return f'{cls._address_class._to_string_exploded(ip)}/{preflen}'

    @property
    def exploded(self):
        """The full string representation of the IP network."""
        return self._to_string_exploded(self._ip, self._prefixlen)

# =============================================================================
# Iterators
# =============================================================================

class AddressIterator:
    """Iterate over an inclusive range of IP addresses.

    Only the current position and the last address are held, so a range
    of any size, up to the whole IPv6 address space, is produced on
    demand.  Each iterator is single pass; ask the network for a new one
    to traverse it again.
    """

    __slots__ = ('_current', '_last', '_address_class')

    def __init__(self, first, last):
        """Instantiate a new address iterator.

        Args:
            first: The first IPv4Address or IPv6Address in the range.
            last: The last address in the range, of the same type.  If
                last is less than first, the range is empty.

        Raises:
            TypeError: If first and last are not IP addresses of the
                same version.
        """
        if (not isinstance(first, _BaseIPAddress) or
                not isinstance(last, first.__class__)):
            raise TypeError('first (%r) and last (%r) must be IP addresses '
                            'of the same type' % (first, last))
        self._current = first._ip
        self._last = last._ip
        self._address_class = first.__class__

    def __iter__(self):
        return self

    def __next__(self):
        if self._current > self._last:
            raise StopIteration
        ip = self._current
        self._current += 1
        return self._address_class(ip)

    @property
    def remaining(self):
        """The number of addresses still to be produced."""
        return max(self._last - self._current + 1, 0)

    def __repr__(self):
        return '%s(%r, %r)' % (self.__class__.__name__,
                               self._address_class(min(self._current,
                                                       self._last)),
                               self._address_class(self._last))

class NetworkIterator:
    """Iterate over the subnetworks of a network, for a new prefix length.

    The subnetworks cover the parent network contiguously, without
    overlap, in increasing address order; there are exactly
    2**(new prefix length - parent prefix length) of them.
    """

    __slots__ = ('_current', '_last', '_step', '_prefixlen', '_network_class')

    def __init__(self, network, preflen):
        """Instantiate a new subnetwork iterator.

        Args:
            network: The IPv4Network or IPv6Network to split.
            preflen: The prefix length of the subnetworks, from the
                network's prefix length up to its max_prefixlen.

        Raises:
            TypeError: If network is not an IP network.
            PrefixLenError: If preflen is out of range.
        """
        if not isinstance(network, _BaseIPNetwork):
            raise TypeError('%r is not an IP network' % (network,))
        if not network._prefixlen <= preflen <= network._address_len:
            raise PrefixLenError('new prefix length %r is invalid for '
                                 'network %r' % (preflen, network))
        self._current = network._ip
        self._last = network._broadcast_int
        self._step = 1 << (network._address_len - preflen)
        self._prefixlen = preflen
        self._network_class = network.__class__

    def __iter__(self):
        return self

    def __next__(self):
        if self._current > self._last:
            raise StopIteration
        ip = self._current
        self._current += self._step
        return self._network_class((ip, self._prefixlen))

    @property
    def remaining(self):
        """The number of subnetworks still to be produced."""
        if self._current > self._last:
            return 0
        return (self._last - self._current) // self._step + 1

    @property
    def prefixlen(self):
        """The prefix length of the subnetworks produced."""
        return self._prefixlen

# =============================================================================
# Well-known networks
# =============================================================================

class _IPv4Constants:

    _unspecified_nets = (IPv4Network('0.0.0.0/32'),)
    _loopback_nets = (IPv4Network('127.0.0.0/8'),)
    _private_nets = (
        IPv4Network('10.0.0.0/8'),
        IPv4Network('172.16.0.0/12'),
        IPv4Network('192.168.0.0/16'),
    )
    _linklocal_nets = (IPv4Network('169.254.0.0/16'),)
    _multicast_nets = (IPv4Network('224.0.0.0/4'),)
    _documentation_nets = (
        IPv4Network('192.0.2.0/24'),
        IPv4Network('198.51.100.0/24'),
        IPv4Network('203.0.113.0/24'),
    )
    _benchmarking_nets = (IPv4Network('198.18.0.0/15'),)
    _reserved_nets = (IPv4Network('240.0.0.0/4'),)
    _broadcast_nets = (IPv4Network('255.255.255.255/32'),)
    _shared_nets = (IPv4Network('100.64.0.0/10'),)
    _non_global_nets = (
        IPv4Network('0.0.0.0/8'),
        IPv4Network('10.0.0.0/8'),
        IPv4Network('100.64.0.0/10'),
        IPv4Network('127.0.0.0/8'),
        IPv4Network('169.254.0.0/16'),
        IPv4Network('172.16.0.0/12'),
        IPv4Network('192.0.0.0/24'),
        IPv4Network('192.0.2.0/24'),
        IPv4Network('192.168.0.0/16'),
        IPv4Network('198.18.0.0/15'),
        IPv4Network('198.51.100.0/24'),
        IPv4Network('203.0.113.0/24'),
        IPv4Network('240.0.0.0/4'),
    )

_BaseIPv4._constants = _IPv4Constants
_BaseIPv4._network_class = IPv4Network

class _IPv6Constants:

    _unspecified_nets = (IPv6Network('::/128'),)
    _loopback_nets = (IPv6Network('::1/128'),)
    _private_nets = (IPv6Network('fc00::/7'),)
    _linklocal_nets = (IPv6Network('fe80::/10'),)
    _sitelocal_nets = (IPv6Network('fec0::/10'),)
    _multicast_nets = (IPv6Network('ff00::/8'),)
    _documentation_nets = (IPv6Network('2001:db8::/32'),)
    _benchmarking_nets = (IPv6Network('2001:2::/48'),)
    _reserved_nets = (
        IPv6Network('::/8'),
        IPv6Network('100::/8'),
        IPv6Network('200::/7'),
        IPv6Network('400::/6'),
        IPv6Network('800::/5'),
        IPv6Network('1000::/4'),
        IPv6Network('4000::/3'),
        IPv6Network('6000::/3'),
        IPv6Network('8000::/3'),
        IPv6Network('a000::/3'),
        IPv6Network('c000::/3'),
        IPv6Network('e000::/4'),
        IPv6Network('f000::/5'),
        IPv6Network('f800::/6'),
        IPv6Network('fe00::/9'),
    )
    _non_global_nets = (
        IPv6Network('::/128'),
        IPv6Network('::1/128'),
        IPv6Network('fc00::/7'),
        IPv6Network('fe80::/10'),
        IPv6Network('fec0::/10'),
        IPv6Network('2001:db8::/32'),
    )

_BaseIPv6._constants = _IPv6Constants
_BaseIPv6._network_class = IPv6Network
