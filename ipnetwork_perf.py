#!/usr/bin/env python
"""Performance tests for the ipnetwork module.

Each test times the same operation with the standard library ipaddress
module and with ipnetwork, and reports the ratio.  Run with the names,
or parts of the names, of the tests to run, or with no arguments to run
them all:

    python ipnetwork_perf.py ipv4network_hosts subnets
"""

import itertools
import sys
import time

import ipaddress as ip
import ipnetwork as ipn

# =============================================================================

class TextFx:
    '''Terminal strings for text effects.'''

    RESET               = '\033[0m'
    YELLOW              = '\033[33m'
    BOLD_RED            = '\033[91m'
    BOLD_MAGENTA        = '\033[95m'

# =============================================================================

def fn_name(depth = 0):
    """Get the function name from the call stack.

    Args:
        depth: call stack depth to return, 0=parent, 1=grandparent, etc.

    Returns:
        The function name from the call stack, at the depth given.
    """
    return sys._getframe(depth + 1).f_code.co_name  # pylint: disable=W0212

def has_colours(stream):
    """Determine if an output stream supports colours.

    Args:
        stream: the output stream to check

    Returns:
        True if more than 2 colours are supported; else False
    """
    if not (hasattr(stream, 'isatty') and stream.isatty()):
        return False
    try:
        import curses
    except ImportError:
        return False
    try:
        curses.setupterm()
    except curses.error:
        return False
    return curses.tigetnum('colors') > 2

def timefn(n, fn, *args, **kwargs):
    """Time the execution of a function call.

    Args:
        n: number of times to call the function
        fn: the function to call
        args: positional arguments to pass to fn
        kwargs: keyword arguments to pass to fn

    Returns:
        A tuple: (elapsed time, return value from the last call to fn).
    """
    start = time.perf_counter_ns()
    for i in range(n):
        result = fn(*args, **kwargs)
    return time.perf_counter_ns() - start, result

def timelist(n, fn, *args, **kwargs):
    """Time the execution of generating a list from an iterator function.

    Returns:
        A tuple: (elapsed time, the last repeated list).
    """
    start = time.perf_counter_ns()
    for i in range(n):
        result = list(fn(*args, **kwargs))
    return time.perf_counter_ns() - start, result

def time_multi(n, fns, *args, **kwargs):
    """Time the execution of multiple functions.

    Args:
        n: number of times to call each function
        fns: a list of functions to time
        args: positional arguments to pass to each function
        kwargs: keyword arguments to pass to each function

    Returns:
        A list of tuples: (time, result)
            with the elapsed time and last return value from each function
    """
    return [timefn(n, fn, *args, **kwargs) for fn in fns]

def generic_test(reporter, test_id, n, fns, *args, **kwargs):
    """Run a timed test for each function in fns and report the results.

    Args:
        reporter: the Reporter object to use
        test_id: the test name to report
        n: number of times to call each function
        fns: a list of functions to time
        args: positional arguments to pass to each function
        kwargs: keyword arguments to pass to each function
    """
    results = time_multi(n, fns, *args, **kwargs)
    reporter.report(test_id, n, results, str(args))

def _summarise(time1, time2, gt_txt, lt_txt):
    """Compare two elapsed times.

    Returns:
        A tuple: (text effect, summary message), the effect highlights
        slower results in red, and near-equal results in yellow.
    """
    if time1 == 0.0 or time2 == 0.0:
        return TextFx.YELLOW, 'NO DATA'
    if time1 == time2:
        return TextFx.YELLOW, 'EQUAL'
    if time2 < time1:
        ratio = time1 / time2
        summary = f'{ratio:.2f} times {lt_txt}'
        fx = ''
    else:
        ratio = time2 / time1
        summary = f'{ratio:.2f} times {gt_txt} >>>'
        fx = TextFx.BOLD_RED
    if ratio < 1.02:
        fx = TextFx.YELLOW
    return fx, summary

# =============================================================================

class Reporter:
    """Reporter for performance test results."""

    def __init__(self, gt_txt='SLOWER', lt_txt='faster'):
        """Initialise the report.

        Args:
            gt_txt: the reported message if time1 > time2
            lt_txt: the reported message if time1 < time2
        """
        self.gt_txt = gt_txt
        self.lt_txt = lt_txt
        self.time1 = 0.0
        self.time2 = 0.0

    def report(self, test_id, n, results, msg):
        """Report the results.

        Args:
            test_id: the test name
            n: the number of iterations
            results: a tuple ((time1, result1), (time2, result2)) where
                    time1: the ipaddress library elapsed time
                    result1: the ipaddress library result
                    time2: the ipnetwork library elapsed time
                    result2: the ipnetwork library result
            msg: test information
        """
        (time1, result1), (time2, result2) = results
        self.time1 += time1
        self.time2 += time2
        fx1, summary = _summarise(time1, time2, self.gt_txt, self.lt_txt)
        fx0 = TextFx.RESET
        fx2 = ''
        if str(result1) != str(result2):
            suffix = f'\n    {result1}\n    {result2}'
            fx2 = TextFx.BOLD_MAGENTA
        else:
            suffix = ''
        if not has_colours(sys.stdout):
            fx0 = fx1 = fx2 = ''
        print(f'{fx1}{test_id}: {msg}')
        pc = (time2 * 100) / time1 if time1 else 0.0
        print(f'({n:7d}) {time1:>11,.0f} -> {time2:>11,.0f} {pc:6.1f}%  '
              f'{summary}{fx2}{suffix}{fx0}')

    @staticmethod
    def group_report(name, group, gt_txt='SLOWER', lt_txt='faster', quiet=True):
        """Report a summary of a group of results.

        Args:
            name: a name for the group
            group: the Reporter objects in this group
            gt_txt: the reported message if time1 > time2
            lt_txt: the reported message if time1 < time2
            quiet: if True, suppress reports with no data
        """
        time1 = sum(x.time1 for x in group)
        time2 = sum(x.time2 for x in group)
        if quiet and time1 == 0.0 and time2 == 0.0:
            return
        fx1, summary = _summarise(time1, time2, gt_txt, lt_txt)
        fx0 = TextFx.RESET
        if not has_colours(sys.stdout):
            fx0 = fx1 = ''
        pc = (time2 * 100) / time1 if time1 else 0.0
        print(f'{fx1}{name:14} {time1:>14,.0f} -> {time2:>14,.0f} {pc:6.1f}%  '
              f'{summary}{fx0}')

# =============================================================================

class PerfTest:
    """Performance tests for the ipnetwork module."""

    def __init__(self):
        """Instantiate: build a list of test methods."""
        self._tests = [(name, fn)
                       for name, fn in sorted(self.__class__.__dict__.items())
                       if name.startswith('test_')]
        self.report_u = Reporter()      # for factory functions
        self.report_4a = Reporter()     # for IPv4 Address
        self.report_4n = Reporter()     # for IPv4 Network
        self.report_6a = Reporter()     # for IPv6 Address
        self.report_6n = Reporter()     # for IPv6 Network

    def run(self, matches=None):
        """Run the tests.

        Args:
            matches: sequence of strings to match test names to be run
        """
        for name, fn in self._tests:
            if not matches or any(match in name for match in matches):
                fn(self)
        # summarise by type
        utils = self.report_u,
        addresses = self.report_4a, self.report_6a
        networks = self.report_4n, self.report_6n
        v4 = self.report_4a, self.report_4n
        v6 = self.report_6a, self.report_6n
        Reporter.group_report('IPv4Address', [self.report_4a])
        Reporter.group_report('IPv4Network', [self.report_4n])
        Reporter.group_report('IPv6Address', [self.report_6a])
        Reporter.group_report('IPv6Network', [self.report_6n])
        Reporter.group_report('Factories', utils)
        Reporter.group_report('Addresses', addresses)
        Reporter.group_report('Networks', networks)
        Reporter.group_report('IPv4', v4)
        Reporter.group_report('IPv6', v6)
        Reporter.group_report('TOTAL', utils + v4 + v6)

    def _compare(self, reporter, test_id, n, cls_name, data, method, *args):
        """Time a method of objects built from each string in data."""
        for txt in data:
            obj = getattr(ip, cls_name)(txt)
            eobj = getattr(ipn, cls_name)(txt)
            results = (timefn(n, getattr(obj, method), *args),
                       timefn(n, getattr(eobj, method), *args))
            reporter.report(test_id, n, results, txt)

    def _compare_property(self, reporter, test_id, n, cls_name, data, prop):
        """Time a property of objects built from each string in data."""
        for txt in data:
            obj = getattr(ip, cls_name)(txt)
            eobj = getattr(ipn, cls_name)(txt)
            results = (timefn(n, getattr, obj, prop),
                       timefn(n, getattr, eobj, prop))
            reporter.report(test_id, n, results, txt)

    # =========================================================================
    # Factory functions
    # =========================================================================

    def test_ip_address(self):
        """Test the ip_address function."""
        n = 10**4
        data = [
            '1.2.3.4',
            '::',
            '1:2:3:4:5:6::',
            '::1.2.3.4',
            '1:2:3:4:5:6:7:8',
            0,
            2**32,
        ]
        fns = ip.ip_address, ipn.ip_address
        for args in data:
            generic_test(self.report_u, fn_name(), n, fns, args)

    def test_ip_network(self):
        """Test the ip_network function."""
        n = 10**4
        data = [
            '1.2.3.0/24',
            '1:2:3:4:5:6::/112',
            ('10.1.0.0', 16),
        ]
        fns = ip.ip_network, ipn.ip_network
        for args in data:
            generic_test(self.report_u, fn_name(), n, fns, args)

    # =========================================================================
    # IPv4Address
    # =========================================================================

    def test_ipv4address_init(self):
        """Test the IPv4Address.__init__ method."""
        n = 10**5
        data = [
            '1.2.3.4',
            16384,
            int(42).to_bytes(4, 'big'),
        ]
        fns = ip.IPv4Address, ipn.IPv4Address
        for args in data:
            generic_test(self.report_4a, fn_name(), n, fns, args)

    def test_ipv4address_str(self):
        """Test the IPv4Address.__str__ method."""
        self._compare(self.report_4a, fn_name(), 10**5, 'IPv4Address',
                      ['1.2.3.4', '255.255.255.255'], '__str__')

    def test_ipv4address_packed(self):
        """Test the IPv4Address.packed property."""
        self._compare_property(self.report_4a, fn_name(), 10**5,
                               'IPv4Address', ['1.2.3.4'], 'packed')

    def test_ipv4address_is_global(self):
        """Test the IPv4Address.is_global property."""
        self._compare_property(self.report_4a, fn_name(), 10**5,
                               'IPv4Address', ['8.8.8.8', '10.1.2.3'],
                               'is_global')

    # =========================================================================
    # IPv6Address
    # =========================================================================

    def test_ipv6address_init(self):
        """Test the IPv6Address.__init__ method."""
        n = 10**5
        data = [
            '::',
            '1:2:3:4:5:6:7:8',
            '2001:db8::1',
            '::ffff:1.2.3.4',
            2**64,
            int(42).to_bytes(16, 'big'),
        ]
        fns = ip.IPv6Address, ipn.IPv6Address
        for args in data:
            generic_test(self.report_6a, fn_name(), n, fns, args)

    def test_ipv6address_str(self):
        """Test the IPv6Address.__str__ method."""
        self._compare(self.report_6a, fn_name(), 10**5, 'IPv6Address',
                      ['::', '1:0:0:2:0:0:0:3', '1:2:3:4:5:6:7:8'],
                      '__str__')

    def test_ipv6address_exploded(self):
        """Test the IPv6Address.exploded property."""
        self._compare_property(self.report_6a, fn_name(), 10**5,
                               'IPv6Address', ['2001:db8::1'], 'exploded')

    def test_ipv6address_is_global(self):
        """Test the IPv6Address.is_global property."""
        self._compare_property(self.report_6a, fn_name(), 10**5,
                               'IPv6Address', ['2606:4700::1111', 'fe80::1'],
                               'is_global')

    # =========================================================================
    # IPv4Network
    # =========================================================================

    def test_ipv4network_init(self):
        """Test the IPv4Network.__init__ method."""
        n = 10**5
        data = [
            '1.2.3.0/24',
            '10.0.0.0/255.0.0.0',
            ('10.1.0.0', 16),
            (65536, 16),
            (int(64).to_bytes(4, 'big'), 28),
        ]
        fns = ip.IPv4Network, ipn.IPv4Network
        for args in data:
            generic_test(self.report_4n, fn_name(), n, fns, args)

    def test_ipv4network_str(self):
        """Test the IPv4Network.__str__ method."""
        self._compare(self.report_4n, fn_name(), 10**5, 'IPv4Network',
                      ['1.2.3.0/24', '0.0.0.0/0'], '__str__')

    def test_ipv4network_contains(self):
        """Test the IPv4Network.__contains__ method."""
        n = 10**6
        data = [
            ('1.2.3.0/24', '1.2.3.4'),
            ('1.2.3.4/30', '1.2.3.0'),
            ('3.2.3.0/24', '1.2.3.4'),
        ]
        for n1, a1 in data:
            net = ip.IPv4Network(n1)
            addr = ip.IPv4Address(a1)
            time1, result1 = timefn(n, net.__contains__, addr)
            enet = ipn.IPv4Network(n1)
            eaddr = ipn.IPv4Address(a1)
            time2, result2 = timefn(n, enet.__contains__, eaddr)
            results = (time1, result1), (time2, result2)
            self.report_4n.report(fn_name(), n, results, '%s %s' % (net, addr))

    def test_ipv4network_subnet_of(self):
        """Test the IPv4Network.subnet_of method."""
        n = 10**5
        data = [
            ('1.2.3.0/24', '1.2.0.0/16'),
            ('1.2.0.0/16', '1.2.3.0/24'),
        ]
        for n1, n2 in data:
            net1, net2 = ip.IPv4Network(n1), ip.IPv4Network(n2)
            time1, result1 = timefn(n, net1.subnet_of, net2)
            enet1, enet2 = ipn.IPv4Network(n1), ipn.IPv4Network(n2)
            time2, result2 = timefn(n, enet1.subnet_of, enet2)
            results = (time1, result1), (time2, result2)
            self.report_4n.report(fn_name(), n, results, (net1, net2))

    def test_ipv4network_hosts(self):
        """Test the IPv4Network.hosts method."""
        n = 10**3
        net = ip.IPv4Network('1.2.3.0/24')
        time1, result1 = timelist(n, net.hosts)
        enet = ipn.IPv4Network('1.2.3.0/24')
        time2, result2 = timelist(n, enet.hosts)
        results = (time1, result1), (time2, result2)
        self.report_4n.report(fn_name(), n, results, net)

    def test_ipv4network_subnets(self):
        """Test the IPv4Network.subnets method."""
        n = 10**4
        net = ip.IPv4Network('1.2.3.0/24')
        time1, result1 = timelist(n, net.subnets, new_prefix=28)
        enet = ipn.IPv4Network('1.2.3.0/24')
        time2, result2 = timelist(n, enet.subnets, new_prefix=28)
        results = (time1, result1), (time2, result2)
        self.report_4n.report(fn_name(), n, results, net)

    def test_ipv4network_supernet(self):
        """Test the IPv4Network.supernet method."""
        self._compare(self.report_4n, fn_name(), 10**5, 'IPv4Network',
                      ['1.2.3.0/24', '1.2.3.4/32'], 'supernet')

    def test_ipv4network_num_addresses(self):
        """Test the IPv4Network.num_addresses property."""
        self._compare_property(self.report_4n, fn_name(), 10**6,
                               'IPv4Network', ['1.2.3.0/24'], 'num_addresses')

    def test_ipv4network_broadcast_address(self):
        """Test the IPv4Network.broadcast_address property."""
        self._compare_property(self.report_4n, fn_name(), 10**5,
                               'IPv4Network', ['1.2.3.0/24'],
                               'broadcast_address')

    # =========================================================================
    # IPv6Network
    # =========================================================================

    def test_ipv6network_init(self):
        """Test the IPv6Network.__init__ method."""
        n = 10**5
        data = [
            '2001:db8::/32',
            '::/0',
            ('2001:db8::', 64),
            (2**64, 64),
        ]
        fns = ip.IPv6Network, ipn.IPv6Network
        for args in data:
            generic_test(self.report_6n, fn_name(), n, fns, args)

    def test_ipv6network_str(self):
        """Test the IPv6Network.__str__ method."""
        self._compare(self.report_6n, fn_name(), 10**5, 'IPv6Network',
                      ['2001:db8::/32', '1:0:0:2::/64'], '__str__')

    def test_ipv6network_contains(self):
        """Test the IPv6Network.__contains__ method."""
        n = 10**6
        net = ip.IPv6Network('2001:db8::/32')
        addr = ip.IPv6Address('2001:db8::1')
        time1, result1 = timefn(n, net.__contains__, addr)
        enet = ipn.IPv6Network('2001:db8::/32')
        eaddr = ipn.IPv6Address('2001:db8::1')
        time2, result2 = timefn(n, enet.__contains__, eaddr)
        results = (time1, result1), (time2, result2)
        self.report_6n.report(fn_name(), n, results, '%s %s' % (net, addr))

    def test_ipv6network_hosts(self):
        """Test the first addresses of IPv6Network.hosts for a huge network."""
        n = 10**4
        net = ip.IPv6Network('::/0')
        time1, result1 = timelist(n, lambda: itertools.islice(net.hosts(), 16))
        enet = ipn.IPv6Network('::/0')
        time2, result2 = timelist(n, lambda: itertools.islice(enet.hosts(), 16))
        results = (time1, result1), (time2, result2)
        self.report_6n.report(fn_name(), n, results, net)

    def test_ipv6network_subnets(self):
        """Test the IPv6Network.subnets method."""
        n = 10**4
        net = ip.IPv6Network('2001:db8::/32')
        time1, result1 = timelist(n, net.subnets, new_prefix=36)
        enet = ipn.IPv6Network('2001:db8::/32')
        time2, result2 = timelist(n, enet.subnets, new_prefix=36)
        results = (time1, result1), (time2, result2)
        self.report_6n.report(fn_name(), n, results, net)

    def test_ipv6network_supernet(self):
        """Test the IPv6Network.supernet method."""
        self._compare(self.report_6n, fn_name(), 10**5, 'IPv6Network',
                      ['2001:db8::/32', '::1/128'], 'supernet')

# =============================================================================

if __name__ == '__main__':
    PerfTest().run(sys.argv[1:])
