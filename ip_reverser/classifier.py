import enum
import re
from typing import Optional

# 25[0-5] | 2[0-4]d | [01]?d?d, leading zeros are accepted ("01", "001")
_OCTET = r'(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)'

IPV4_PATTERN = re.compile(r'{0}\.{0}\.{0}\.{0}'.format(_OCTET))

_HEX = r'[0-9a-fA-F]{1,4}'
_EMBEDDED_OCTET = r'(?:25[0-5]|(?:2[0-4]|1?[0-9])?[0-9])'
_EMBEDDED_IPV4 = r'(?:{0}\.){{3}}{0}'.format(_EMBEDDED_OCTET)

IPV6_PATTERN = re.compile('|'.join([
    # 1:2:3:4:5:6:7:8
    r'(?:{h}:){{7}}{h}',
    # 1::  1:2:3:4:5:6:7::
    r'(?:{h}:){{1,7}}:',
    # 1::8  1:2:3:4:5:6::8
    r'(?:{h}:){{1,6}}:{h}',
    r'(?:{h}:){{1,5}}(?::{h}){{1,2}}',
    r'(?:{h}:){{1,4}}(?::{h}){{1,3}}',
    r'(?:{h}:){{1,3}}(?::{h}){{1,4}}',
    r'(?:{h}:){{1,2}}(?::{h}){{1,5}}',
    r'{h}:(?::{h}){{1,6}}',
    # ::2:3:4:5:6:7:8  ::
    r':(?:(?::{h}){{1,7}}|:)',
    # fe80::7:8%eth0 (link-local with zone index)
    r'fe80:(?::[0-9a-fA-F]{{0,4}}){{0,4}}%[0-9a-zA-Z]+',
    # ::255.255.255.255  ::ffff:255.255.255.255  ::ffff:0:255.255.255.255
    r'::(?:ffff(?::0{{1,4}})?:)?{v4}',
    # 2001:db8:3:4::192.0.2.33  64:ff9b::192.0.2.33
    r'(?:{h}:){{1,4}}:{v4}',
]).format(h=_HEX, v4=_EMBEDDED_IPV4))

# zero-width so that ":::" counts as two overlapping compressions
_COMPRESSION = re.compile(r'(?=::)')


class AddressFamily(enum.Enum):
    IPV4 = 'IPv4'
    IPV6 = 'IPv6'


def is_valid_ipv4(ip) -> bool:
    """
    Check that a string is four dot-separated octets in 0-255
    Example: 192.168.1.1 -> True, 256.1.1.1 -> False
    """
    if not isinstance(ip, str):
        return False
    return IPV4_PATTERN.fullmatch(ip) is not None


def is_valid_ipv6(ip) -> bool:
    """
    Check that a string is an IPv6 address.

    Accepts every legal ``::`` placement, the ``fe80::...%zone`` link-local
    form and addresses with an embedded IPv4 tail (``::ffff:1.2.3.4``).
    At most one ``::`` is allowed.
    """
    if not isinstance(ip, str):
        return False
    if len(_COMPRESSION.findall(ip)) > 1:
        return False
    return IPV6_PATTERN.fullmatch(ip) is not None


def is_valid_ip(ip) -> bool:
    return is_valid_ipv4(ip) or is_valid_ipv6(ip)


def classify(ip) -> Optional[AddressFamily]:
    """
    Return the address family of a string, or None when it is neither
    """
    if is_valid_ipv4(ip):
        return AddressFamily.IPV4
    if is_valid_ipv6(ip):
        return AddressFamily.IPV6
    return None
