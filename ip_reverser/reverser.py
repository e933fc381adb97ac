from dataclasses import dataclass
from typing import Union

from .canonical import expand_ipv6
from .classifier import AddressFamily, classify, is_valid_ipv4, is_valid_ipv6
from .errors import InvalidAddress


@dataclass(frozen=True)
class Ok:
    value: str


@dataclass(frozen=True)
class Err:
    error: InvalidAddress


Result = Union[Ok, Err]


@dataclass(frozen=True)
class ReversalRecord:
    original_ip: str
    reversed_ip: str
    family: AddressFamily

    def to_dict(self):
        return {
            'original_ip': self.original_ip,
            'reversed_ip': self.reversed_ip,
            'family': self.family.value,
        }


def reverse_ipv4(ip: str) -> str:
    """
    Reverse the octets of an IPv4 address
    Example: 192.168.1.1 -> 1.1.168.192
    """
    if not is_valid_ipv4(ip):
        raise InvalidAddress('Invalid IPv4 address', ip)

    return '.'.join(ip.split('.')[::-1])


def reverse_ipv6(ip: str) -> str:
    """
    Reverse the group order of an IPv6 address
    Example: 2001:0db8:85a3:0000:0000:8a2e:0370:7334 -> 7334:0370:8a2e:0000:0000:85a3:0db8:2001

    The result is always the expanded form, compressed input comes back
    with every group spelled out.
    """
    if not is_valid_ipv6(ip):
        raise InvalidAddress('Invalid IPv6 address', ip)

    return ':'.join(expand_ipv6(ip).split(':')[::-1])


def reverse_ip(ip: str) -> str:
    """
    Reverse any valid IPv4 or IPv6 address
    """
    family = classify(ip)
    if family is AddressFamily.IPV4:
        return reverse_ipv4(ip)
    if family is AddressFamily.IPV6:
        return reverse_ipv6(ip)
    raise InvalidAddress('Invalid IP address format', ip)


def try_reverse_ip(ip: str) -> Result:
    """
    Like reverse_ip, but hand back Ok(reversed) or Err(InvalidAddress)
    instead of raising.
    """
    try:
        return Ok(reverse_ip(ip))
    except InvalidAddress as e:
        return Err(e)


def reversal(ip: str) -> ReversalRecord:
    family = classify(ip)
    if family is None:
        raise InvalidAddress('Invalid IP address format', ip)
    return ReversalRecord(original_ip=ip, reversed_ip=reverse_ip(ip), family=family)
