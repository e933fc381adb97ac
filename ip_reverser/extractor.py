from dataclasses import dataclass
from typing import Optional, Protocol

IPV4_MAPPED_PREFIX = '::ffff:'
UNKNOWN = 'unknown'


class ClientAddressSource(Protocol):
    """
    Anything that can hand over the three values used to find a client address
    """

    forwarded: Optional[str]
    real_ip: Optional[str]
    remote_addr: Optional[str]


@dataclass(frozen=True)
class ClientAddressHeaders:
    forwarded: Optional[str] = None
    real_ip: Optional[str] = None
    remote_addr: Optional[str] = None


def normalize_ip(ip: str) -> str:
    """
    Strip the IPv4-mapped IPv6 prefix
    Example: ::ffff:192.168.1.1 -> 192.168.1.1

    This is a plain prefix check, what follows the prefix is not validated.
    """
    if ip.startswith(IPV4_MAPPED_PREFIX):
        return ip[len(IPV4_MAPPED_PREFIX):]
    return ip


def extract_client_ip(source: ClientAddressSource) -> str:
    """
    Get the client's real IP address from proxy headers and the connection.

    Priority: X-Forwarded-For (first entry) -> X-Real-IP -> connection
    address. Header values are returned as-is and are not validated, only
    the connection address has its ::ffff: prefix removed. Returns
    "unknown" when nothing is available.
    """
    forwarded = source.forwarded
    if forwarded:
        # X-Forwarded-For can contain multiple IPs, take the first one
        return forwarded.split(',')[0].strip()

    if source.real_ip:
        return source.real_ip

    if source.remote_addr:
        return normalize_ip(source.remote_addr)

    return UNKNOWN


def extract_client_address(forwarded=None, real_ip=None, remote_addr=None) -> str:
    """
    Keyword form of extract_client_ip for callers without a source object
    """
    return extract_client_ip(
        ClientAddressHeaders(forwarded=forwarded, real_ip=real_ip, remote_addr=remote_addr)
    )
