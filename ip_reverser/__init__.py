from .canonical import expand_ipv6
from .classifier import AddressFamily, classify, is_valid_ip, is_valid_ipv4, is_valid_ipv6
from .errors import ExpansionError, InvalidAddress
from .extractor import (
    IPV4_MAPPED_PREFIX,
    UNKNOWN,
    ClientAddressHeaders,
    ClientAddressSource,
    extract_client_address,
    extract_client_ip,
    normalize_ip,
)
from .reverser import (
    Err,
    Ok,
    Result,
    ReversalRecord,
    reversal,
    reverse_ip,
    reverse_ipv4,
    reverse_ipv6,
    try_reverse_ip,
)

__version__ = '1.0.0'

__all__ = [
    'IPV4_MAPPED_PREFIX',
    'UNKNOWN',
    'AddressFamily',
    'ClientAddressHeaders',
    'ClientAddressSource',
    'Err',
    'ExpansionError',
    'InvalidAddress',
    'Ok',
    'Result',
    'ReversalRecord',
    'classify',
    'expand_ipv6',
    'extract_client_address',
    'extract_client_ip',
    'is_valid_ip',
    'is_valid_ipv4',
    'is_valid_ipv6',
    'normalize_ip',
    'reversal',
    'reverse_ip',
    'reverse_ipv4',
    'reverse_ipv6',
    'try_reverse_ip',
]
