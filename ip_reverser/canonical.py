from .errors import ExpansionError

IPV6_GROUPS = 8
GROUP_WIDTH = 4


def expand_ipv6(ip: str) -> str:
    """
    Expand a compressed IPv6 address to its full 8-group form
    Example: 2001:db8::8a2e:370:7334 -> 2001:0db8:0000:0000:0000:8a2e:0370:7334

    The address must already have passed is_valid_ipv6; nothing is validated
    here. Digit case is preserved.
    """
    if '::' in ip:
        left, right = ip.split('::', 1)
        left_groups = left.split(':') if left else []
        right_groups = right.split(':') if right else []

        missing = IPV6_GROUPS - len(left_groups) - len(right_groups)
        if missing < 0:
            raise ExpansionError(
                f"Cannot expand {ip!r}: {len(left_groups) + len(right_groups)} groups "
                f"around '::'"
            )
        ip = ':'.join(left_groups + ['0000'] * missing + right_groups)

    return ':'.join(group.rjust(GROUP_WIDTH, '0') for group in ip.split(':'))
