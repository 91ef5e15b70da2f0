""" Time-server addresses """

import ipaddress
import socket


def is_literal_address(address: str) -> bool:
    """ Returns `True` when {address} is an IPv4 or IPv6 address in presentation
    format. No name resolution is performed.

    Parameters
    ----------
    address: `str`
        The time-server name or address.
    """
    if not isinstance(address, str) or not address:
        return False

    try:
        ipaddress.ip_address(address)
        return True
    except ValueError:
        return False


def resolve(name: str) -> str:
    """ Resolves a host name and returns the first resolved ip-address in
    presentation format. Any address family is accepted.

    Parameters
    ----------
    name: `str`
        The time-server host name.
    """
    try:
        records = socket.getaddrinfo(
            name,
            None,
            family=socket.AF_UNSPEC,
            type=socket.SOCK_DGRAM
        )
    except (socket.gaierror, UnicodeError) as e:
        raise ResolutionError(
            'Unable to resolve the host name {%s}. %s' % (name, e)
        ) from e

    for _family, _type, _proto, _canonname, sockaddr in records:
        if sockaddr and sockaddr[0]:

            # IPv6 socket-addresses may carry a scope suffix, e.g. 'fe80::1%eth0'
            return str(sockaddr[0])

    raise ResolutionError(
        'Unable to resolve the host name {%s} into any ip-address.' % name
    )


# Exception(s)
class ResolutionError(Exception):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
