""" Time-protocol command builder """

from typing import List, Literal, Union
import re
import shlex

from clocksync.struct.settings import Settings

# Protocol configuration
TP: str = 'tp'  # Time Protocol (rdate)
NTP: str = 'ntp'  # Network Time Protocol (ntpdate)
PROTOCOLS: List[str] = [TP, NTP]

# Mode configuration
GET: str = 'get'  # Read the server time without updating the system clock
SYNC: str = 'sync'  # Read the server time and update the system clock
MODES: List[str] = [GET, SYNC]

# Host names, IPv4 / IPv6 literals and IPv6 zone indices
_SERVER_PATTERN = re.compile(r'[A-Za-z0-9._:%-]+')


def validate_server(server: str) -> str:
    """ Returns {server} when it is safe to pass to an external tool, otherwise raises
    a `clocksync.protocols.CommandError`.

    Parameters
    ----------
    server: `str`
        The time-server name or ip-address.
    """
    if not isinstance(server, str) or not server:
        raise CommandError('Invalid value. {server} cannot be empty.')

    if not _SERVER_PATTERN.fullmatch(server):
        raise CommandError(
            'Invalid value. {server} contains unsupported characters {%r}.' % server
        )

    # A leading dash would be read as a tool option
    if server.startswith('-'):
        raise CommandError(
            'Invalid value. {server} cannot start with `-` {%r}.' % server
        )

    return server


def tool(
    protocol: Literal['tp', 'ntp'],
    settings: Union[Settings, None] = None
) -> str:
    """ Returns the absolute path of the external tool for {protocol}.

    Parameters
    ----------
    protocol: `Literal['tp', 'ntp']`
        The time protocol.
    settings: `Union[clocksync.struct.settings.Settings, None]`
        The `clocksync` settings. Defaults to `clocksync.struct.settings.Settings()`.
    """
    settings = settings or Settings()

    if protocol == TP:
        return settings.rdate
    if protocol == NTP:
        return settings.ntpdate

    raise ValueError(
        "Invalid protocol {%s}. Protocol must be one of ['%s']." % (protocol, "', '".join(PROTOCOLS))
    )


def build(
    protocol: Literal['tp', 'ntp'],
    mode: Literal['get', 'sync'],
    server: str,
    settings: Union[Settings, None] = None
) -> List[str]:
    """ Returns the argument vector that runs the external time-protocol tool against {server}.

    Set-mode commands run through the shell so that the tool output is discarded and only
    its exit-status is written to stdout. The server is always handed to the shell as the
    positional parameter `$1` and is never part of the script text.

    Parameters
    ----------
    protocol: `Literal['tp', 'ntp']`
        The time protocol.
    mode: `Literal['get', 'sync']`
        Whether to only read the server time or to also update the system clock.
    server: `str`
        The time-server name or ip-address.
    settings: `Union[clocksync.struct.settings.Settings, None]`
        The `clocksync` settings. Defaults to `clocksync.struct.settings.Settings()`.
    """
    settings = settings or Settings()

    if mode not in MODES:
        raise ValueError(
            "Invalid mode {%s}. Mode must be one of ['%s']." % (mode, "', '".join(MODES))
        )

    executable = tool(protocol, settings)
    quoted = shlex.quote(executable)
    server = validate_server(server)

    if protocol == TP:
        if mode == GET:
            return [executable, '-p', server]
        return [
            settings.shell, '-c',
            '%s "$1" >/dev/null 2>&1; echo $?' % quoted,
            'rdate', server
        ]

    options = '-t %s -p %d' % (float(settings.ntp_timeout), int(settings.ntp_polls))
    if mode == GET:
        return [
            settings.shell, '-c',
            '%s %s -q "$1"; echo $?' % (quoted, options),
            'ntpdate', server
        ]
    return [
        settings.shell, '-c',
        '%s %s "$1" >/dev/null 2>&1; echo $?' % (quoted, options),
        'ntpdate', server
    ]


# Exception(s)
class CommandError(ValueError):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
