""" clocksync

`clocksync` is a clock-synchronization client that reads or sets the local
system time from a time server using the Time Protocol or the Network Time
Protocol.
"""

from typing import List

from clocksync import errors, logging, platform, addresses, protocols, parsers, process, struct, dal, engine
from clocksync.protocols import TP, NTP, GET, SYNC
from clocksync.engine import Engine, sync_with_time_protocol, sync_with_network_time_protocol

__all__ = [
    'errors', 'logging', 'platform', 'addresses', 'protocols', 'parsers', 'process', 'struct', 'dal',
    'engine', 'Engine', 'sync_with_time_protocol', 'sync_with_network_time_protocol',
    'TP', 'NTP', 'GET', 'SYNC'
]

# Logo
LOGO: List[str] = [
    r"      _            _                         ",
    r"  ___| | ___   ___| | _____ _   _ _ __   ___ ",
    r" / __| |/ _ \ / __| |/ / __| | | | '_ \ / __|",
    r"| (__| | (_) | (__|   <\__ \ |_| | | | | (__ ",
    r" \___|_|\___/ \___|_|\_\___/\__, |_| |_|\___|",
    r"                            |___/            "
]
NAME: str = 'clocksync'
DESCRIPTION: str = ''.join([
    '`clocksync` reads or sets the local system time from a time server using',
    ' the Time Protocol or the Network Time Protocol.'
])
