""" Settings """

from __future__ import annotations
from dataclasses import dataclass, field
import json
from pytensils import config


# Tool configuration
RDATE: str = '/usr/sbin/rdate'  # The Time Protocol (TP) client
NTPDATE: str = '/usr/sbin/ntpdate'  # The Network Time Protocol (NTP) client
SHELL: str = '/bin/sh'  # The shell that reports the exit-status of the set-mode tools

# Network time protocol configuration
NTP_TIMEOUT: float = 1.0  # The ntpdate server time-out in seconds
NTP_POLLS: int = 1  # The number of samples ntpdate acquires from the server
NTP_QUERY: bool = False  # Whether get-only requests may use ntpdate query mode

# Orchestration configuration
DEADLINE: float = 0.0  # The time-out in seconds for the external tool, 0 waits indefinitely


@dataclass
class Settings():
    """ A `class` that represents the `clocksync` settings.

    Attributes
    ----------
    rdate: `str`
        The absolute path of the Time Protocol client.
    ntpdate: `str`
        The absolute path of the Network Time Protocol client.
    shell: `str`
        The absolute path of the shell used for set-mode commands.
    ntp_timeout: `float`
        The ntpdate server time-out in seconds.
    ntp_polls: `int`
        The number of samples ntpdate acquires from the server.
    ntp_query: `bool`
        Whether get-only Network Time Protocol requests run ntpdate in query mode.
    deadline: `float`
        The time-out in seconds for the external tool, 0 waits indefinitely.
    """
    rdate: str = field(default=RDATE)
    ntpdate: str = field(default=NTPDATE)
    shell: str = field(default=SHELL)
    ntp_timeout: float = field(default=NTP_TIMEOUT)
    ntp_polls: int = field(default=NTP_POLLS)
    ntp_query: bool = field(default=NTP_QUERY)
    deadline: float = field(default=DEADLINE)

    def __post_init__(self):
        """ Validates the numeric settings. """
        if float(self.ntp_timeout) <= 0:
            raise ValueError('Invalid value. {ntp_timeout} must be greater than 0.')
        if int(self.ntp_polls) < 1:
            raise ValueError('Invalid value. {ntp_polls} must be at least 1.')
        if float(self.deadline) < 0:
            raise ValueError('Invalid value. {deadline} cannot be negative.')

    def from_dict(dict_object: dict) -> Settings:
        """ Returns a `clocksync.struct.settings.Settings` object from a `dict`.

        Parameters
        ----------
        dict_object : `dict`
            The dictionary object to convert to a `clocksync.struct.settings.Settings` object.
        """

        # Assert object type
        if not isinstance(dict_object, dict):
            raise TypeError('Object must be a `dict`.')

        # Assert keys
        missing_keys = [
            key for key in ['rdate', 'ntpdate', 'shell', 'ntp_timeout', 'ntp_polls', 'ntp_query', 'deadline']
            if key not in dict_object
        ]
        if missing_keys:
            raise KeyError(
                'Missing keys. The `dict` object is missing the following required keys [%s].' % (
                    ','.join(["'%s'" % (key) for key in missing_keys])
                )
            )

        return Settings(
            rdate=dict_object['rdate'],
            ntpdate=dict_object['ntpdate'],
            shell=dict_object['shell'],
            ntp_timeout=float(dict_object['ntp_timeout']),
            ntp_polls=int(dict_object['ntp_polls']),
            ntp_query=bool(dict_object['ntp_query']),
            deadline=float(dict_object['deadline'])
        )

    def from_config(config: config.Handler) -> Settings:
        """ Returns a `clocksync.struct.settings.Settings` object from a `pytensils.config.Handler` object.

        Parameters
        ----------
        config: `pytensils.config.Handler`
            An instance of an `pytensils.config.Handler` object.
        """
        return Settings.from_dict(config.to_dict()['settings'])

    def to_dict(self):
        """ Returns the `clocksync.struct.settings.Settings` object as a `dict`. """
        return {
            'rdate': self.rdate,
            'ntpdate': self.ntpdate,
            'shell': self.shell,
            'ntp_timeout': self.ntp_timeout,
            'ntp_polls': self.ntp_polls,
            'ntp_query': self.ntp_query,
            'deadline': self.deadline
        }

    def __repr__(self):
        """ Returns the `clocksync.struct.settings.Settings` object as a json-formatted `str`. """
        return json.dumps(self.to_dict(), indent=2)

    def __eq__(self, compare):
        """ Returns `True` when compare is an instance of self.

        Parameters
        ----------
        compare: `clocksync.struct.settings.Settings`
            An instance of a `clocksync.struct.settings.Settings` object.
        """
        if isinstance(compare, Settings):
            return self.to_dict() == compare.to_dict()
        return False
