""" Time-protocol output parsers

The external tools report the server time as text, one parser per protocol
converts a single output line into a `clocksync.struct.clock.ClockTime`.
"""

from typing import Callable, Literal, Union
import re
import time

from clocksync.struct.clock import ClockTime

# rdate -p, e.g. 'Tue Jan 02 15:04:05 2024'
TP_FORMAT: str = '%a %b %d %H:%M:%S %Y'

# ntpdate, e.g. '1 Jan 07:33:20 ntpdate[29329]: step time server 5.196.160.139 offset 1558374338.202418 sec'
NTP_MARKER: str = 'ntpdate'
NTP_OFFSET_MARKER: str = 'offset '
NTP_UNIT_MARKER: str = ' sec'
_LEADING_INTEGER = re.compile(r'^\s*([+-]?\d+)')


class TimeProtocolParser():
    """ A `class` that represents the parser of the Time Protocol (rdate) output. """

    # A later line never supersedes a parsed time
    keep_last: bool = False

    def parse(self, line: str) -> ClockTime:
        """ Returns the server time reported on an `rdate -p` output line.

        Parameters
        ----------
        line: `str`
            A line of the rdate output.
        """
        if not isinstance(line, str):
            raise OutputParseError('Invalid value. {line} must be a `str`.')

        try:
            struct_time = time.strptime(line.strip(), TP_FORMAT)
        except ValueError as e:
            raise OutputParseError(
                'Unable to parse the Time Protocol output {%r}. %s' % (line.strip(), e)
            ) from e

        return ClockTime.from_struct_time(struct_time)


class NetworkTimeProtocolParser():
    """ A `class` that represents the parser of the Network Time Protocol (ntpdate) output.

    ntpdate reports the offset of the local clock from the server rather than an absolute
    time, so the server time is the current local time plus the offset, sampled when the
    line is parsed.
    """

    # ntpdate reports the final offset last
    keep_last: bool = True

    def __init__(self, clock: Callable[[], float] = time.time):
        """ Creates an instance of the Network Time Protocol output parser.

        Parameters
        ----------
        clock: `Callable[[], float]`
            Returns the current local time in seconds since the epoch.
        """
        self.clock = clock

    def offset(self, line: str) -> int:
        """ Returns the offset in whole seconds reported on an ntpdate output line. Any
        fractional part is truncated.

        Parameters
        ----------
        line: `str`
            A line of the ntpdate output.
        """
        if not isinstance(line, str) or NTP_MARKER not in line:
            raise OutputNotFoundError('No ntpdate report found.')

        start = line.find(NTP_OFFSET_MARKER)
        if start < 0:
            raise OutputNotFoundError('No ntpdate offset found {%r}.' % line.strip())
        start += len(NTP_OFFSET_MARKER)

        end = line.find(NTP_UNIT_MARKER, start)
        if end < 0:
            raise OutputNotFoundError('No ntpdate offset unit found {%r}.' % line.strip())

        match = _LEADING_INTEGER.match(line[start:end])
        if not match:
            raise OutputNotFoundError('No ntpdate offset value found {%r}.' % line.strip())

        return int(match.group(1))

    def parse(self, line: str) -> ClockTime:
        """ Returns the server time derived from the offset on an ntpdate output line.

        Parameters
        ----------
        line: `str`
            A line of the ntpdate output.
        """
        offset = self.offset(line)
        now = int(self.clock())

        try:
            struct_time = time.localtime(now + offset)
        except (OverflowError, OSError, ValueError) as e:
            raise OutputParseError(
                'Unable to convert the ntpdate offset {%d} to a local time. %s' % (offset, e)
            ) from e

        return ClockTime.from_struct_time(struct_time)


def get_parser(
    protocol: Literal['tp', 'ntp'],
    clock: Callable[[], float] = time.time
) -> Union[TimeProtocolParser, NetworkTimeProtocolParser]:
    """ Returns the output parser for {protocol}.

    Parameters
    ----------
    protocol: `Literal['tp', 'ntp']`
        The time protocol.
    clock: `Callable[[], float]`
        Returns the current local time in seconds since the epoch.
    """
    if protocol == 'ntp':
        return NetworkTimeProtocolParser(clock=clock)
    if protocol == 'tp':
        return TimeProtocolParser()

    raise ValueError(
        "Invalid protocol {%s}. Protocol must be one of ['%s']." % (protocol, "', '".join(['tp', 'ntp']))
    )


# Exception(s)
class OutputParseError(Exception):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)


class OutputNotFoundError(Exception):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
