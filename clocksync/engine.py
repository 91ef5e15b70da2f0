""" Clock-synchronization engine """

from typing import Callable, List, Literal, Union
import re
import time

from clocksync import errors, addresses, protocols, parsers, process, platform
from clocksync import logging as clocksync_logging
from clocksync.dal import settings as settings_dal
from clocksync.struct.clock import ClockTime
from clocksync.struct.result import Result
from clocksync.struct.settings import Settings

_STATUS_PATTERN = re.compile(r'^\s*([+-]?\d+)')


class Engine():
    """ A `class` that represents the clock-synchronization engine.

    The engine runs one external time-protocol tool per request and interprets its output.
    It holds no state between requests, so a single instance can serve concurrent callers.
    """

    def __init__(
        self,
        settings: Union[Settings, None] = None,
        resolver: Callable[[str], str] = addresses.resolve,
        builder: Callable[..., List[str]] = protocols.build,
        runner: Callable[..., List[str]] = process.run,
        locate: Callable[[str], bool] = platform.has_tool,
        clock: Callable[[], float] = time.time,
        ntp_query: Union[bool, None] = None,
        logger: Union[clocksync_logging.logger, None] = None
    ):
        """ Creates an instance of the clock-synchronization engine.

        Parameters
        ----------
        settings: `Union[clocksync.struct.settings.Settings, None]`
            The `clocksync` settings. Defaults to `clocksync.struct.settings.Settings()`.
        resolver: `Callable[[str], str]`
            Resolves a host name into an ip-address, raising a
                `clocksync.addresses.ResolutionError` on failure.
        builder: `Callable[..., List[str]]`
            Builds the argument vector of the external tool.
        runner: `Callable[..., List[str]]`
            Runs the argument vector and returns the standard output lines.
        locate: `Callable[[str], bool]`
            Returns `True` when the external tool is installed.
        clock: `Callable[[], float]`
            Returns the current local time in seconds since the epoch.
        ntp_query: `Union[bool, None]`
            Whether get-only Network Time Protocol requests run ntpdate in query mode.
                Defaults to `clocksync.struct.settings.Settings.ntp_query`.
        logger: `Union[clocksync.logging.logger, None]`
            The console logger. Defaults to `clocksync.logging.get_engine_logger()`.
        """
        self.settings = settings or Settings()
        self.resolver = resolver
        self.builder = builder
        self.runner = runner
        self.locate = locate
        self.clock = clock
        self.ntp_query = self.settings.ntp_query if ntp_query is None else bool(ntp_query)
        self.logger = logger or clocksync_logging.get_engine_logger()

    def get(self, server: str, protocol: Literal['tp', 'ntp']) -> Result:
        """ Returns the server time without updating the system clock.

        Parameters
        ----------
        server: `str`
            The time-server name or ip-address.
        protocol: `Literal['tp', 'ntp']`
            The time protocol.
        """
        return self.execute(server=server, protocol=protocol, mode=protocols.GET)

    def sync(self, server: str, protocol: Literal['tp', 'ntp']) -> Result:
        """ Updates the system clock from the server time.

        Parameters
        ----------
        server: `str`
            The time-server name or ip-address.
        protocol: `Literal['tp', 'ntp']`
            The time protocol.
        """
        return self.execute(server=server, protocol=protocol, mode=protocols.SYNC)

    def execute(
        self,
        server: str,
        protocol: Literal['tp', 'ntp'],
        mode: Literal['get', 'sync']
    ) -> Result:
        """ Retrieves the server time, and updates the system clock in `sync` mode. Failures
        are returned as a `clocksync.struct.result.Result` with a non-zero code, this method
        does not raise.

        Parameters
        ----------
        server: `str`
            The time-server name or ip-address.
        protocol: `Literal['tp', 'ntp']`
            The time protocol.
        mode: `Literal['get', 'sync']`
            Whether to only read the server time or to also update the system clock.
        """
        try:
            return self._execute(server=server, protocol=protocol, mode=mode)
        except Exception as e:
            return self._fail(
                errors.FAULT,
                'Unexpected failure getting the time from {%s}. %s: %s' % (server, type(e).__name__, e)
            )

    def _execute(
        self,
        server: str,
        protocol: Literal['tp', 'ntp'],
        mode: Literal['get', 'sync']
    ) -> Result:

        # Validate the request
        if not isinstance(server, str) or not server.strip():
            return self._fail(errors.INVALID_ARGUMENT, 'Invalid value. {server} cannot be empty.')
        if protocol not in protocols.PROTOCOLS:
            return self._fail(
                errors.INVALID_ARGUMENT,
                "Invalid protocol {%s}. Protocol must be one of ['%s']." % (
                    protocol, "', '".join(protocols.PROTOCOLS)
                )
            )
        if mode not in protocols.MODES:
            return self._fail(
                errors.INVALID_ARGUMENT,
                "Invalid mode {%s}. Mode must be one of ['%s']." % (
                    mode, "', '".join(protocols.MODES)
                )
            )

        # ntpdate only reports an offset, not an absolute time, outside of query mode
        if protocol == protocols.NTP and mode == protocols.GET and not self.ntp_query:
            return self._fail(
                errors.UNSUPPORTED,
                'Get-only requests are not supported with the Network Time Protocol.'
            )

        # Resolve the server
        if addresses.is_literal_address(server):
            address = server
        else:
            try:
                address = self.resolver(server)
            except addresses.ResolutionError as e:
                return self._fail(errors.NOT_FOUND, 'Time server {%s} not found. %s' % (server, e))
            self.logger.debug('Time server {%s} resolved to {%s}.' % (server, address))

        # Check the external tool
        tool = protocols.tool(protocol, self.settings)
        if not self.locate(tool):
            return self._fail(errors.UNSUPPORTED, 'The external tool {%s} is not installed.' % tool)
        if mode == protocols.SYNC or protocol == protocols.NTP:
            if not self.locate(self.settings.shell):
                return self._fail(errors.UNSUPPORTED, 'The shell {%s} is not installed.' % self.settings.shell)

        # Build the command
        try:
            argv = self.builder(protocol, mode, address, self.settings)
        except protocols.CommandError as e:
            return self._fail(errors.INVALID_ARGUMENT, str(e))

        # Run the command
        self.logger.debug('Running {%s}.' % ' '.join(argv))
        try:
            lines = self.runner(argv, self.settings.deadline or None)
        except platform.PlatformError as e:
            return self._fail(errors.UNSUPPORTED, str(e))
        except process.ProcessTimeoutError as e:
            return self._fail(errors.TIMEOUT, str(e))
        except process.ProcessLaunchError as e:
            return self._fail(errors.FAULT, str(e))

        if mode == protocols.GET:
            return self._read_time(server, protocol, lines)
        return self._read_status(server, lines)

    def _read_time(
        self,
        server: str,
        protocol: Literal['tp', 'ntp'],
        lines: List[str]
    ) -> Result:
        """ Returns the server time parsed from the output lines of a get-only command. """
        parser = parsers.get_parser(protocol, clock=self.clock)
        time_: Union[ClockTime, None] = None

        for line in lines:
            try:
                parsed = parser.parse(line)
            except parsers.OutputNotFoundError:
                continue
            except parsers.OutputParseError as e:
                self.logger.debug(str(e))
                continue

            time_ = parsed
            if not parser.keep_last:
                break

        if time_ is None:
            return self._fail(errors.UNAVAILABLE, 'Failed to get the time from {%s}.' % server)

        self.logger.info(
            'Time from {%s} is %04d/%02d/%02d %02d:%02d:%02d.' % (
                server,
                time_.year, time_.month, time_.day,
                time_.hour, time_.minute, time_.second
            )
        )
        return Result(code=errors.OK, time=time_, message='Time retrieved from {%s}.' % server)

    def _read_status(self, server: str, lines: List[str]) -> Result:
        """ Returns the outcome of a set-mode command from the exit-status it reports. """
        for line in lines:
            if not line.strip():
                continue

            match = _STATUS_PATTERN.match(line)
            if not match:
                return self._fail(
                    errors.FAULT,
                    'Unrecognized status {%s} synchronizing with {%s}.' % (line.strip(), server)
                )

            status = int(match.group(1))
            self.logger.info('Result: %d' % status)
            if status != 0:
                return self._fail(
                    errors.FAULT,
                    'Synchronizing with {%s} failed with status {%d}.' % (server, status)
                )

            return Result(code=errors.OK, message='System clock synchronized with {%s}.' % server)

        return self._fail(errors.UNAVAILABLE, 'No status reported synchronizing with {%s}.' % server)

    def _fail(self, code: int, message: str) -> Result:
        """ Logs and returns a failed `clocksync.struct.result.Result`. """
        if code in [errors.FAULT, errors.TIMEOUT]:
            self.logger.error(message)
        else:
            self.logger.warning(message)
        return Result(code=code, message=message)


def sync_with_time_protocol(
    server: str,
    get_only: bool,
    settings: Union[Settings, None] = None
) -> Result:
    """ Retrieves the time from {server} with the Time Protocol (rdate), and updates the
    system clock unless {get_only}.

    Parameters
    ----------
    server: `str`
        The time-server name or ip-address.
    get_only: `bool`
        Whether to only read the server time.
    settings: `Union[clocksync.struct.settings.Settings, None]`
        The `clocksync` settings. Defaults to the saved settings in `~/.clocksync/settings.json`.
    """
    return Engine(settings=settings or settings_dal.get_settings()).execute(
        server=server,
        protocol=protocols.TP,
        mode=protocols.GET if get_only else protocols.SYNC
    )


def sync_with_network_time_protocol(
    server: str,
    get_only: bool,
    settings: Union[Settings, None] = None
) -> Result:
    """ Retrieves the time from {server} with the Network Time Protocol (ntpdate), and
    updates the system clock unless {get_only}.

    Parameters
    ----------
    server: `str`
        The time-server name or ip-address.
    get_only: `bool`
        Whether to only read the server time.
    settings: `Union[clocksync.struct.settings.Settings, None]`
        The `clocksync` settings. Defaults to the saved settings in `~/.clocksync/settings.json`.
    """
    return Engine(settings=settings or settings_dal.get_settings()).execute(
        server=server,
        protocol=protocols.NTP,
        mode=protocols.GET if get_only else protocols.SYNC
    )
