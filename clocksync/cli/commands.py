""" Clocksync commands """

from typing import Literal
import clocksync
from clocksync import engine, errors, logging
from clocksync.dal import settings as settings_dal


# Define clocksync sub-command function(s)
def get(
    protocol: Literal['tp', 'ntp'],
    server: str
) -> int:
    """ Prints the time of a time server and returns the result code.

    Parameters
    ----------
    protocol : `Literal['tp', 'ntp']`
        The time protocol.
    server : `str`
        The time-server name or ip-address.

    Help
    ----
    usage: clocksync get [-h] {tp,ntp} server

    positional arguments:
    {tp,ntp}  The time protocol.
    server    The time-server name or ip-address.

    options:
    -h, --help  show this help message and exit

    Examples
    --------
    ``` console
    clocksync get tp time.nist.gov
    ```

    """
    logger = logging.get_cli_logger()
    engine_ = engine.Engine(settings=settings_dal.get_settings())

    result = engine_.get(server=server, protocol=protocol)
    if result.ok:
        logger.message(result.time.to_datetime().isoformat(sep=' '))
    else:
        logger.error('%s (%s)' % (result.message, result.name))

    return result.code


def sync(
    protocol: Literal['tp', 'ntp'],
    server: str
) -> int:
    """ Synchronizes the system clock with a time server and returns the result code.

    Parameters
    ----------
    protocol : `Literal['tp', 'ntp']`
        The time protocol.
    server : `str`
        The time-server name or ip-address.

    Help
    ----
    usage: clocksync sync [-h] {tp,ntp} server

    Examples
    --------
    ``` console
    sudo clocksync sync ntp pool.ntp.org
    ```

    """
    logger = logging.get_cli_logger()
    engine_ = engine.Engine(settings=settings_dal.get_settings())

    result = engine_.sync(server=server, protocol=protocol)
    if result.ok:
        logger.message(result.message)
    else:
        logger.error('%s (%s)' % (result.message, result.name))

    return result.code


def config(reset: bool = False) -> int:
    """ Prints the `clocksync` settings, restoring the defaults when {reset}.

    Parameters
    ----------
    reset : `bool`
        Whether to restore the default settings.
    """
    logger = logging.get_cli_logger()

    # Logging
    for line in clocksync.LOGO:
        logger.message(line)
    logger.message('')
    logger.message('    %s' % clocksync.DESCRIPTION)
    logger.message('')

    if reset:
        settings_dal.delete()
        logger.info('Restored the default settings.')

    logger.message(repr(settings_dal.get_settings()))
    return errors.OK
