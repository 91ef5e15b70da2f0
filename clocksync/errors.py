""" Static result codes """

from typing import Dict
import errno

OK: int = 0
INVALID_ARGUMENT: int = errno.EINVAL  # Empty server, unknown protocol or mode
NOT_FOUND: int = errno.EHOSTUNREACH  # The server name could not be resolved
UNAVAILABLE: int = errno.ENODATA  # No usable time was found in the tool output
UNSUPPORTED: int = errno.EOPNOTSUPP  # Unsupported protocol / mode, platform or missing tool
FAULT: int = errno.EIO  # Launch failure, non-zero status or unclassified failure
TIMEOUT: int = errno.ETIMEDOUT  # The caller deadline expired

NAMES: Dict[int, str] = {
    OK: 'ok',
    INVALID_ARGUMENT: 'invalid-argument',
    NOT_FOUND: 'not-found',
    UNAVAILABLE: 'unavailable',
    UNSUPPORTED: 'unsupported',
    FAULT: 'fault',
    TIMEOUT: 'timeout'
}


def name(code: int) -> str:
    """ Returns the name of a result code.

    Parameters
    ----------
    code: `int`
        The result code.
    """
    try:
        return NAMES[code]
    except KeyError:
        raise ValueError('Unknown result code {%s}.' % code)
