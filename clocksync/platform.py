""" Operating-system management """

from typing import Callable, List, Literal, Union
import os
import functools
import dotenv
import platform

# Load the dietpi os environment
dotenv.load_dotenv('/boot/dietpi/.version')

NAME = 'dietpi' if os.getenv('G_DIETPI_VERSION_CORE') else platform.system().strip().lower()
VERSION = '.'.join([
    os.getenv('G_DIETPI_VERSION_CORE', '0'),
    os.getenv('G_DIETPI_VERSION_SUB', '0'),
    os.getenv('G_DIETPI_VERSION_RC', '0')
]) if os.getenv('G_DIETPI_VERSION_CORE') else platform.version().strip().lower()

PLATFORMS: List[str] = ['any', 'posix', 'dietpi', 'windows', 'linux', 'darwin']
POSIX: List[str] = ['dietpi', 'linux', 'darwin']


def is_supported(
    platform_: Literal['any', 'posix', 'dietpi', 'windows', 'linux', 'darwin'],
    name: Union[str, None] = None
) -> bool:
    """ Returns `True` when the platform {name} satisfies the required platform.

    Parameters
    ----------
    platform_: `Literal['any', 'posix', 'dietpi', 'windows', 'linux', 'darwin']`
        The required platform.
    name: `Union[str, None]`
        The platform name to check. Defaults to the current platform.
    """
    required = platform_.strip().lower()
    name = (name or NAME).strip().lower()

    if required == 'any':
        return True
    if required == 'posix':
        return name in POSIX
    if required == 'linux':
        return name in ['linux', 'dietpi']  # DietPi is a linux distribution
    return name == required


def has_tool(path: str) -> bool:
    """ Returns `True` when an executable file exists at {path}.

    Parameters
    ----------
    path: `str`
        The absolute path of the external tool.
    """
    return os.path.isfile(path) and os.access(path, os.X_OK)


# Decorator function(s)
def requires(
    platform_: Literal['any', 'posix', 'dietpi', 'windows', 'linux', 'darwin'] = 'any'
) -> Callable:
    """ Raises an exception when the function is called on an unsupported platform.

    Parameters
    ----------
    platform_: `Literal['any', 'posix', 'dietpi', 'windows', 'linux', 'darwin'] = 'any'`
        The required platform. Default='any'.
    """

    if platform_.strip().lower() not in PLATFORMS:
        raise ValueError(
            "Invalid platform {%s}. Platform must be one of ['%s']." % (
                platform_.strip().lower(),
                "', '".join(PLATFORMS)
            )
        )

    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):

            # Check the platform
            if not is_supported(platform_):
                raise PlatformError(
                    "Invalid platform {%s}. %s() requires {%s}." % (
                        NAME.strip().lower(),
                        func.__name__,
                        platform_.strip().lower()
                    )
                )

            return func(*args, **kwargs)
        return wrapper

    return decorator


# Exception(s)
class PlatformError(RuntimeError):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
