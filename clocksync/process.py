""" External-process execution """

from typing import List, Union
import os
import signal
import subprocess

from clocksync import platform


@platform.requires('posix')
def run(
    argv: List[str],
    deadline: Union[float, None] = None
) -> List[str]:
    """ Runs an external command, waits for it to exit and returns its standard output
    as a list of lines. The standard error is discarded.

    The command runs in its own session, so on time-out the whole process group is
    killed, including any tool started by a wrapping shell.

    Parameters
    ----------
    argv: `List[str]`
        The argument vector of the command.
    deadline: `Union[float, None]`
        The time-out in seconds. The command is killed when it expires. `None` or 0 waits
            indefinitely.
    """
    if not argv:
        raise ProcessLaunchError('Invalid value. {argv} cannot be empty.')

    try:
        proc = subprocess.Popen(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
            text=True,
            errors='replace',
            start_new_session=True
        )
    except OSError as e:
        raise ProcessLaunchError(
            'Unable to run the command {%s}. %s' % (argv[0], e)
        ) from e

    # Closes the standard output and reaps the command on every exit path
    with proc:
        try:
            stdout, _ = proc.communicate(timeout=deadline or None)
        except subprocess.TimeoutExpired as e:
            kill(proc)
            raise ProcessTimeoutError(
                'The command {%s} did not exit within %.1f [sec.].' % (argv[0], deadline)
            ) from e

    return stdout.splitlines()


def kill(proc: subprocess.Popen):
    """ Kills the process group of a command started by `clocksync.process.run()` and
    reaps the command.

    Parameters
    ----------
    proc: `subprocess.Popen`
        The running command.
    """
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass  # The process group has already exited
    proc.wait()


# Exception(s)
class ProcessLaunchError(Exception):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)


class ProcessTimeoutError(Exception):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
