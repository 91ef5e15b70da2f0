""" Command-line utility """

from typing import List, Union
import sys
import errno
import argparse
import clocksync
from clocksync.cli import commands


# Define clocksync CLI tool function(s)
def main(argv: Union[List[str], None] = None) -> int:
    """
    usage: clocksync [-h] {get,sync,config} ...

    CLI application for reading or setting the system time from a time server.

    options:
    -h, --help  show this help message and exit

    commands:
    The `clocksync` command options.

    {get,sync,config}
        get       Prints the time of a time server.
        sync      Synchronizes the system clock with a time server.
        config    Shows or resets the `clocksync` settings.

    Execute `clocksync {command} --help` for more help.
    """

    # Setup CLI argument option(s)
    _ARG_PARSER = argparse.ArgumentParser(
        prog='clocksync',
        description=clocksync.DESCRIPTION,
        epilog="Execute `clocksync {command} --help` for more help."
    )

    # Setup command argument option(s)
    _ARG_SUBPARSER = _ARG_PARSER.add_subparsers(
        title='commands',
        prog='clocksync',
        description='The `clocksync` command options.'
    )

    # Setup `get` and `sync` command CLI argument option(s)
    for name, help_, func in [
        ('get', 'Prints the time of a time server.', commands.get),
        ('sync', 'Synchronizes the system clock with a time server.', commands.sync)
    ]:
        _PARSER = _ARG_SUBPARSER.add_parser(
            name=name,
            help=help_,
            epilog="Execute `clocksync %s --help` for help." % name
        )
        _PARSER.add_argument(
            'protocol',
            help="The time protocol.",
            type=str,
            choices=['tp', 'ntp']
        )
        _PARSER.add_argument(
            'server',
            help="The time-server name or ip-address.",
            type=str
        )
        _PARSER.set_defaults(func=func)

    # Setup `config` command CLI argument option(s)
    _CONFIG_ARG_PARSER = _ARG_SUBPARSER.add_parser(
        name='config',
        help='Shows or resets the `clocksync` settings.',
        epilog="Execute `clocksync config --help` for help."
    )
    _CONFIG_ARG_PARSER.add_argument(
        '--reset',
        help="Restores the default settings.",
        action='store_true'
    )
    _CONFIG_ARG_PARSER.set_defaults(func=commands.config)

    # Parse arguments
    _ARGS = _ARG_PARSER.parse_args(argv)
    _KWARGS = {
        key: vars(_ARGS)[key]
        for key in vars(_ARGS).keys()
        if key != 'func'
    }

    # Execute sub-command
    if hasattr(_ARGS, 'func'):
        return _ARGS.func(**_KWARGS)
    else:
        _ARG_PARSER.print_help()
        return errno.EINVAL


if __name__ == '__main__':
    sys.exit(main())
