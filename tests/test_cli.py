import errno
import pytest

import clocksync
from clocksync import errors
from clocksync.cli import clocksync as cli
from clocksync.dal import settings as settings_dal
from clocksync.struct.settings import Settings


def test_get_empty_server(settings_home):
    assert cli.main(['get', 'tp', '']) == errors.INVALID_ARGUMENT


def test_get_ntp_is_unsupported(settings_home):
    assert cli.main(['get', 'ntp', 'pool.ntp.org']) == errors.UNSUPPORTED


def test_sync_missing_tool(settings_home):
    settings_dal.save(Settings(rdate='/nonexistent/rdate'))

    assert cli.main(['sync', 'tp', '192.0.2.1']) == errors.UNSUPPORTED


def test_config_reset(settings_home):
    settings_dal.save(Settings(ntp_query=True))

    assert cli.main(['config', '--reset']) == errors.OK
    assert settings_dal.get_settings() == Settings()


def test_no_command():
    assert cli.main([]) == errno.EINVAL


def test_invalid_protocol():
    with pytest.raises(SystemExit):
        cli.main(['get', 'ptp', 'pool.ntp.org'])


def test_config_prints_logo_and_description(settings_home, caplog):
    caplog.set_level('INFO', logger='clocksync.cli')

    assert cli.main(['config']) == errors.OK
    assert caplog.messages[:len(clocksync.LOGO)] == clocksync.LOGO
    assert '    %s' % clocksync.DESCRIPTION in caplog.messages


def test_help_uses_description(capsys):
    with pytest.raises(SystemExit):
        cli.main(['--help'])

    assert '`clocksync` reads or sets' in capsys.readouterr().out
