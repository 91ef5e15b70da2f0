import pytest

from clocksync import protocols
from clocksync.struct.settings import Settings


def test_time_protocol_get():
    assert protocols.build('tp', 'get', '5.196.160.139') == ['/usr/sbin/rdate', '-p', '5.196.160.139']


def test_time_protocol_sync():
    assert protocols.build('tp', 'sync', '5.196.160.139') == [
        '/bin/sh', '-c',
        '/usr/sbin/rdate "$1" >/dev/null 2>&1; echo $?',
        'rdate', '5.196.160.139'
    ]


def test_network_time_protocol_get():
    assert protocols.build('ntp', 'get', '2001:db8::1') == [
        '/bin/sh', '-c',
        '/usr/sbin/ntpdate -t 1.0 -p 1 -q "$1"; echo $?',
        'ntpdate', '2001:db8::1'
    ]


def test_network_time_protocol_sync():
    assert protocols.build('ntp', 'sync', '5.196.160.139') == [
        '/bin/sh', '-c',
        '/usr/sbin/ntpdate -t 1.0 -p 1 "$1" >/dev/null 2>&1; echo $?',
        'ntpdate', '5.196.160.139'
    ]


def test_settings_are_applied():
    settings = Settings(
        rdate='/opt/time tools/rdate',
        ntpdate='/usr/local/bin/ntpdate',
        shell='/usr/bin/dash',
        ntp_timeout=2.5,
        ntp_polls=4
    )

    assert protocols.build('tp', 'sync', 'time.example.org', settings) == [
        '/usr/bin/dash', '-c',
        "'/opt/time tools/rdate' \"$1\" >/dev/null 2>&1; echo $?",
        'rdate', 'time.example.org'
    ]
    assert protocols.build('ntp', 'sync', 'time.example.org', settings)[2] == (
        '/usr/local/bin/ntpdate -t 2.5 -p 4 "$1" >/dev/null 2>&1; echo $?'
    )


def test_server_is_never_part_of_the_script():
    for protocol in protocols.PROTOCOLS:
        for mode in protocols.MODES:
            argv = protocols.build(protocol, mode, 'time.example.org')
            assert argv[-1] == 'time.example.org'
            assert all('time.example.org' not in arg for arg in argv[:-1])


@pytest.mark.parametrize('server', [
    '',
    '1.2.3.4; rm -rf /',
    '$(reboot)',
    'time.example.org`id`',
    'a b',
    '-n',
    '--help',
    'time\nexample',
    'time.example.org\n'
])
def test_disallowed_servers(server):
    with pytest.raises(protocols.CommandError):
        protocols.build('tp', 'get', server)


def test_allowed_servers():
    for server in ['pool.ntp.org', 'fe80::1%eth0', 'my_time-server.local', '192.0.2.1']:
        assert protocols.validate_server(server) == server


def test_unknown_protocol():
    with pytest.raises(ValueError):
        protocols.build('ptp', 'get', '192.0.2.1')


def test_unknown_mode():
    with pytest.raises(ValueError):
        protocols.build('tp', 'set', '192.0.2.1')


def test_tool():
    assert protocols.tool('tp') == '/usr/sbin/rdate'
    assert protocols.tool('ntp') == '/usr/sbin/ntpdate'
