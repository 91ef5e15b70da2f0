import time
import pytest

from clocksync import parsers
from clocksync.struct.clock import ClockTime

NTP_STEP = (
    '1 Jan 07:33:20 ntpdate[29329]: step time server 5.196.160.139 offset 1558374338.202418 sec'
)


class TestTimeProtocolParser:

    def test_parse(self):
        assert parsers.TimeProtocolParser().parse('Tue Jan 02 15:04:05 2024') == ClockTime(
            year=2024, month=1, day=2, hour=15, minute=4, second=5, millisecond=0
        )

    def test_parse_strips_line_ending(self):
        parsed = parsers.TimeProtocolParser().parse('Sat Dec 31 23:59:59 2022\n')
        assert parsed.to_dict() == {
            'year': 2022, 'month': 12, 'day': 31,
            'hour': 23, 'minute': 59, 'second': 59, 'millisecond': 0
        }

    @pytest.mark.parametrize('line', [
        '',
        'rdate: could not connect to host',
        '2024-01-02 15:04:05',
        'Tue Jan 02 15:04:05',
        'Tue Jan 02 15:04:05 2024 extra'
    ])
    def test_parse_error(self, line):
        with pytest.raises(parsers.OutputParseError):
            parsers.TimeProtocolParser().parse(line)


class TestNetworkTimeProtocolParser:

    def test_parse(self):
        parser = parsers.NetworkTimeProtocolParser(clock=lambda: 0.0)
        assert parser.parse(NTP_STEP) == ClockTime.from_struct_time(time.localtime(1558374338))

    def test_offset_is_added_to_now(self):
        parser = parsers.NetworkTimeProtocolParser(clock=lambda: 1700000000.9)
        line = '19 Oct 10:00:00 ntpdate[123]: adjust time server 192.0.2.1 offset 25.75 sec'
        assert parser.parse(line) == ClockTime.from_struct_time(time.localtime(1700000025))

    @pytest.mark.parametrize('value, expected', [
        ('1558374338.202418', 1558374338),
        ('0.999', 0),
        ('-0.999', 0),
        ('-1.7', -1),
        ('+3', 3)
    ])
    def test_offset_is_truncated(self, value, expected):
        line = 'ntpdate[1]: adjust time server 192.0.2.1 offset %s sec' % value
        assert parsers.NetworkTimeProtocolParser().offset(line) == expected

    @pytest.mark.parametrize('line', [
        '',
        'server 5.196.160.139, stratum 2, offset 0.000123, delay 0.02573',
        '1 Jan 07:33:20 ntpdate[29329]: no server suitable for synchronization found',
        '1 Jan 07:33:20 ntpdate[29329]: step time server 5.196.160.139 offset 12.5',
        '1 Jan 07:33:20 ntpdate[29329]: step time server 5.196.160.139 offset abc sec',
        '0'
    ])
    def test_not_found(self, line):
        with pytest.raises(parsers.OutputNotFoundError):
            parsers.NetworkTimeProtocolParser(clock=lambda: 0.0).parse(line)

    def test_clock_is_sampled_at_parse_time(self):
        samples = iter([100.0, 200.0])
        parser = parsers.NetworkTimeProtocolParser(clock=lambda: next(samples))
        line = 'ntpdate[1]: adjust time server 192.0.2.1 offset 1 sec'

        assert parser.parse(line) == ClockTime.from_struct_time(time.localtime(101))
        assert parser.parse(line) == ClockTime.from_struct_time(time.localtime(201))


def test_get_parser():
    assert isinstance(parsers.get_parser('tp'), parsers.TimeProtocolParser)
    assert isinstance(parsers.get_parser('ntp'), parsers.NetworkTimeProtocolParser)
    assert not parsers.TimeProtocolParser.keep_last
    assert parsers.NetworkTimeProtocolParser.keep_last

    with pytest.raises(ValueError):
        parsers.get_parser('ptp')
