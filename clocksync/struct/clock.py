""" Clock-time """

from __future__ import annotations
from dataclasses import dataclass, field
import datetime
import json
import time


@dataclass
class ClockTime():
    """ A `class` that represents a broken-down calendar time reported by a time server.

    Attributes
    ----------
    year: `int`
        The full year, e.g. 2024.
    month: `int`
        The month in the range [1, 12].
    day: `int`
        The day of the month in the range [1, 31].
    hour: `int`
        The hour in the range [0, 23].
    minute: `int`
        The minute in the range [0, 59].
    second: `int`
        The second in the range [0, 59].
    millisecond: `int`
        The millisecond. Always 0, both protocols report whole seconds.
    """
    year: int = field(default=0)
    month: int = field(default=0)
    day: int = field(default=0)
    hour: int = field(default=0)
    minute: int = field(default=0)
    second: int = field(default=0)
    millisecond: int = field(default=0)

    def from_struct_time(struct_time: time.struct_time) -> ClockTime:
        """ Returns a `clocksync.struct.clock.ClockTime` object from a `time.struct_time`.

        Parameters
        ----------
        struct_time: `time.struct_time`
            The broken-down time, e.g. from `time.strptime()` or `time.localtime()`.
        """
        return ClockTime(
            year=struct_time.tm_year,
            month=struct_time.tm_mon,
            day=struct_time.tm_mday,
            hour=struct_time.tm_hour,
            minute=struct_time.tm_min,

            # `time.struct_time` allows leap seconds, clock-time does not
            second=min(struct_time.tm_sec, 59),
            millisecond=0
        )

    def from_dict(dict_object: dict) -> ClockTime:
        """ Returns a `clocksync.struct.clock.ClockTime` object from a `dict`.

        Parameters
        ----------
        dict_object : `dict`
            The dictionary object to convert to a `clocksync.struct.clock.ClockTime` object.
        """

        # Assert object type
        if not isinstance(dict_object, dict):
            raise TypeError('Object must be a `dict`.')

        # Assert keys
        missing_keys = [
            key for key in ['year', 'month', 'day', 'hour', 'minute', 'second']
            if key not in dict_object
        ]
        if missing_keys:
            raise KeyError(
                'Missing keys. The `dict` object is missing the following required keys [%s].' % (
                    ','.join(["'%s'" % (key) for key in missing_keys])
                )
            )

        return ClockTime(
            year=dict_object['year'],
            month=dict_object['month'],
            day=dict_object['day'],
            hour=dict_object['hour'],
            minute=dict_object['minute'],
            second=dict_object['second'],
            millisecond=dict_object.get('millisecond', 0)
        )

    def to_datetime(self) -> datetime.datetime:
        """ Returns the `clocksync.struct.clock.ClockTime` object as a naive `datetime.datetime`. """
        return datetime.datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond * 1000
        )

    def to_dict(self):
        """ Returns the `clocksync.struct.clock.ClockTime` object as a `dict`. """
        return {
            'year': self.year,
            'month': self.month,
            'day': self.day,
            'hour': self.hour,
            'minute': self.minute,
            'second': self.second,
            'millisecond': self.millisecond
        }

    def __repr__(self):
        """ Returns the `clocksync.struct.clock.ClockTime` object as a json-formatted `str`. """
        return json.dumps(self.to_dict(), indent=2)

    def __eq__(self, compare):
        """ Returns `True` when compare is an instance of self.

        Parameters
        ----------
        compare: `clocksync.struct.clock.ClockTime`
            An instance of a `clocksync.struct.clock.ClockTime` object.
        """
        if isinstance(compare, ClockTime):
            return self.to_dict() == compare.to_dict()
        return False
