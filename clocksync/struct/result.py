""" Synchronization result """

from __future__ import annotations
from typing import Union
from dataclasses import dataclass, field
import json

from clocksync import errors
from clocksync.struct.clock import ClockTime


@dataclass
class Result():
    """ A `class` that represents the outcome of a clock-synchronization request.

    Attributes
    ----------
    code: `int`
        The result code, one of `clocksync.errors`.
    time: `Union[clocksync.struct.clock.ClockTime, None]`
        The server time, only populated for a successful get-only request.
    message: `str`
        A human-readable description of the outcome.
    """
    code: int = field(default=errors.OK)
    time: Union[ClockTime, None] = field(default=None)
    message: str = field(default='')

    @property
    def ok(self) -> bool:
        """ Returns `True` when the request succeeded. """
        return self.code == errors.OK

    @property
    def name(self) -> str:
        """ Returns the name of the result code. """
        return errors.name(self.code)

    def to_dict(self):
        """ Returns the `clocksync.struct.result.Result` object as a `dict`. """
        return {
            'code': self.code,
            'name': self.name,
            'time': self.time.to_dict() if self.time else None,
            'message': self.message
        }

    def __repr__(self):
        """ Returns the `clocksync.struct.result.Result` object as a json-formatted `str`. """
        return json.dumps(self.to_dict(), indent=2)
