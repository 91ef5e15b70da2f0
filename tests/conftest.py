""" Shared fixtures """

from typing import List, Union
import os
import pytest

from clocksync import engine, protocols
from clocksync.dal import settings as settings_dal
from clocksync.struct.settings import Settings


class FakeRunner():
    """ Records the commands it is asked to run and returns canned output lines. """

    def __init__(self, lines: Union[List[str], None] = None, error: Union[Exception, None] = None):
        self.lines = lines or []
        self.error = error
        self.calls = []

    def __call__(self, argv: List[str], deadline: Union[float, None] = None) -> List[str]:
        self.calls.append((argv, deadline))
        if self.error:
            raise self.error
        return list(self.lines)


class SpyBuilder():
    """ Records the calls made to `clocksync.protocols.build`. """

    def __init__(self):
        self.calls = []

    def __call__(self, *args, **kwargs) -> List[str]:
        self.calls.append((args, kwargs))
        return protocols.build(*args, **kwargs)


class FakeResolver():
    """ Resolves every name to {address}, or fails when {address} is `None`. """

    def __init__(self, address: Union[str, None] = '192.0.2.10'):
        self.address = address
        self.calls = []

    def __call__(self, name: str) -> str:
        self.calls.append(name)
        if self.address is None:
            raise engine.addresses.ResolutionError('Unable to resolve the host name {%s}.' % name)
        return self.address


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def builder():
    return SpyBuilder()


@pytest.fixture
def resolver():
    return FakeResolver()


@pytest.fixture
def make_engine(builder, resolver):
    """ Returns a factory of engines wired to test doubles, with a clock fixed at the epoch. """

    def factory(
        lines: Union[List[str], None] = None,
        error: Union[Exception, None] = None,
        settings: Union[Settings, None] = None,
        **kwargs
    ) -> engine.Engine:
        runner_ = FakeRunner(lines=lines, error=error)
        kwargs.setdefault('resolver', resolver)
        kwargs.setdefault('builder', builder)
        kwargs.setdefault('locate', lambda path: True)
        kwargs.setdefault('clock', lambda: 0.0)
        engine_ = engine.Engine(settings=settings, runner=runner_, **kwargs)
        return engine_

    return factory


@pytest.fixture
def settings_home(tmp_path, monkeypatch):
    """ Points the settings configuration-layer at a temporary directory. """
    path = os.path.join(str(tmp_path), '.clocksync')
    monkeypatch.setattr(settings_dal, 'PATH', path)
    return path
