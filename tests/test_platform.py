import os
import pytest

from clocksync import platform


@pytest.mark.parametrize('required, name, expected', [
    ('any', 'windows', True),
    ('posix', 'linux', True),
    ('posix', 'dietpi', True),
    ('posix', 'darwin', True),
    ('posix', 'windows', False),
    ('linux', 'dietpi', True),
    ('linux', 'darwin', False),
    ('windows', 'Windows', True)
])
def test_is_supported(required, name, expected):
    assert platform.is_supported(required, name) is expected


def test_requires(monkeypatch):

    @platform.requires('posix')
    def run():
        """ Runs. """
        return 'ran'

    monkeypatch.setattr(platform, 'NAME', 'linux')
    assert run() == 'ran'
    assert run.__name__ == 'run'

    monkeypatch.setattr(platform, 'NAME', 'windows')
    with pytest.raises(platform.PlatformError):
        run()


def test_requires_invalid_platform():
    with pytest.raises(ValueError):
        platform.requires('beos')


def test_has_tool(tmp_path):
    path = os.path.join(str(tmp_path), 'tool')
    assert not platform.has_tool(path)

    with open(path, 'w') as f:
        f.write('#!/bin/sh\n')
    os.chmod(path, 0o644)
    assert not platform.has_tool(path)

    os.chmod(path, 0o755)
    assert platform.has_tool(path)
    assert not platform.has_tool(str(tmp_path))
