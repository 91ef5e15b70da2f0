""" Data-access layer """

from clocksync.dal import path
from clocksync.dal import settings

__all__ = ['path', 'settings']
