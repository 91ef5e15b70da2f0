""" Data-structures """

from clocksync.struct import clock, result, settings

__all__ = ['clock', 'result', 'settings']
