""" Configuration-layer paths """

from typing import Union
import os

HOME: Union[str, os.PathLike] = os.path.abspath(os.path.join(os.path.expanduser('~'), '.clocksync'))
