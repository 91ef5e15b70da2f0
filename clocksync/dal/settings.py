""" Settings configuration-layer """

from typing import Union
import os
from pytensils import config
from clocksync.struct import settings
from clocksync.dal import path


PATH: Union[str, os.PathLike] = path.HOME
FILE_NAME: str = 'settings.json'
DTYPES: dict = {
    'settings': {
        'rdate': 'str',
        'ntpdate': 'str',
        'shell': 'str',
        'ntp_timeout': 'float',
        'ntp_polls': 'int',
        'ntp_query': 'bool',
        'deadline': 'float'
    }
}


def exists() -> bool:
    """ Returns `True` when the settings configuration file exists. """
    if os.path.isfile(
        os.path.abspath(os.path.join(PATH, FILE_NAME))
    ):
        return True
    else:
        return False


def create() -> config.Handler:
    """ Creates the settings configuration file with the default settings and returns
    the contents as a `pytensils.config.Handler` object.
    """
    return save(settings.Settings())


def get() -> config.Handler:
    """ Returns the contents of the settings configuration as a
    `pytensils.config.Handler` object.
    """

    # Read the configuration file
    config_ = config.Handler(
        path=PATH,
        file_name=FILE_NAME
    )

    # Validate
    config_.validate(DTYPES)

    return config_


def get_or_create() -> config.Handler:
    """ Creates or reads the settings configuration file and returns the contents as
    a `pytensils.config.Handler` object.
    """
    if exists():
        return get()
    else:
        return create()


def save(settings_: settings.Settings) -> config.Handler:
    """ Saves the settings configuration to `~/.clocksync/settings.json`.

    Parameters
    ----------
    settings_: `clocksync.struct.settings.Settings`
        An instance of a `clocksync.struct.settings.Settings` object.
    """

    # Create the settings configuration-layer directory
    if not os.path.isdir(PATH):
        os.makedirs(PATH)

    # Create the configuration file
    config_ = config.Handler(
        path=PATH,
        file_name=FILE_NAME,
        create=True
    )
    config_ = config_.from_dict({'settings': settings_.to_dict()})

    return config_


def update(new: settings.Settings) -> settings.Settings:
    """ Updates the settings configuration file `~/.clocksync/settings.json`.

    Parameters
    ----------
    new: `clocksync.struct.settings.Settings`
        An instance of a `clocksync.struct.settings.Settings` object.
    """

    # Read the configuration file
    config_ = get_or_create()

    # Convert the config to a settings object
    settings_ = settings.Settings.from_config(config=config_)

    # Compare and update
    if not settings_ == new:

        # Update the settings configuration object and write to the configuration file
        config_ = config_.from_dict({'settings': new.to_dict()})

        return new

    else:
        return settings_


def delete():
    """ Deletes the settings configuration file. """
    if exists():
        os.remove(os.path.join(PATH, FILE_NAME))


def get_settings() -> settings.Settings:
    """ Returns the current settings as a `clocksync.struct.settings.Settings` object. """
    return settings.Settings.from_config(get_or_create())
