from configparser import ConfigParser
from functools import lru_cache
from os import environ, path

import click

from .constants import APP_INSTANCE_LABEL_KEY
from .exceptions import KubeConfigError, KubeTrackingMethodError
from .log import logger
from .tracking import get_tracking_method, ResourceTracking


class KubetrackSettings(object):
    TRACKING_LABEL_KEY = APP_INSTANCE_LABEL_KEY  # label key carrying the (legacy) app name

    TRACKING_ANNOTATION_KEY = None
    ''' Annotation key carrying the full identity string.

    When unset the tracking label key is used for the annotation as well, set it
    (eg to `kubetrack.io/tracking-id`) to keep the identity under a fixed key
    no matter which label key is in use.
    '''

    TRACKING_METHOD = 'annotation'  # one of: label, annotation, annotation+label

    INSTALLATION_ID = environ.get('KUBETRACK_INSTALLATION_ID', '')
    ''' Scopes tracking to one controller installation, so several installations
    tracking the same cluster don't claim each other's objects.
    '''

    def __init__(self, filename=None):
        self.filename = filename

    def get_tracking_method(self):
        try:
            return get_tracking_method(self.TRACKING_METHOD)
        except KubeTrackingMethodError as e:
            raise KubeConfigError('{0} (settings file: {1})'.format(e, self.filename))


def make_resource_tracking(settings):
    return ResourceTracking(annotation_key=settings.TRACKING_ANNOTATION_KEY or None)


def get_settings_directory():
    return click.get_app_dir('kubetrack', force_posix=True)


@lru_cache(maxsize=1)
def get_settings():
    settings_directory = get_settings_directory()
    settings_file = path.join(settings_directory, 'kubetrack.conf')

    settings = KubetrackSettings(filename=settings_file)

    if path.exists(settings_file):
        logger.info('Loading settings file: {0}'.format(settings_file))
        parser = ConfigParser()
        parser.read(settings_file)

        if not parser.has_section('kubetrack'):
            raise KubeConfigError(
                'Settings file {0} has no [kubetrack] section'.format(settings_file),
            )

        for option in parser.options('kubetrack'):
            setattr(
                settings,
                option.upper().replace('-', '_'),
                parser.get('kubetrack', option),
            )

        # Fail early on a bad method rather than at first use
        settings.get_tracking_method()

    else:
        logger.info('No settings file: {0}'.format(settings_file))

    return settings
