from os import path
from tempfile import TemporaryDirectory
from unittest import mock, TestCase

from kubetrack.constants import APP_INSTANCE_LABEL_KEY
from kubetrack.exceptions import KubeConfigError
from kubetrack.settings import get_settings, make_resource_tracking
from kubetrack.tracking import TrackingMethod


def _get_settings_with_file(contents=None):
    with TemporaryDirectory() as settings_directory:
        if contents is not None:
            with open(path.join(settings_directory, 'kubetrack.conf'), 'w') as f:
                f.write(contents)

        with mock.patch(
            'kubetrack.settings.get_settings_directory',
            lambda: settings_directory,
        ):
            return get_settings()


class TestSettings(TestCase):
    def setUp(self):
        get_settings.cache_clear()

    def tearDown(self):
        get_settings.cache_clear()

    def test_default_settings(self):
        settings = _get_settings_with_file()
        self.assertEqual(settings.TRACKING_LABEL_KEY, APP_INSTANCE_LABEL_KEY)
        self.assertIsNone(settings.TRACKING_ANNOTATION_KEY)
        self.assertIs(settings.get_tracking_method(), TrackingMethod.ANNOTATION)
        self.assertIsNone(make_resource_tracking(settings).annotation_key)

    def test_settings_file(self):
        settings = _get_settings_with_file('\n'.join((
            '[kubetrack]',
            'tracking-label-key = example.com/app',
            'tracking-annotation-key = example.com/tracking-id',
            'tracking-method = annotation+label',
            'installation-id = prod',
        )))

        self.assertEqual(settings.TRACKING_LABEL_KEY, 'example.com/app')
        self.assertIs(settings.get_tracking_method(), TrackingMethod.ANNOTATION_AND_LABEL)
        self.assertEqual(settings.INSTALLATION_ID, 'prod')
        self.assertEqual(
            make_resource_tracking(settings).annotation_key,
            'example.com/tracking-id',
        )

    def test_settings_file_invalid_tracking_method(self):
        with self.assertRaises(KubeConfigError):
            _get_settings_with_file('[kubetrack]\ntracking-method = labels\n')

    def test_settings_file_missing_section(self):
        with self.assertRaises(KubeConfigError):
            _get_settings_with_file('[other]\nkey = value\n')
