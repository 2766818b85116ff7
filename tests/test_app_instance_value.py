from unittest import TestCase

from kubetrack.exceptions import KubeTrackingError, KubeWrongTrackingFormatError
from kubetrack.tracking import (
    AppInstanceValue,
    format_app_instance_value,
    parse_app_instance_value,
    ResourceTracking,
)


class TestParseAppInstanceValue(TestCase):
    def test_parse_app_instance_value(self):
        value = ResourceTracking().parse_app_instance_value('app:<group>/<kind>:<namespace>/<name>')
        self.assertEqual(value.application_name, 'app')
        self.assertEqual(value.group, '<group>')
        self.assertEqual(value.kind, '<kind>')
        self.assertEqual(value.namespace, '<namespace>')
        self.assertEqual(value.name, '<name>')

    def test_parse_app_instance_value_colon(self):
        value = ResourceTracking().parse_app_instance_value(
            'app:<group>/<kind>:<namespace>/<name>:<colon>',
        )
        self.assertEqual(value.application_name, 'app')
        self.assertEqual(value.group, '<group>')
        self.assertEqual(value.kind, '<kind>')
        self.assertEqual(value.namespace, '<namespace>')
        self.assertEqual(value.name, '<name>:<colon>')

    def test_parse_app_instance_value_slashes_in_name(self):
        value = parse_app_instance_value('app:/ConfigMap:ns/a/b:c/d')
        self.assertEqual(value, AppInstanceValue('app', '', 'ConfigMap', 'ns', 'a/b:c/d'))

    def test_parse_app_instance_value_correct_format(self):
        value = parse_app_instance_value('app:group/kind:test/ns')
        self.assertEqual(value, AppInstanceValue('app', 'group', 'kind', 'test', 'ns'))

    def test_parse_app_instance_value_core_group_cluster_scoped(self):
        value = parse_app_instance_value('app:/Namespace:/shop')
        self.assertEqual(value, AppInstanceValue('app', '', 'Namespace', '', 'shop'))

    def test_parse_app_instance_value_wrong_format_no_delimiters(self):
        with self.assertRaises(KubeWrongTrackingFormatError):
            ResourceTracking().parse_app_instance_value('app')

    def test_parse_app_instance_value_wrong_format_delimiter(self):
        with self.assertRaises(KubeWrongTrackingFormatError):
            ResourceTracking().parse_app_instance_value('app;group/kind/ns')

    def test_parse_app_instance_value_no_group_kind_slash(self):
        with self.assertRaises(KubeWrongTrackingFormatError):
            parse_app_instance_value('app:kind:ns/name')

    def test_parse_app_instance_value_no_namespace_name_slash(self):
        with self.assertRaises(KubeWrongTrackingFormatError):
            parse_app_instance_value('app:group/kind:name')

    def test_wrong_format_is_a_tracking_error(self):
        with self.assertRaises(KubeTrackingError):
            parse_app_instance_value('')


class TestFormatAppInstanceValue(TestCase):
    def test_format_app_instance_value(self):
        value = AppInstanceValue('app', 'apps', 'Deployment', 'shop', 'web')
        self.assertEqual(format_app_instance_value(value), 'app:apps/Deployment:shop/web')
        self.assertEqual(value.format(), 'app:apps/Deployment:shop/web')

    def test_build_app_instance_value_parses_back(self):
        value = AppInstanceValue('app', '', 'Secret', 'shop', 'tls:cert/v2')
        resource_tracking = ResourceTracking()
        built = resource_tracking.build_app_instance_value(value)
        self.assertEqual(resource_tracking.parse_app_instance_value(built), value)
