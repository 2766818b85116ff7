from unittest import TestCase

from kubetrack.exceptions import KubeTrackingMethodError
from kubetrack.tracking import get_tracking_method, is_old_tracking_method, TrackingMethod


class TestTrackingMethod(TestCase):
    def test_get_tracking_method_from_name(self):
        self.assertIs(get_tracking_method('label'), TrackingMethod.LABEL)
        self.assertIs(get_tracking_method('annotation'), TrackingMethod.ANNOTATION)
        self.assertIs(
            get_tracking_method('annotation+label'),
            TrackingMethod.ANNOTATION_AND_LABEL,
        )

    def test_get_tracking_method_passes_members_through(self):
        self.assertIs(get_tracking_method(TrackingMethod.LABEL), TrackingMethod.LABEL)

    def test_get_tracking_method_rejects_unknown(self):
        for method in ('', None, 'labels', 'Annotation'):
            with self.assertRaises(KubeTrackingMethodError):
                get_tracking_method(method)

    def test_is_old_tracking_method(self):
        self.assertTrue(is_old_tracking_method('label'))
        self.assertTrue(is_old_tracking_method(TrackingMethod.LABEL))

    def test_is_not_old_tracking_method(self):
        for method in (
            'annotation',
            'annotation+label',
            TrackingMethod.ANNOTATION,
            TrackingMethod.ANNOTATION_AND_LABEL,
            '',
            'something-else',
        ):
            self.assertFalse(is_old_tracking_method(method))
