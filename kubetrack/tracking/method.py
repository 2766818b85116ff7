from enum import Enum

from kubetrack.exceptions import KubeTrackingMethodError


class TrackingMethod(Enum):
    LABEL = 'label'
    ANNOTATION = 'annotation'
    ANNOTATION_AND_LABEL = 'annotation+label'

    def __str__(self):
        return self.value

    @property
    def uses_label(self):
        return self in (TrackingMethod.LABEL, TrackingMethod.ANNOTATION_AND_LABEL)

    @property
    def uses_annotation(self):
        return self in (TrackingMethod.ANNOTATION, TrackingMethod.ANNOTATION_AND_LABEL)


TRACKING_METHOD_NAMES = tuple(method.value for method in TrackingMethod)


def get_tracking_method(method):
    '''
    Turn a tracking method name (or member) into a ``TrackingMethod``, refusing
    anything outside the known set.
    '''

    if isinstance(method, TrackingMethod):
        return method

    try:
        return TrackingMethod(method)
    except ValueError:
        raise KubeTrackingMethodError(
            'Invalid tracking method: {0!r}, must be one of: {1}'.format(
                method, ', '.join(TRACKING_METHOD_NAMES),
            ),
        )


def is_old_tracking_method(method):
    return method == TrackingMethod.LABEL or method == TrackingMethod.LABEL.value
