from kubetrack.constants import CRD_GROUP, CRD_KIND, INSTALLATION_ID_ANNOTATION_KEY
from kubetrack.exceptions import (
    KubeObjectError,
    KubeTrackingError,
    KubeTruncationError,
    KubeWrongTrackingFormatError,
)
from kubetrack.kubernetes.objects import (
    get_object_annotation,
    get_object_group,
    get_object_kind,
    get_object_label,
    get_object_name,
    get_object_namespace,
    remove_object_annotation,
    remove_object_label,
    set_object_annotation,
    set_object_label,
)
from kubetrack.log import logger

from .label import truncate_label
from .method import get_tracking_method, is_old_tracking_method, TrackingMethod
from .value import AppInstanceValue, format_app_instance_value, parse_app_instance_value

# (group, kind) pairs that normalize never touches: a CRD's schema can't take
# an injected annotation safely.
NORMALIZE_EXEMPT_GROUP_KINDS = (
    (CRD_GROUP, CRD_KIND),
)


def is_normalize_exempt(obj):
    return (get_object_group(obj), get_object_kind(obj)) in NORMALIZE_EXEMPT_GROUP_KINDS


class ResourceTracking(object):
    '''
    Writes, reads and reconciles the markers tying cluster objects back to the
    application that declares them.

    Args:
        annotation_key (str): fixed annotation key to carry the identity string,
            when not set the tracking key passed to each call is used for both
            the label & the annotation.
    '''

    def __init__(self, annotation_key=None):
        self.annotation_key = annotation_key

    def get_annotation_key(self, key):
        return self.annotation_key or key

    def make_app_instance_value(self, obj, app_name, namespace=''):
        return AppInstanceValue(
            application_name=app_name,
            group=get_object_group(obj),
            kind=get_object_kind(obj),
            namespace=namespace or get_object_namespace(obj),
            name=get_object_name(obj),
        )

    def build_app_instance_value(self, value):
        return format_app_instance_value(value)

    def parse_app_instance_value(self, value):
        return parse_app_instance_value(value)

    def set_app_instance(
        self, obj, key, app_name,
        namespace='',
        tracking_method=TrackingMethod.ANNOTATION,
        installation_id='',
    ):
        '''
        Mark an object as belonging to ``app_name``. The label value is worked
        out before anything is written, so a failure leaves the object as it was.
        '''

        tracking_method = get_tracking_method(tracking_method)

        label_value = None
        if tracking_method.uses_label:
            try:
                label_value = truncate_label(app_name)
            except KubeTruncationError as e:
                raise KubeTrackingError('failed to set app instance label: {0}'.format(e)) from e

            if label_value != app_name:
                logger.debug('Truncated app instance label for {0}: {1} -> {2}'.format(
                    get_object_name(obj), app_name, label_value,
                ))

        if installation_id:
            set_object_annotation(obj, INSTALLATION_ID_ANNOTATION_KEY, installation_id)
        else:
            remove_object_annotation(obj, INSTALLATION_ID_ANNOTATION_KEY)

        if tracking_method.uses_annotation:
            value = self.make_app_instance_value(obj, app_name, namespace)
            set_object_annotation(
                obj, self.get_annotation_key(key),
                self.build_app_instance_value(value),
            )

        if label_value is not None:
            set_object_label(obj, key, label_value)

    def get_app_name(self, obj, key, tracking_method, installation_id=''):
        '''
        Read back the owning application name, or an empty string when the
        object carries no (readable) marker for this installation.
        '''

        tracking_method = get_tracking_method(tracking_method)

        try:
            if not self._is_installation_match(obj, installation_id):
                return ''

            if tracking_method.uses_annotation:
                annotation = get_object_annotation(obj, self.get_annotation_key(key))
                if annotation:
                    return self._get_app_name_from_annotation(obj, annotation)

                if tracking_method is TrackingMethod.ANNOTATION:
                    return ''

            return get_object_label(obj, key) or ''

        except KubeObjectError as e:
            logger.debug('Ignoring unreadable tracking metadata: {0}'.format(e))
            return ''

    def get_app_instance(self, obj, key, tracking_method, installation_id=''):
        '''
        Read back the full identity carried by the tracking annotation, or
        ``None`` where there isn't one.
        '''

        tracking_method = get_tracking_method(tracking_method)
        if not tracking_method.uses_annotation:
            return None

        try:
            if not self._is_installation_match(obj, installation_id):
                return None
            annotation = get_object_annotation(obj, self.get_annotation_key(key))
        except KubeObjectError as e:
            logger.debug('Ignoring unreadable tracking metadata: {0}'.format(e))
            return None

        if not annotation:
            return None

        try:
            return self.parse_app_instance_value(annotation)
        except KubeWrongTrackingFormatError:
            return None

    def normalize(self, config, live, key, tracking_method):
        '''
        Align the live object's tracking metadata with the config object's before
        the two are diffed, so moving between tracking methods never shows up
        as a change. Only the live object is modified.
        '''

        if config is None or live is None:
            return

        if is_old_tracking_method(get_tracking_method(tracking_method)):
            return

        if is_normalize_exempt(live) or is_normalize_exempt(config):
            logger.debug('Not normalizing tracking metadata for {0} {1}'.format(
                get_object_kind(live), get_object_name(live),
            ))
            return

        annotation_key = self.get_annotation_key(key)
        annotation = get_object_annotation(config, annotation_key)

        if annotation is None:
            remove_object_annotation(live, annotation_key)
        else:
            set_object_annotation(live, annotation_key, annotation)

        try:
            config_label = get_object_label(config, key)
        except KubeObjectError as e:
            logger.debug('Keeping live tracking label, config labels unreadable: {0}'.format(e))
            return

        if not config_label:
            logger.debug('Dropping tracking label {0} from live {1} {2}'.format(
                key, get_object_kind(live), get_object_name(live),
            ))
            remove_object_label(live, key)

    def _get_app_name_from_annotation(self, obj, annotation):
        # An identity written for this very object strips off exactly, even when
        # the application name holds colons of its own. The namespace is left
        # open as it may have been overridden at write time.
        value = self.make_app_instance_value(obj, '')
        name_suffix = '/{0}'.format(value.name)
        group_kind_suffix = ':{0}/{1}'.format(value.group, value.kind)

        if annotation.endswith(name_suffix):
            head, colon, namespace = annotation[:-len(name_suffix)].rpartition(':')
            if colon and '/' not in namespace and head.endswith(group_kind_suffix):
                return head[:-len(group_kind_suffix)]

        try:
            return self.parse_app_instance_value(annotation).application_name
        except KubeWrongTrackingFormatError:
            # Written by something that only stored the plain app name
            return annotation

    def _is_installation_match(self, obj, installation_id):
        # Unscoped readers see every owner
        if not installation_id:
            return True

        current_id = get_object_annotation(obj, INSTALLATION_ID_ANNOTATION_KEY) or ''
        return current_id == installation_id
