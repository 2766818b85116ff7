'''
Primitive getters & setters for the objects we track. Objects are either plain
dicts (as loaded from YAML manifests or returned by the dynamic client) or
models from the Kubernetes python client (``V1Service`` etc). Setters mutate
the object they are given.
'''

from kubernetes.client import V1ObjectMeta

from kubetrack.exceptions import KubeObjectError


def _get_metadata(obj, create=False):
    if isinstance(obj, dict):
        metadata = obj.get('metadata')
        if metadata is None and create:
            metadata = obj['metadata'] = {}
    else:
        metadata = obj.metadata
        if metadata is None and create:
            metadata = obj.metadata = V1ObjectMeta()

    return metadata


def _get_metadata_field(obj, field):
    metadata = _get_metadata(obj)
    if metadata is None:
        return None

    if isinstance(metadata, dict):
        return metadata.get(field)
    return getattr(metadata, field, None)


def _get_string_map(obj, field):
    data = _get_metadata_field(obj, field)
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise KubeObjectError('Invalid metadata.{0} on {1}: {2!r}'.format(
            field, get_object_name(obj), data,
        ))

    for key, value in data.items():
        if not isinstance(value, str):
            raise KubeObjectError('Invalid metadata.{0} value for {1} on {2}: {3!r}'.format(
                field, key, get_object_name(obj), value,
            ))

    return data


def _ensure_string_map(obj, field):
    metadata = _get_metadata(obj, create=True)

    if isinstance(metadata, dict):
        data = metadata.get(field)
        if data is None:
            data = metadata[field] = {}
    else:
        data = getattr(metadata, field)
        if data is None:
            data = {}
            setattr(metadata, field, data)

    if not isinstance(data, dict):
        raise KubeObjectError('Invalid metadata.{0} on {1}: {2!r}'.format(
            field, get_object_name(obj), data,
        ))

    return data


def get_object_name(obj):
    return _get_metadata_field(obj, 'name') or ''


def get_object_namespace(obj):
    return _get_metadata_field(obj, 'namespace') or ''


def get_object_kind(obj):
    if isinstance(obj, dict):
        return obj.get('kind') or ''
    return getattr(obj, 'kind', None) or ''


def get_object_api_version(obj):
    if isinstance(obj, dict):
        return obj.get('apiVersion') or ''
    return getattr(obj, 'api_version', None) or ''


def get_object_group(obj):
    '''
    The API group of an object, empty for the core group (``apiVersion: v1``).
    '''

    return get_object_api_version(obj).rpartition('/')[0]


def get_object_labels_dict(obj):
    return _get_string_map(obj, 'labels')


def get_object_annotations_dict(obj):
    return _get_string_map(obj, 'annotations')


def get_object_label(obj, key):
    return get_object_labels_dict(obj).get(key)


def get_object_annotation(obj, key):
    return get_object_annotations_dict(obj).get(key)


def set_object_label(obj, key, value):
    _ensure_string_map(obj, 'labels')[key] = value


def set_object_annotation(obj, key, value):
    _ensure_string_map(obj, 'annotations')[key] = value


def remove_object_label(obj, key):
    labels = _get_metadata_field(obj, 'labels')
    if isinstance(labels, dict):
        labels.pop(key, None)


def remove_object_annotation(obj, key):
    annotations = _get_metadata_field(obj, 'annotations')
    if isinstance(annotations, dict):
        annotations.pop(key, None)
