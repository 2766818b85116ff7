'''
The structured identity string written into the tracking annotation:

    <application_name>:<group>/<kind>:<namespace>/<name>

Only the first two colons and the first slash of each half are delimiters, so
object names may themselves contain colons and slashes.
'''

from collections import namedtuple

from kubetrack.exceptions import KubeWrongTrackingFormatError


class AppInstanceValue(namedtuple('AppInstanceValue', (
    'application_name',
    'group',
    'kind',
    'namespace',
    'name',
))):
    __slots__ = ()

    def format(self):
        return format_app_instance_value(self)

    def resource_suffix(self):
        '''
        The part of the identity string that describes the object, without the
        application name.
        '''

        return '{0}/{1}:{2}/{3}'.format(self.group, self.kind, self.namespace, self.name)


def format_app_instance_value(value):
    return '{0}:{1}'.format(value.application_name, value.resource_suffix())


def parse_app_instance_value(value):
    bits = value.split(':', 2)
    if len(bits) != 3:
        raise KubeWrongTrackingFormatError(
            'Wrong resource tracking format: {0}'.format(value),
        )

    application_name, group_kind, namespace_name = bits

    group, slash, kind = group_kind.partition('/')
    if not slash:
        raise KubeWrongTrackingFormatError(
            'Wrong resource tracking format, no group/kind: {0}'.format(value),
        )

    namespace, slash, name = namespace_name.partition('/')
    if not slash:
        raise KubeWrongTrackingFormatError(
            'Wrong resource tracking format, no namespace/name: {0}'.format(value),
        )

    return AppInstanceValue(
        application_name=application_name,
        group=group,
        kind=kind,
        namespace=namespace,
        name=name,
    )
