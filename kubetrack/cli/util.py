import json

import click
import yaml

from kubetrack.exceptions import KubeCLIError
from kubetrack.kubernetes.objects import (
    get_object_group,
    get_object_kind,
    get_object_name,
    get_object_namespace,
)


yaml.Dumper.ignore_aliases = lambda *args: True

FORMATTERS = {
    'json': lambda objects: json.dumps(objects, indent=4),
    'yaml': lambda objects: yaml.dump_all(objects, default_flow_style=False),
}

format_option = click.option(
    '--format', 'output_format',
    type=click.Choice(tuple(FORMATTERS.keys())),
    default='yaml',
    help='Specify the output format',
)


def load_manifest_objects(filename):
    '''
    Load every (non-empty) YAML document in a manifest file.
    '''

    try:
        with open(filename, 'r') as f:
            documents = list(yaml.safe_load_all(f))
    except yaml.YAMLError as e:
        raise KubeCLIError('Invalid YAML in {0}: {1}'.format(filename, e))

    objects = []
    for document in documents:
        if document is None:
            continue

        if not isinstance(document, dict) or 'kind' not in document:
            raise KubeCLIError('Not a Kubernetes object in {0}: {1!r}'.format(filename, document))

        objects.append(document)

    return objects


def get_object_identity(obj):
    return (
        get_object_group(obj),
        get_object_kind(obj),
        get_object_namespace(obj),
        get_object_name(obj),
    )


def echo_objects(objects, output_format):
    formatter = FORMATTERS[output_format]
    click.echo(formatter(objects))
