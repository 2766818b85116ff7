import click

from kubetrack.exceptions import KubeCLIError
from kubetrack.kubernetes.api import get_live_object
from kubetrack.kubernetes.objects import (
    get_object_api_version,
    get_object_kind,
    get_object_name,
    get_object_namespace,
)
from kubetrack.log import logger
from kubetrack.settings import make_resource_tracking

from . import cli_bootstrap, ensure_context, get_tracking_args, tracking_options
from .util import echo_objects, format_option, get_object_identity, load_manifest_objects


def _get_file_live_objects(config_objects, live_filename):
    identity_to_live_object = {
        get_object_identity(obj): obj
        for obj in load_manifest_objects(live_filename)
    }

    return [
        identity_to_live_object.get(get_object_identity(config_object))
        for config_object in config_objects
    ]


def _get_cluster_live_objects(config_objects, env):
    return [
        get_live_object(
            env,
            get_object_api_version(config_object),
            get_object_kind(config_object),
            get_object_name(config_object),
            namespace=get_object_namespace(config_object) or None,
        )
        for config_object in config_objects
    ]


@cli_bootstrap.command(help_priority=4)
@tracking_options
@click.option(
    '--context',
    envvar='KUBETRACK_CONTEXT',
    help='Kubernetes context to read live objects from (when no live file is given).',
)
@format_option
@click.argument('config_filename', type=click.Path(exists=True, dir_okay=False))
@click.argument('live_filename', type=click.Path(exists=True, dir_okay=False), required=False)
@click.pass_context
def normalize(
    ctx, key, tracking_method, installation_id,
    context, output_format, config_filename, live_filename,
):
    '''
    Align live objects' tracking markers with their config and print them.

    Live objects come from LIVE_FILENAME when given, otherwise from the cluster.
    '''

    key, tracking_method, installation_id = get_tracking_args(
        ctx, key, tracking_method, installation_id,
    )
    resource_tracking = make_resource_tracking(ctx.meta['settings'])

    config_objects = load_manifest_objects(config_filename)
    if not config_objects:
        raise KubeCLIError(f'No objects found in {config_filename}')

    if live_filename:
        live_objects = _get_file_live_objects(config_objects, live_filename)
    else:
        env = ensure_context(context)
        live_objects = _get_cluster_live_objects(config_objects, env)

    normalized_objects = []
    for config_object, live_object in zip(config_objects, live_objects):
        if live_object is None:
            logger.info('No live object for {0} {1}'.format(
                get_object_kind(config_object), get_object_name(config_object),
            ))
            continue

        resource_tracking.normalize(config_object, live_object, key, tracking_method)
        normalized_objects.append(live_object)

    echo_objects(normalized_objects, output_format)
