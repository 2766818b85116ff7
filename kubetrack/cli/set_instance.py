import click

from kubetrack.settings import make_resource_tracking

from . import cli_bootstrap, get_tracking_args, tracking_options
from .util import echo_objects, format_option, load_manifest_objects


@cli_bootstrap.command('set-instance', help_priority=1)
@tracking_options
@click.option(
    '--namespace',
    default='',
    help='Namespace to record in the identity (defaults to each object\'s own).',
)
@format_option
@click.argument('app_name')
@click.argument('filename', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def set_instance(
    ctx, key, tracking_method, installation_id,
    namespace, output_format, app_name, filename,
):
    '''
    Mark every object in a manifest file as belonging to an app.
    '''

    key, tracking_method, installation_id = get_tracking_args(
        ctx, key, tracking_method, installation_id,
    )
    resource_tracking = make_resource_tracking(ctx.meta['settings'])

    objects = load_manifest_objects(filename)
    for obj in objects:
        resource_tracking.set_app_instance(
            obj, key, app_name,
            namespace=namespace,
            tracking_method=tracking_method,
            installation_id=installation_id,
        )

    echo_objects(objects, output_format)
