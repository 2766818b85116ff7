import click

from tabulate import tabulate

from kubetrack.kubernetes.objects import get_object_kind, get_object_name
from kubetrack.settings import make_resource_tracking

from . import cli_bootstrap, get_tracking_args, tracking_options
from .util import load_manifest_objects


def _print_items(items, header_to_getter):
    headers = [click.style(header, bold=True) for header in header_to_getter.keys()]

    rows = []
    for item in items:
        rows.append([getter(item) for getter in header_to_getter.values()])

    click.echo(tabulate(rows, headers=headers, tablefmt='simple'))


@cli_bootstrap.command(help_priority=2)
@tracking_options
@click.argument('filename', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def show(ctx, key, tracking_method, installation_id, filename):
    '''
    Show which app owns each object in a manifest file.
    '''

    key, tracking_method, installation_id = get_tracking_args(
        ctx, key, tracking_method, installation_id,
    )
    resource_tracking = make_resource_tracking(ctx.meta['settings'])

    def get_app(item):
        app_name = resource_tracking.get_app_name(
            item, key, tracking_method, installation_id,
        )
        return app_name or click.style('NOT TRACKED', 'yellow')

    def get_identity(item):
        value = resource_tracking.get_app_instance(
            item, key, tracking_method, installation_id,
        )
        return value.format() if value else ''

    objects = load_manifest_objects(filename)
    if not objects:
        click.echo('Nothing to be found here!')
        return

    click.echo(f'--> {len(objects)} objects (method={tracking_method}, key={key})')
    _print_items(objects, {
        'Name': get_object_name,
        'Kind': get_object_kind,
        'App': get_app,
        'Identity': get_identity,
    })
