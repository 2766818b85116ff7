import click

from kubetrack.tracking import parse_app_instance_value

from . import cli_bootstrap


@cli_bootstrap.command('parse', help_priority=3)
@click.argument('value')
def parse_value(value):
    '''
    Break a tracking identity string (app:group/kind:namespace/name) into its parts.
    '''

    app_instance_value = parse_app_instance_value(value)

    for field, field_value in app_instance_value._asdict().items():
        click.echo(f'{click.style(field, bold=True)}: {field_value}')
