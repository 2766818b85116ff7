import click

from kubetrack import __version__
from kubetrack.kubernetes.api import list_kube_contexts
from kubetrack.log import setup_logging
from kubetrack.settings import get_settings
from kubetrack.tracking import TRACKING_METHOD_NAMES


class SpecialHelpOrder(click.Group):
    def __init__(self, *args, **kwargs):
        self.help_priorities = {}
        super(SpecialHelpOrder, self).__init__(*args, **kwargs)

    def list_commands(self, ctx):
        '''
        Reorder the list of commands when listing the help.
        '''
        commands = super(SpecialHelpOrder, self).list_commands(ctx)
        return [
            c[1] for c in sorted(
                (self.help_priorities.get(command, 1), command)
                for command in commands
            )
        ]

    def command(self, *args, **kwargs):
        '''
        Behaves the same as `click.Group.command()` except capture a priority for
        listing command names in help.
        '''

        help_priority = kwargs.pop('help_priority', 1)
        help_priorities = self.help_priorities

        def decorator(f):
            cmd = super(SpecialHelpOrder, self).command(*args, **kwargs)(f)
            help_priorities[cmd.name] = help_priority
            return cmd

        return decorator


def tracking_options(func):
    '''
    Attach the --key/--method/--installation-id options, defaulting to settings.
    '''

    func = click.option(
        '--installation-id',
        help='Scope tracking to this controller installation.',
    )(func)
    func = click.option(
        '--method', 'tracking_method',
        type=click.Choice(TRACKING_METHOD_NAMES),
        help='Tracking method (default from settings).',
    )(func)
    func = click.option(
        '--key',
        help='Tracking label key (default from settings).',
    )(func)
    return func


def get_tracking_args(ctx, key, tracking_method, installation_id):
    settings = ctx.meta['settings']

    if key is None:
        key = settings.TRACKING_LABEL_KEY
    if tracking_method is None:
        tracking_method = settings.get_tracking_method()
    if installation_id is None:
        installation_id = settings.INSTALLATION_ID

    return key, tracking_method, installation_id


def ensure_context(value):
    context_names, active_context_name = list_kube_contexts()

    if value:
        if value not in context_names:
            raise click.BadParameter(f'{value}; available contexts: {context_names}')
    else:
        click.echo(f'Using active context: {click.style(active_context_name, bold=True)}', err=True)
        value = active_context_name

    return value


@click.group(cls=SpecialHelpOrder)
@click.option('--debug', is_flag=True, help='Show debug logs.')
@click.version_option(version=__version__, message='%(prog)s: v%(version)s')
@click.pass_context
def cli_bootstrap(ctx, debug):
    '''
    Kubetrack - stamp and reconcile app ownership markers on Kubernetes objects.
    '''

    setup_logging(debug)
    ctx.meta['settings'] = get_settings()
