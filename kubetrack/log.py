import logging
import sys

import click

logger = logging.getLogger('kubetrack')

# Chatter goes to stdout, problems to stderr, so piped command output (JSON,
# YAML) only ever mixes with debug lines when asked for.
LOG_STREAM_LEVELS = (
    ('stdout', (logging.DEBUG, logging.INFO)),
    ('stderr', (logging.WARNING, logging.ERROR, logging.CRITICAL)),
)

LEVEL_STYLES = {
    logging.DEBUG: {'fg': 'green'},
    logging.WARNING: {'fg': 'yellow'},
    logging.ERROR: {'fg': 'red'},
    logging.CRITICAL: {'fg': 'red', 'bold': True},
}


class LevelFilter(logging.Filter):
    '''
    Only lets through records at one of the given levels.
    '''

    def __init__(self, levels):
        super(LevelFilter, self).__init__()
        self.levels = frozenset(levels)

    def filter(self, record):
        return record.levelno in self.levels


class StyledFormatter(logging.Formatter):
    '''
    Colours the rendered message by level. Exceptions attached to a record are
    appended uncoloured beneath it.
    '''

    def format(self, record):
        message = record.getMessage()

        style = LEVEL_STYLES.get(record.levelno)
        if style:
            message = click.style(message, **style)

        if record.exc_info:
            message = '{0}\n{1}'.format(message, self.formatException(record.exc_info))

        return message


def _get_stream(name):
    # Looked up per call, CliRunner swaps these out for each invocation
    return getattr(sys, name)


def make_log_handlers():
    formatter = StyledFormatter()
    handlers = []

    for stream_name, levels in LOG_STREAM_LEVELS:
        handler = logging.StreamHandler(_get_stream(stream_name))
        handler.addFilter(LevelFilter(levels))
        handler.setFormatter(formatter)
        handlers.append(handler)

    return handlers


def setup_logging(debug=False):
    log_level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(log_level)

    # Replace, rather than add to, the handlers of a previous in-process run
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    for handler in make_log_handlers():
        logger.addHandler(handler)

    logger.debug('Log level: {0}'.format(logging.getLevelName(log_level)))
