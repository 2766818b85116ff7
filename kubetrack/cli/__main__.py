#!/usr/bin/env python

from kubetrack.cli import cli_bootstrap
from kubetrack.main import run_cli
# Import click commands
from kubetrack.cli import normalize, parse_value, set_instance, show  # noqa: F401, I100


def main():
    run_cli(cli_bootstrap)


if __name__ == '__main__':
    main()
