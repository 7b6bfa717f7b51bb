#!/usr/bin/env python
"""Command-line interface for odfdr-installer.

This module provides the main CLI entry point for the odfdr-installer tool,
handling command-line argument parsing and reporting failures of the
provisioning run.
"""

import sys

import click
from icecream import ic
from rich.markup import escape

from odfdr_installer import __version__, console
from odfdr_installer.core.installer import Installer
from odfdr_installer.exceptions import InstallerError
from odfdr_installer.models import InstallParams

DEFAULT_USERNAME = "kubeadmin"

USAGE = "Usage: odfdr-installer --url <URL> --username <username> --password <password> --rhceph-password <password>"
EXAMPLE = "Example: odfdr-installer --url api.cluster.example.com:6443 --password abc --rhceph-password=xyz"


def show_usage_and_exit(message: str) -> None:
    """Report a missing required value, print usage to stdout and exit 1.

    Args:
        message: The error to report before the usage line.

    """
    console.error(message)
    click.echo(USAGE)
    click.echo(EXAMPLE)
    sys.exit(1)


def report_failure(err: InstallerError, cluster: str) -> None:
    """Print the context of a failed run.

    Args:
        err: The error that aborted the run.
        cluster: The cluster identifier (or URL if login never happened).

    """
    console.error(f"Error during {err.operation}: {escape(str(err))}")
    items = {
        "Operation": err.operation,
        "Cluster": cluster,
        "Error": type(err).__name__,
        "Cause": escape(str(err)),
    }
    if err.__cause__ is not None:
        items["Underlying"] = escape(f"{type(err.__cause__).__name__}: {err.__cause__}")
    console.failure_panel("Provisioning Failed", items)


@click.command(help="Prepare an OpenShift cluster for ODF disaster recovery testing")
@click.option("--version", "-v", required=False, is_flag=True, help="print version")
@click.option("--debug", required=False, is_flag=True, help="print debug information")
@click.option("--url", required=False, help="OpenShift API URL")
@click.option("--username", required=False, default=DEFAULT_USERNAME, show_default=True, help="OpenShift username")
@click.option("--password", required=False, envvar="OPENSHIFT_PASSWORD", help="OpenShift password")
@click.option("--rhceph-password", required=False, envvar="RHCEPH_PASSWORD", help="RHCEPH repository password")
def cli(
    debug: bool,
    url: str | None,
    username: str,
    password: str | None,
    rhceph_password: str | None,
    version: bool,
) -> None:
    """Process CLI arguments and run the installer.

    Args:
        debug: Enable debug output.
        url: OpenShift API URL.
        username: OpenShift username.
        password: OpenShift password.
        rhceph_password: Basic auth credential for quay.io/rhceph-dev.
        version: Print version and exit.

    """
    if not debug:
        ic.disable()

    if version:
        click.echo(__version__)
        return

    if not url:
        show_usage_and_exit("URL is required")
    if not password:
        show_usage_and_exit("password is required")
    if not rhceph_password:
        show_usage_and_exit("RHCEPH password is required")

    params = InstallParams(url=url, username=username, password=password, rhceph_password=rhceph_password)
    ic(params)

    installer = Installer(params)
    try:
        installer.run()
    except InstallerError as e:
        report_failure(e, installer.cluster_name)
        sys.exit(1)


if __name__ == "__main__":
    cli()
