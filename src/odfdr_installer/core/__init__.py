"""Core infrastructure subpackage.

This package contains the main Installer facade class along with
cluster session, host and oc command utilities.
"""

from odfdr_installer.core.installer import Installer
from odfdr_installer.core.openshift import OpenShiftCLI

__all__ = [
    "Installer",
    "OpenShiftCLI",
]
