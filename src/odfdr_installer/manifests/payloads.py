"""Static manifests bundled with the installer.

These are applied byte-for-byte; nothing is substituted at runtime.
"""

from odfdr_installer.models import Manifest

_ICSP_YAML = """\
apiVersion: operator.openshift.io/v1alpha1
kind: ImageContentSourcePolicy
metadata:
  name: df-repo
spec:
  repositoryDigestMirrors:
  - mirrors:
    - quay.io/rhceph-dev/ocs-registry
    source: registry.redhat.io/odf4
  - mirrors:
    - quay.io/rhceph-dev/ocs-registry
    source: registry.redhat.io/ocs4
  - mirrors:
    - quay.io/rhceph-dev/ocs-registry
    source: registry.redhat.io/odr4
  - mirrors:
    - quay.io/rhceph-dev/rhceph
    source: registry.redhat.io/rhceph
  - mirrors:
    - quay.io/rhceph-dev
    source: registry.redhat.io/openshift4
"""

_CATALOG_SOURCE_YAML = """\
apiVersion: operators.coreos.com/v1alpha1
kind: CatalogSource
metadata:
  name: odf-catalogsource
  namespace: openshift-marketplace
spec:
  displayName: OpenShift Data Foundation
  image: quay.io/rhceph-dev/ocs-registry:latest-stable-4.16
  publisher: Red Hat
  sourceType: grpc
  updateStrategy:
    registryPoll:
      interval: 15m
"""

ICSP = Manifest(name="ImageContentSourcePolicy", suffix="icsp.yaml", content=_ICSP_YAML)
CATALOG_SOURCE = Manifest(name="CatalogSource", suffix="catalogsource.yaml", content=_CATALOG_SOURCE_YAML)

# Mirroring must exist before the catalog image is pulled
DEFAULT_MANIFESTS: tuple[Manifest, ...] = (ICSP, CATALOG_SOURCE)
