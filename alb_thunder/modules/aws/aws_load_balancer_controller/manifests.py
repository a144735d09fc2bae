import logging
from dataclasses import dataclass
from typing import Iterator

from alb_thunder.lib.kubernetes.crds import load_crd
from alb_thunder.lib.kubernetes.helm import HelmRelease
from .config import InstallOptions
from .defaults import CHART, CHART_REPO, CRD_FILES, RELEASE_NAME, SERVICE_ACCOUNT_NAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Manifests:
    crds: list[dict]
    """IngressClassParams and TargetGroupBinding CustomResourceDefinitions, in that order"""

    release: HelmRelease
    """The controller's Helm release"""

    def crd_documents(self) -> Iterator[dict]:
        """The CustomResourceDefinitions in apply order, the Helm release is not a manifest and is excluded"""
        yield from self.crds


def build_manifests(options: InstallOptions) -> Manifests:
    """
    Generate everything needed to install the aws-load-balancer-controller into a cluster.

    Only the Helm release depends on ``options``, the CRDs are static. The same options always produce the same
    manifests.

    See https://github.com/kubernetes-sigs/aws-load-balancer-controller/blob/main/docs/install/v2_0_0_full.yaml

    :param options: Install options
    :return: The CRDs and the Helm release
    """
    logger.debug("Building aws-load-balancer-controller manifests for %s", options)

    crds = [load_crd(path) for path in CRD_FILES]

    release = HelmRelease(
        chart=CHART,
        repo=CHART_REPO,
        release_name=RELEASE_NAME,
        namespace=options.namespace,
        version=options.chart_version,
        values={
            "clusterName": options.cluster_name,
            "serviceAccount": {
                "create": options.create_service_account,
                "name": SERVICE_ACCOUNT_NAME,
            },
        },
        # CRDs are shipped next to the release
        skip_crd_rendering=True,
    )

    return Manifests(crds=crds, release=release)
