from pulumi import ResourceOptions, log

from alb_thunder.lib.base import BaseModule
from alb_thunder.lib.kubernetes.crds import CustomResourceDefinitions
from alb_thunder.lib.kubernetes.helm import HelmChartComponent
from .config import InstallOptions, AwsLoadBalancerControllerExports
from .defaults import DEPLOYMENT_NAME, SERVICE_ACCOUNT_NAME
from .manifests import build_manifests


class AwsLoadBalancerController(BaseModule):
    """
    Installs the aws-load-balancer-controller CRDs and Helm chart into a cluster
    """

    provider: str = "aws"

    def __init__(self, name: str, config: InstallOptions, opts: ResourceOptions = None):
        super().__init__(name, config, opts)

        self.service_account_name = SERVICE_ACCOUNT_NAME
        self.deployment_name = DEPLOYMENT_NAME
        self.cluster_name = config.cluster_name
        self.namespace = config.namespace
        self.chart_version = config.chart_version

    def build(self, config: InstallOptions) -> AwsLoadBalancerControllerExports:
        manifests = build_manifests(config)

        log.debug(f"installing `{manifests.release.release_name}` into namespace `{config.namespace}`")

        self.crds = CustomResourceDefinitions(
            "aws-load-balancer-controller-crds",
            crds=manifests.crds,
            opts=ResourceOptions(parent=self),
        )

        # the chart's webhooks reference the CRDs, install them first
        self.chart = HelmChartComponent(
            manifests.release.release_name,
            release=manifests.release,
            opts=ResourceOptions(parent=self, depends_on=[self.crds]),
        )

        return AwsLoadBalancerControllerExports(
            cluster_name=self.cluster_name,
            namespace=self.namespace,
            chart_version=self.chart_version,
            service_account_name=self.service_account_name,
            deployment_name=self.deployment_name,
            release_name=manifests.release.release_name,
            crd_names=self.crds.names,
        )
