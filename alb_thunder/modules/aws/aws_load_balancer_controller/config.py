from dataclasses import dataclass, field
from typing import Optional

from alb_thunder.lib.config import ControllerConfigException
from .defaults import DEFAULT_NAMESPACE, LATEST_CHART_VERSION


@dataclass(frozen=True)
class InstallOptions:
    cluster_name: str
    """Name of the Kubernetes cluster the controller manages load balancers for"""

    namespace: Optional[str] = DEFAULT_NAMESPACE
    """Namespace to install the controller into"""

    chart_version: Optional[str] = LATEST_CHART_VERSION
    """Helm chart version, defaults to the latest version"""

    create_service_account: Optional[bool] = True
    """Let the chart create the controller's service account"""

    def __post_init__(self):
        if not self.cluster_name:
            raise ControllerConfigException("cluster_name")

        # explicit nulls fall back to the defaults
        if self.namespace is None:
            object.__setattr__(self, "namespace", DEFAULT_NAMESPACE)
        if self.chart_version is None:
            object.__setattr__(self, "chart_version", LATEST_CHART_VERSION)
        if self.create_service_account is None:
            object.__setattr__(self, "create_service_account", True)


@dataclass
class AwsLoadBalancerControllerExports:
    cluster_name: str
    """Cluster the controller is configured for"""

    namespace: str
    """Namespace the controller runs in"""

    chart_version: str
    """Requested chart version (empty for latest)"""

    service_account_name: str
    """Service account used by the controller"""

    deployment_name: str
    """Name of the controller deployment"""

    release_name: str
    """Helm release name"""

    crd_names: list[str] = field(default_factory=list)
    """CustomResourceDefinitions installed alongside the chart"""
