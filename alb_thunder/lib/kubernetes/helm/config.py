from dataclasses import dataclass, field
from typing import Any, Optional, Callable


@dataclass(frozen=True)
class HelmRelease:
    chart: str
    """Chart reference, optionally prefixed with the repository alias (`eks/aws-load-balancer-controller`)"""

    release_name: str
    """Name of the Helm release"""

    namespace: str
    """Namespace to install the release into"""

    version: str
    """Chart version, an empty string installs the latest version"""

    values: dict[str, Any]
    """Values passed to the chart"""

    repo: Optional[str] = None
    """URL of the chart repository the alias points at"""

    skip_crd_rendering: bool = False
    """Skip the chart's own CRDs when they are installed separately"""

    transformations: list[Callable] = field(default_factory=list, compare=False)
    """Extra Pulumi transformations applied to the rendered chart"""

    @property
    def chart_name(self) -> str:
        """Chart name without the repository alias"""
        return self.chart.rsplit("/", 1)[-1]

    @property
    def flags(self) -> list[str]:
        """Command line flags for `helm install`/`helm template`"""
        return ["--namespace", self.namespace, "--version", self.version]

    def as_dict(self) -> dict[str, Any]:
        return {
            "chart": self.chart,
            "releaseName": self.release_name,
            "helmFlags": self.flags,
            "values": self.values,
        }
