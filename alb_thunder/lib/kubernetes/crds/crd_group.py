from copy import deepcopy

from pulumi import ResourceOptions, ComponentResource
from pulumi_kubernetes import apiextensions

from alb_thunder.lib.kubernetes.helm.helm_chart_component import _nostatus
from .load_crd import crd_name


class CustomResourceDefinitions(ComponentResource):
    """
    Applies a list of CustomResourceDefinition manifests to the cluster, one resource per CRD
    """

    def __init__(self, name: str, crds: list[dict], opts: ResourceOptions):
        super().__init__(f"pkg:albthunder:kubernetes:{self.__class__.__name__.lower()}", name, None, opts)

        self.names = [crd_name(crd) for crd in crds]
        self.resources = [self._create_crd(crd, opts) for crd in crds]

        self.register_outputs({"names": self.names})

    def _create_crd(self, crd: dict, opts: ResourceOptions) -> apiextensions.v1.CustomResourceDefinition:
        crd = deepcopy(crd)
        _nostatus(crd, None)

        # schemas are plain dicts with their Kubernetes (camelCase) keys, they are sent to the API as-is
        return apiextensions.v1.CustomResourceDefinition(
            crd_name(crd),
            api_version=crd["apiVersion"],
            kind=crd["kind"],
            metadata=crd["metadata"],
            spec=crd["spec"],
            opts=ResourceOptions(parent=self, provider=opts.provider),
        )
