import collections.abc

from pulumi import ResourceOptions, ComponentResource
from pulumi_kubernetes import helm

from .config import HelmRelease


def deep_update(source, overrides):
    """
    Update a nested dictionary or similar mapping.
    Modify ``source`` in place.
    Source: https://stackoverflow.com/a/30655448
    """
    for key, value in overrides.items():
        if isinstance(value, collections.abc.Mapping) and value:
            source[key] = deep_update(source.get(key, {}), value)
        else:
            source[key] = overrides[key]
    return source


def _noawait(obj, opts):
    """
    Pulumi waits for every rendered resource to become ready. The controller's Service and webhook objects only settle
    once the Deployment is up, which Pulumi may not have created yet, so skip the await for everything in the chart.
    """
    if obj.get("metadata"):
        deep_update(obj["metadata"], {"annotations": {"pulumi.com/skipAwait": "true"}})


def _nostatus(obj, opts):
    """
    This is a work-around for the issue described in https://github.com/pulumi/pulumi-kubernetes/issues/1481
    """
    if obj.get("kind") == "CustomResourceDefinition" and obj.get("status"):
        del obj["status"]


def chart_opts(release: HelmRelease) -> helm.v3.ChartOpts:
    """Translate a release descriptor into the options Pulumi renders the chart with"""
    return helm.v3.ChartOpts(
        chart=release.chart_name,
        namespace=release.namespace,
        # an empty version means "whatever is latest in the repo"
        fetch_opts=helm.v3.FetchOpts(repo=release.repo, version=release.version or None),
        values=release.values,
        transformations=[_noawait, _nostatus] + release.transformations,
        skip_crd_rendering=release.skip_crd_rendering,
    )


class HelmChartComponent(ComponentResource):
    """
    Installs a Helm release as a Pulumi component.

    The release name doubles as the Pulumi resource name of the rendered chart, so parent the component properly to
    avoid URN collisions when the same chart lands in several clusters.
    """

    def __init__(self, name: str, release: HelmRelease, opts: ResourceOptions):
        super().__init__(f"pkg:albthunder:{self.__class__.__name__.lower()}", name, None, opts)
        self.name = name
        self.opts = opts
        self.release = release

        self.chart_opts = chart_opts(release)
        self.chart = self.configure()

        self.register_outputs({"release_name": release.release_name})

    def configure(self) -> helm.v3.Chart:
        return helm.v3.Chart(
            self.release.release_name,
            config=self.chart_opts,
            opts=ResourceOptions(parent=self, provider=self.opts.provider),
        )
