import logging
from pathlib import Path

import click
import yaml
from dacite import DaciteError

from alb_thunder.lib.config import (
    ControllerConfigException,
    HierarchicalConfig,
    config_from_dict,
    load_values_files,
)
from alb_thunder.modules.aws.aws_load_balancer_controller import InstallOptions, Manifests, build_manifests
from alb_thunder.modules.aws.aws_load_balancer_controller.defaults import DEPLOYMENT_NAME


def echo_key_value(key, value):
    click.echo(click.style(f"{key}: ", fg="green", bold=True) + str(value))


def install_options(func):
    """Options shared by every command that builds the manifests"""
    options = [
        click.option(
            "-c",
            "--config",
            "config_files",
            multiple=True,
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="Values file, may be repeated (later files win). "
            "Defaults to every alb-thunder.yaml from the working directory up to the git root.",
        ),
        click.option("--cluster-name", help="Kubernetes cluster name"),
        click.option("--namespace", help="Namespace to install the controller into"),
        click.option("--chart-version", help="Helm chart version (default: latest)"),
        click.option(
            "--create-service-account/--no-create-service-account",
            default=None,
            help="Let the chart create the service account",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build(config_files, **overrides) -> Manifests:
    if config_files:
        values = load_values_files(config_files)
    else:
        values = dict(HierarchicalConfig(Path.cwd()))

    values.update({k: v for k, v in overrides.items() if v is not None})

    logging.getLogger(__name__).debug("resolved values %s", values)

    try:
        options = config_from_dict(values, InstallOptions)
    except ControllerConfigException as e:
        raise click.UsageError(f"{e}, pass --{e.key.replace('_', '-')} or set it in a values file")
    except DaciteError as e:
        # unknown keys and wrong value types in a values file
        raise click.UsageError(f"Invalid configuration: {e}")

    return build_manifests(options)


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Enable DEBUG logging")
def cli(debug):
    logging.basicConfig(format="[%(asctime)s %(levelname)s %(name)s %(threadName)s]: %(message)s")

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        click.echo("Enabled debug mode!", err=True)


@cli.command()
@install_options
def render(config_files, **overrides):
    """Print the CustomResourceDefinitions as multi-document YAML"""
    manifests = _build(config_files, **overrides)

    click.echo(yaml.safe_dump_all(manifests.crd_documents(), sort_keys=False), nl=False)


@cli.command()
@install_options
def release(config_files, **overrides):
    """Print the Helm release descriptor as YAML"""
    manifests = _build(config_files, **overrides)

    click.echo(yaml.safe_dump(manifests.release.as_dict(), sort_keys=False), nl=False)


@cli.command()
@install_options
def describe(config_files, **overrides):
    """Summarize what would be installed"""
    manifests = _build(config_files, **overrides)
    release = manifests.release

    echo_key_value("Cluster Name", release.values["clusterName"])
    echo_key_value("Namespace", release.namespace)
    echo_key_value("Chart", f"{release.chart} ({release.repo})")
    echo_key_value("Chart Version", release.version or "latest")
    echo_key_value("Release Name", release.release_name)
    echo_key_value("Deployment Name", DEPLOYMENT_NAME)
    echo_key_value("Service Account", release.values["serviceAccount"]["name"])
    echo_key_value("Create Service Account", release.values["serviceAccount"]["create"])
    echo_key_value("Helm Flags", " ".join(release.flags))

    for crd in manifests.crds:
        echo_key_value("CRD", f"{crd['metadata']['name']} ({crd['spec']['scope']})")


def run():
    exit(cli())


if __name__ == "__main__":
    run()
