import pytest
from dacite import UnexpectedDataError, WrongTypeError
from pulumi.runtime import set_config

from alb_thunder.lib.config import (
    ControllerConfigException,
    HierarchicalConfig,
    config_from_dict,
    get_stack_config,
    load_values_files,
)
from alb_thunder.modules.aws.aws_load_balancer_controller import InstallOptions


def test_defaults_from_dict():
    options = config_from_dict({"cluster_name": "c1"}, InstallOptions)

    assert options == InstallOptions(cluster_name="c1", namespace="default", chart_version="", create_service_account=True)


def test_all_fields_from_dict():
    options = config_from_dict(
        {"cluster_name": "c1", "namespace": "kube-system", "chart_version": "1.4.1", "create_service_account": False},
        InstallOptions,
    )

    assert options.namespace == "kube-system"
    assert options.chart_version == "1.4.1"
    assert options.create_service_account is False


def test_missing_cluster_name():
    with pytest.raises(ControllerConfigException) as e:
        config_from_dict({"namespace": "kube-system"}, InstallOptions)

    assert e.value.key == "cluster_name"
    assert str(e.value) == "Missing required configuration variable 'cluster_name'"


def test_empty_cluster_name():
    with pytest.raises(ControllerConfigException):
        config_from_dict({"cluster_name": ""}, InstallOptions)


def test_unknown_keys_are_rejected():
    with pytest.raises(UnexpectedDataError):
        config_from_dict({"cluster_name": "c1", "cluster": "typo"}, InstallOptions)


def test_wrong_types_are_rejected():
    with pytest.raises(WrongTypeError):
        config_from_dict({"cluster_name": "c1", "create_service_account": "yes please"}, InstallOptions)


def test_options_are_immutable(options):
    with pytest.raises(AttributeError):
        options.namespace = "other"


def test_stack_config():
    set_config("lbc-stack-a:cluster_name", "c1")
    set_config("lbc-stack-a:chart_version", "1.4")
    set_config("lbc-stack-a:create_service_account", "false")

    options = get_stack_config("lbc-stack-a", InstallOptions)

    assert options == InstallOptions(cluster_name="c1", chart_version="1.4", create_service_account=False)


def test_stack_config_requires_cluster_name():
    set_config("lbc-stack-b:namespace", "kube-system")

    with pytest.raises(ControllerConfigException):
        get_stack_config("lbc-stack-b", InstallOptions)


def test_load_values_files_later_wins(values_file):
    base = values_file("base.yaml", "cluster_name: c1\nnamespace: first\n")
    override = values_file("override.yaml", "namespace: second\n")

    assert load_values_files([base, override]) == {"cluster_name": "c1", "namespace": "second"}


def test_load_no_values_files():
    assert load_values_files([]) == {}


def test_hierarchical_config_nearest_wins(tmp_path, values_file):
    (tmp_path / ".git").mkdir()
    nested = tmp_path / "sysenvs" / "dev"
    values_file("alb-thunder.yaml", "cluster_name: root\nnamespace: kube-system\n")
    values_file("alb-thunder.yaml", "cluster_name: dev\n", directory=nested)

    values = HierarchicalConfig(nested)

    assert values.paths == [tmp_path / "alb-thunder.yaml", nested / "alb-thunder.yaml"]
    assert dict(values) == {"cluster_name": "dev", "namespace": "kube-system"}
    assert values.require("cluster_name") == "dev"


def test_hierarchical_config_stops_at_project_root(tmp_path, values_file):
    project = tmp_path / "project"
    (project / ".git").mkdir(parents=True)
    values_file("alb-thunder.yaml", "cluster_name: outside\n")

    values = HierarchicalConfig(project)

    assert values.paths == []
    assert dict(values) == {}
    with pytest.raises(ControllerConfigException):
        values.require("cluster_name")
