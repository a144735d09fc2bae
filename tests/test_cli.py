import pytest
import yaml
from click.testing import CliRunner

from alb_thunder.lib.cli import cli


@pytest.fixture()
def runner(tmp_path, monkeypatch):
    # keep values discovery inside the test's directory
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)
    return CliRunner()


def test_render_crds(runner):
    result = runner.invoke(cli, ["render", "--cluster-name", "c1"])

    assert result.exit_code == 0, result.output
    documents = list(yaml.safe_load_all(result.output))
    assert [doc["spec"]["names"]["kind"] for doc in documents] == ["IngressClassParams", "TargetGroupBinding"]


def test_release_defaults(runner):
    result = runner.invoke(cli, ["release", "--cluster-name", "c1"])

    assert result.exit_code == 0, result.output
    assert yaml.safe_load(result.output) == {
        "chart": "eks/aws-load-balancer-controller",
        "releaseName": "aws-load-balancer-controller",
        "helmFlags": ["--namespace", "default", "--version", ""],
        "values": {
            "clusterName": "c1",
            "serviceAccount": {"create": True, "name": "aws-load-balancer-controller"},
        },
    }


def test_release_from_values_file_with_override(runner, values_file):
    path = values_file("values.yaml", "cluster_name: c1\nnamespace: kube-system\nchart_version: '1.4.1'\n")

    result = runner.invoke(cli, ["release", "-c", str(path), "--namespace", "lb", "--no-create-service-account"])

    assert result.exit_code == 0, result.output
    release = yaml.safe_load(result.output)
    assert release["helmFlags"] == ["--namespace", "lb", "--version", "1.4.1"]
    assert release["values"]["serviceAccount"]["create"] is False


def test_release_discovers_values(runner, values_file):
    values_file("alb-thunder.yaml", "cluster_name: discovered\n")

    result = runner.invoke(cli, ["release"])

    assert result.exit_code == 0, result.output
    assert yaml.safe_load(result.output)["values"]["clusterName"] == "discovered"


def test_missing_cluster_name(runner):
    result = runner.invoke(cli, ["render"])

    assert result.exit_code == 2
    assert "cluster_name" in result.output
    assert "--cluster-name" in result.output


def test_describe(runner):
    result = runner.invoke(cli, ["describe", "--cluster-name", "c1", "--chart-version", "1.4.1"])

    assert result.exit_code == 0, result.output
    assert "Cluster Name: c1" in result.output
    assert "Chart Version: 1.4.1" in result.output
    assert "Helm Flags: --namespace default --version 1.4.1" in result.output
    assert "CRD: targetgroupbindings.elbv2.k8s.aws (Namespaced)" in result.output


def test_unknown_key_in_values_file(runner, values_file):
    path = values_file("values.yaml", "cluster_name: c1\ncluster: typo\n")

    result = runner.invoke(cli, ["render", "-c", str(path)])

    assert result.exit_code == 2
    assert "Invalid configuration" in result.output
    assert "cluster" in result.output
    assert "Traceback" not in result.output


def test_unquoted_chart_version_in_values_file(runner, values_file):
    path = values_file("values.yaml", "cluster_name: c1\nchart_version: 1.4\n")

    result = runner.invoke(cli, ["release", "-c", str(path)])

    assert result.exit_code == 2
    assert "Invalid configuration" in result.output
    assert "chart_version" in result.output
