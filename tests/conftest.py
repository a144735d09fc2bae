import pytest

from alb_thunder.modules.aws.aws_load_balancer_controller import InstallOptions


@pytest.fixture()
def options():
    return InstallOptions(cluster_name="c1")


@pytest.fixture()
def values_file(tmp_path):
    def write(name, content, directory=None):
        path = (directory or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return write
