import logging
from collections import UserDict
from pathlib import Path
from typing import Iterable, Union

import hiyapyco

logger = logging.getLogger(__name__)

DEFAULT_VALUES_FILENAME = "alb-thunder.yaml"


class ControllerConfigException(Exception):
    def __init__(self, key):
        super().__init__(f"Missing required configuration variable '{key}'")
        self.key = key


def load_values_files(paths: Iterable[Union[str, Path]]) -> dict:
    """
    Merge a list of YAML values files, later files overriding earlier ones.

    :param paths: Values files, lowest precedence first
    :return: The merged values, or an empty dict when no files are given
    """
    paths = [str(path) for path in paths]
    if not paths:
        return {}

    logger.debug("Merging values files %s", paths)
    merged = hiyapyco.load(paths, method=hiyapyco.METHOD_MERGE, failonmissingfiles=True)

    # hiyapyco hands back None for files that are empty
    return dict(merged or {})


class HierarchicalConfig(UserDict):
    """
    HierarchicalConfig is a UserDict that loads values from a tiered set of `alb-thunder.yaml` files.

    The lookup starts in ``start`` and walks the filesystem upwards a configurable number of times, stopping at the
    git project root. Files closer to ``start`` win over files further up.

    Example usage:
        from alb_thunder.lib.config import HierarchicalConfig

        values = HierarchicalConfig(Path.cwd())
        values.get("namespace", "default")
        values.require("cluster_name")
    """

    def __init__(self, start: Path, limit: int = 5, filename: str = DEFAULT_VALUES_FILENAME):
        """
        Create a HierarchicalConfig UserDict

        :param start: Directory to start the lookup from
        :param limit: Max parent directories to walk
        :param filename: Filename to find and merge
        """
        super().__init__()
        self.filename = filename
        self.paths = list(reversed(self._discover_configs(Path(start).absolute(), limit)))
        logger.debug("Found configs in %s", self.paths)

        self.data = load_values_files(self.paths)

    def require(self, key: str) -> any:
        """
        Require a key from the configuration and return it. If not found, throw a `ControllerConfigException`

        :param key: Key string to require from the configuration
        :return: Object
        """
        if (v := self.get(key)) is not None:
            return v
        else:
            raise ControllerConfigException(key)

    def _discover_configs(self, start: Path, limit: int) -> list[Path]:
        """
        Walk upwards from ``start`` and collect every file matching ``self.filename``, nearest first

        :param start: Directory to start from
        :param limit: Max parent directories to walk
        :return:
        """
        config_paths = []

        for path in [start] + list(start.parents)[:limit]:
            logger.debug("Looking in [%s] for [%s]", path, self.filename)
            maybe_config = path / self.filename
            if maybe_config.is_file():
                logger.debug("Detected config [%s]", maybe_config)
                config_paths.append(maybe_config)

            # a config may live at the project root, but not above it
            if (path / ".git").is_dir():
                logger.debug("Found project root, breaking")
                break

        return config_paths
