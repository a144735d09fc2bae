import logging
from copy import deepcopy
from functools import lru_cache
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

CRD_API_VERSION = "apiextensions.k8s.io/v1"
CRD_KIND = "CustomResourceDefinition"


@lru_cache
def _read_crd(path: Path) -> dict:
    logger.debug("Reading CRD from %s", path)
    with open(path) as f:
        crd = yaml.safe_load(f)

    if not isinstance(crd, dict) or crd.get("apiVersion") != CRD_API_VERSION or crd.get("kind") != CRD_KIND:
        raise ValueError(f"{path} is not an {CRD_API_VERSION} {CRD_KIND}")

    return crd


def load_crd(path: Path) -> dict:
    """
    Load a CustomResourceDefinition manifest shipped as a YAML asset

    The file is parsed once, every call returns a fresh copy so callers are free to modify it.

    :param path: Path to the YAML file
    :return: The CRD as a dict
    """
    return deepcopy(_read_crd(Path(path)))


def crd_name(crd: dict) -> str:
    return crd["metadata"]["name"]
