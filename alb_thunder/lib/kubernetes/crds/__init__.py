from .load_crd import load_crd, crd_name
from .crd_group import CustomResourceDefinitions
