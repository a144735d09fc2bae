from .hierarchical import ControllerConfigException, HierarchicalConfig, load_values_files
from .mapper import config_from_dict, get_stack_config
