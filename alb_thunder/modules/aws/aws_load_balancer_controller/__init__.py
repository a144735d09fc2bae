from .aws_load_balancer_controller import AwsLoadBalancerController
from .config import InstallOptions, AwsLoadBalancerControllerExports
from .manifests import Manifests, build_manifests
