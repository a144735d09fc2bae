import logging
import os

from pulumi import get_stack, log, export

from alb_thunder.lib.config import get_stack_config
from alb_thunder.lib.utils import to_outputs
from alb_thunder.modules.aws.aws_load_balancer_controller import AwsLoadBalancerController


def run_stack(stack_name: str) -> None:
    """Install the aws-load-balancer-controller with the stack's configuration

    :param stack_name: The stack name
    :return: None
    """
    config = get_stack_config(
        stack=stack_name,
        config_cls=AwsLoadBalancerController.get_config_type(),
    )

    log.debug(f"running module `{AwsLoadBalancerController.__name__}` for stack `{stack_name}`")

    module = AwsLoadBalancerController(name=stack_name, config=config)

    exports = module.run()

    export(stack_name, to_outputs(exports))


def run_active_stack() -> None:
    """Install the aws-load-balancer-controller using the active stack's configuration

    :return: None
    """
    stack = get_stack()

    log.debug(f"active stack is `{stack}`")

    run_stack(stack)


if os.getenv("ALB_THUNDER_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)
    msg = "alb-thunder logging enabled"
    log.debug(msg)
    logging.debug(msg)
