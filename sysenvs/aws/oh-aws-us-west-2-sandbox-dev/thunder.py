# This file is boilerplate. Copy it to any new sysenv that needs the aws-load-balancer-controller.
# The stack's config (`<stack>:cluster_name`, `<stack>:namespace`, `<stack>:chart_version`,
# `<stack>:create_service_account`) is read by the launcher and handed to the module.
from alb_thunder.launcher import run_active_stack

run_active_stack()
