from pathlib import Path

# Helm chart published in the eks-charts repository (`helm repo add eks https://aws.github.io/eks-charts`)
CHART = "eks/aws-load-balancer-controller"
CHART_REPO = "https://aws.github.io/eks-charts"
RELEASE_NAME = "aws-load-balancer-controller"

# The chart names both the service account and deployment after the release
SERVICE_ACCOUNT_NAME = "aws-load-balancer-controller"
DEPLOYMENT_NAME = "aws-load-balancer-controller"

DEFAULT_NAMESPACE = "default"

# empty version means the latest chart version
LATEST_CHART_VERSION = ""

CRDS_DIR = Path(__file__).parent / "crds"

# Order matters, this is the order the CRDs are emitted and applied in
CRD_FILES = [
    CRDS_DIR / "ingressclassparams.yaml",
    CRDS_DIR / "targetgroupbindings.yaml",
]
