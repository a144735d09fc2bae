from .config import HelmRelease
from .helm_chart_component import HelmChartComponent, chart_opts
