"""Site build pipeline: configuration, aggregation, rendering and CLI."""

from .config import BuildConfig, resolve_target_environments
from .data_aggregator import DetailPageSource, SiteModel, aggregate_site_data
from .renderer import PagePlanEntry, build_page_plan, render_site
from .runner import build_environment, run_builds

__all__ = [
    "BuildConfig",
    "DetailPageSource",
    "PagePlanEntry",
    "SiteModel",
    "aggregate_site_data",
    "build_environment",
    "build_page_plan",
    "render_site",
    "resolve_target_environments",
    "run_builds",
]
