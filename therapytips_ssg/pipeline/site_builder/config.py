"""Build configuration for one target environment.

``BuildConfig`` is the single, immutable settings object of a build. It is
constructed once per environment from the merged environment mapping (see
``therapytips_ssg.env_loader``) and passed explicitly to the aggregator and
the renderer; no other build module reads ``os.environ``.

Examples
--------
>>> from therapytips_ssg.pipeline.site_builder.config import BuildConfig
>>> cfg = BuildConfig.from_env("prod", environ={})
>>> cfg.api_base_url
'https://api.therapytips.org'
>>> cfg.minify_assets, cfg.include_debug_info
(True, False)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from therapytips_ssg import config as _config
from therapytips_ssg.env_loader import env_flag
from therapytips_ssg.exceptions import ConfigurationError


@dataclass(frozen=True)
class BuildConfig:
    r"""Immutable per-environment build settings.

    Attributes
    ----------
    environment : str
        ``dev``, ``stage`` or ``prod``.
    api_base_url : str
        Root URL of the content API.
    minify_assets : bool
        Normalize whitespace of rendered HTML before writing.
    include_debug_info : bool
        Exposed to templates for debug banners.
    copy_photos : bool
        Copy the ``photos/`` tree into the output.
    output_dir : Path
        ``builds/{environment}``.
    builds_dir : Path
        Root of all build outputs; the output directory must lie inside it.
    youtube_api_key : str
        YouTube Data API key; empty disables metadata fetches.
    trending_source : str
        ``analytics`` or ``legacy-html``.
    analytics_key_file : Path
        Service-account key file for the analytics report.
    analytics_property_id : str
        Analytics property id.
    base_url, base_dir : str
        Public URL prefix and directory handed to detail templates.
    """

    environment: str
    api_base_url: str
    minify_assets: bool
    include_debug_info: bool
    copy_photos: bool
    output_dir: Path
    builds_dir: Path = _config.BUILDS_DIR
    youtube_api_key: str = ""
    trending_source: str = _config.DEFAULT_TRENDING_SOURCE
    analytics_key_file: Path = _config.DEFAULT_ANALYTICS_KEY_FILE
    analytics_property_id: str = _config.DEFAULT_ANALYTICS_PROPERTY_ID
    base_url: str = ""
    base_dir: str = ""

    @classmethod
    def from_env(
        cls,
        environment: str,
        copy_photos_flag: bool = False,
        environ: Mapping[str, str] | None = None,
        builds_dir: Path | None = None,
    ) -> BuildConfig:
        """Build the configuration for ``environment`` from ``environ``.

        Raises
        ------
        ConfigurationError
            If ``environment`` or ``TRENDING_SOURCE`` is not a known value.
        """
        if environment not in _config.VALID_ENVIRONMENTS:
            raise ConfigurationError(
                f"Invalid environment: {environment}. Must be one of: "
                + ", ".join(_config.VALID_ENVIRONMENTS),
                context={"environment": environment},
            )
        env = dict(environ or {})
        trending_source = env.get("TRENDING_SOURCE") or _config.DEFAULT_TRENDING_SOURCE
        if trending_source not in _config.TRENDING_SOURCES:
            raise ConfigurationError(
                f"Invalid TRENDING_SOURCE: {trending_source}. Must be one of: "
                + ", ".join(_config.TRENDING_SOURCES),
            )
        copy_photos = (
            copy_photos_flag
            or env_flag(env, "COPY_PHOTOS")
            or env_flag(env, "INCLUDE_PHOTOS")
        )
        key_file = env.get("GA_KEY_FILE")
        root = Path(builds_dir) if builds_dir is not None else _config.BUILDS_DIR
        return cls(
            environment=environment,
            api_base_url=env.get("API_BASE_URL")
            or _config.DEFAULT_API_BASE_URLS[environment],
            minify_assets=_config.MINIFY_ASSETS[environment],
            include_debug_info=_config.INCLUDE_DEBUG_INFO[environment],
            copy_photos=copy_photos,
            output_dir=root / environment,
            builds_dir=root,
            youtube_api_key=env.get("YT_API_KEY", ""),
            trending_source=trending_source,
            analytics_key_file=Path(key_file) if key_file else _config.DEFAULT_ANALYTICS_KEY_FILE,
            analytics_property_id=env.get("GA_PROPERTY_ID")
            or _config.DEFAULT_ANALYTICS_PROPERTY_ID,
            base_url=env.get("BASE_URL", ""),
            base_dir=env.get("BASE_DIR", ""),
        )

    def template_view(self) -> dict[str, Any]:
        """Return the settings exposed to templates as ``config``."""
        return {
            "environment": self.environment,
            "minify_assets": self.minify_assets,
            "include_debug_info": self.include_debug_info,
            "api_base_url": self.api_base_url,
            "copy_photos": self.copy_photos,
        }


def resolve_target_environments(
    env_arg: str | None, environ: Mapping[str, str]
) -> list[str]:
    """Decide which environments to build.

    Resolution order: the explicit ``--env`` value, then ``NODE_ENV`` or
    ``BUILD_ENV`` (``development``/``staging``/``production``), then
    heuristics on ``API_BASE_URL``. When nothing matches, every environment is
    built in ``dev``, ``stage``, ``prod`` order.

    Raises
    ------
    ConfigurationError
        If ``env_arg`` is given but is not a valid environment.

    Examples
    --------
    >>> resolve_target_environments(None, {"NODE_ENV": "staging"})
    ['stage']
    >>> resolve_target_environments(None, {"API_BASE_URL": "http://localhost:3000"})
    ['dev']
    >>> resolve_target_environments(None, {})
    ['dev', 'stage', 'prod']
    """
    if env_arg is not None:
        if env_arg not in _config.VALID_ENVIRONMENTS:
            raise ConfigurationError(
                f"Invalid environment: {env_arg}. Must be one of: "
                + ", ".join(_config.VALID_ENVIRONMENTS),
                context={"env": env_arg},
            )
        return [env_arg]

    node_env = environ.get("NODE_ENV")
    build_env = environ.get("BUILD_ENV")
    for long_name, short_name in _config.ENVIRONMENT_NAMES.items():
        if long_name in (node_env, build_env):
            return [short_name]

    api_base_url = environ.get("API_BASE_URL") or ""
    if api_base_url:
        if "localhost" in api_base_url or "3000" in api_base_url:
            return ["dev"]
        if "staging" in api_base_url:
            return ["stage"]
        if "api.therapytips.org" in api_base_url:
            return ["prod"]

    return list(_config.VALID_ENVIRONMENTS)
