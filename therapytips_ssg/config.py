"""Global configuration constants for the project.

Defines paths, remote endpoints, fixed content selections and defaults used
across the build and upload pipelines.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
LOG_DIR: Path = PROJECT_ROOT / "logs"
BUILDS_DIR: Path = PROJECT_ROOT / "builds"
TEMPLATES_DIR: Path = PROJECT_ROOT / "templates"
ASSETS_DIR: Path = PROJECT_ROOT / "assets"
STYLESHEET_PATH: Path = ASSETS_DIR / "css" / "style.css"
IMAGES_DIR: Path = ASSETS_DIR / "images"
PHOTOS_DIR: Path = PROJECT_ROOT / "photos"

# Environments
VALID_ENVIRONMENTS: tuple[str, ...] = ("dev", "stage", "prod")
ENVIRONMENT_NAMES: dict[str, str] = {
    "development": "dev",
    "staging": "stage",
    "production": "prod",
}
ENV_FILES: dict[str, str] = {
    "dev": ".env.development",
    "stage": ".env.staging",
    "prod": ".env.production",
}
DEFAULT_API_BASE_URLS: dict[str, str] = {
    "dev": "http://localhost:3000",
    "stage": "https://staging-api.therapytips.org",
    "prod": "https://api.therapytips.org",
}
MINIFY_ASSETS: dict[str, bool] = {"dev": False, "stage": True, "prod": True}
INCLUDE_DEBUG_INFO: dict[str, bool] = {"dev": True, "stage": True, "prod": False}

# Public site
SITE_HOST: str = "therapytips.org"
SITE_URL: str = f"https://{SITE_HOST}"

# Content types, in page-plan order
CONTENT_TYPES: tuple[str, ...] = ("articles", "advice", "interviews", "personality-tests")

# Hand-picked articles shown on the landing page
FEATURED_SLUGS: dict[str, tuple[str, ...]] = {
    "advice": (
        "3-surprising-benefits-of-a-reverse-bucket-list",
        "3-emotionally-nourishing-shifts-to-make-your-day-more-fulfilling",
    ),
    "articles": (
        "a-psychologist-explains-the-surprising-link-between-skipping-breakfast-and-depression",
        "3-reasons-why-you-cant-stop-thinking-about-your-ex",
        "3-ways-your-beliefs-about-sex-affect-your-relationships",
        "4-types-of-teen-anger-and-what-they-actually-mean",
    ),
    "personality-tests": (
        "codependency-scale",
        "beck-depression-inventory",
    ),
    "interviews": (
        "university-of-cologne-research-explores-how-parenthood-contributes-to-more-meaning-in-life",
        "new-research-explains-the-role-of-future-anxiety-in-delayed-parenthood",
        "a-successful-entrepreneur-explains-what-it-takes-to-reinvent-yourself",
        "azusa-pacific-university-researchers-reveal-the-psychological-driving-forces-behind-the-ick",
    ),
}

# Listing and detail page sizes
LATEST_LIST_LIMITS: dict[str, int] = {
    "articles": 12,
    "interviews": 12,
    "advice": 12,
    "personality-tests": 16,
}
RECENT_WINDOW_TYPES: frozenset[str] = frozenset({"articles", "advice"})
RECENT_WINDOW_DAYS: int = 60
NEWEST_FIRST_SORT: str = "publication_date_desc"
DETAIL_PAGE_LIMIT: int = 10

# YouTube
YOUTUBE_API_URL: str = "https://www.googleapis.com/youtube/v3/videos"
YOUTUBE_PARTS: str = (
    "snippet,statistics,recordingDetails,status,liveStreamingDetails,"
    "localizations,contentDetails,paidProductPlacementDetails,player,topicDetails"
)
SECTION_VIDEO_URLS: dict[str, str] = {
    "landing": "https://www.youtube.com/watch?v=-4u-egrCw1A",
    "articles": "https://www.youtube.com/watch?v=XrcXYrU_ETg",
    "interviews": "https://www.youtube.com/watch?v=s2TUkAnUXt0",
    "advice": "https://www.youtube.com/watch?v=bqHVTUFGQao",
    "personality-tests": "https://www.youtube.com/watch?v=mu2tbABwVcA",
}
EXTRA_VIDEO_URLS: tuple[str, ...] = (
    "https://www.youtube.com/watch?v=IaJmyY1rjs8",
    "https://www.youtube.com/watch?v=EFC_IolRbh0",
)

# Trending pages
TRENDING_SOURCES: tuple[str, ...] = ("analytics", "legacy-html")
DEFAULT_TRENDING_SOURCE: str = "analytics"
DEFAULT_ANALYTICS_KEY_FILE: Path = PROJECT_ROOT / "secrets" / "top-articles-analytics.json"
DEFAULT_ANALYTICS_PROPERTY_ID: str = "272582946"
TRENDING_START_DATE: str = "30daysAgo"
TRENDING_END_DATE: str = "today"
TRENDING_REPORT_LIMIT: int = 20
TRENDING_MAX_ITEMS: int = 6
TRENDING_PATH_PREFIXES: tuple[str, ...] = (
    "/articles/",
    "/interviews/",
    "/advice/",
    "/personality-tests/",
)
TRENDING_FALLBACK_TITLE: str = "No title found"
LEGACY_TRENDING_URL: str = f"{SITE_URL}/analytics/fetch-top-articles.php"

# Rendering
PLACEHOLDER_AUTHOR_NAME: str = "Unknown Author"
WORDS_PER_MINUTE: int = 200
PAGE_EXTENSION: str = ".html"

# Upload defaults
DEFAULT_UPLOAD_ENVIRONMENT: str = "prod"
DEFAULT_FTP_PORT: int = 21
DEFAULT_FTP_REMOTE_PATH: str = "/"

# Logging
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILENAME_BUILD_SITE: str = "build_site.log"
LOG_FILENAME_UPLOAD_SITE: str = "upload_site.log"
