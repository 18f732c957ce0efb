"""TherapyTips static-site generator package.

This package turns content from the TherapyTips backend API, YouTube and the
site analytics into a static HTML website and ships the result to the web
host over FTP.

Package Structure
-----------------
- `pipeline/content_api/`:
    Typed client for the backend REST API and its response envelope.
- `pipeline/external_data/`:
    YouTube metadata and trending-pages fetchers.
- `pipeline/site_builder/`:
    Build configuration, data aggregation, page rendering and the build CLI.
- `pipeline/deploy/`:
    Build-directory scanning, FTP transfer and the upload CLI.
- `config.py`: Project-wide constants (paths, endpoints, fixed content lists).
- `exceptions.py`: Application exception hierarchy.

Entry points are `program1_build_site` and `program2_upload_site`.
"""

__version__ = "1.0.0"
