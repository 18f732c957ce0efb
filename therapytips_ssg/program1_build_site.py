"""Program 1: Static site build.

Fetches content from the TherapyTips API, YouTube and the trending source and
renders the static site into ``builds/{env}``. See
``therapytips_ssg.pipeline.site_builder.cli`` for the options.
"""

from therapytips_ssg.pipeline.site_builder.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
