"""Program 2: Upload a finished build over FTP/FTPS.

See ``therapytips_ssg.pipeline.deploy.cli`` for the options.
"""

from therapytips_ssg.pipeline.deploy.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
