"""FTP connection settings of the upload tool."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from therapytips_ssg.config import DEFAULT_FTP_PORT, DEFAULT_FTP_REMOTE_PATH
from therapytips_ssg.env_loader import env_flag
from therapytips_ssg.exceptions import ConfigurationError

REQUIRED_SETTINGS: tuple[str, ...] = ("FTP_HOST", "FTP_USER", "FTP_PASSWORD")


@dataclass(frozen=True)
class FtpConfig:
    """Immutable FTP settings.

    Examples
    --------
    >>> cfg = FtpConfig.from_env({"FTP_HOST": "h", "FTP_USER": "u", "FTP_PASSWORD": "p"})
    >>> cfg.port, cfg.remote_path, cfg.secure
    (21, '/', False)
    """

    host: str
    user: str
    password: str = ""
    port: int = DEFAULT_FTP_PORT
    remote_path: str = DEFAULT_FTP_REMOTE_PATH
    secure: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str], source: str = "environment") -> FtpConfig:
        """Read and validate the ``FTP_*`` settings.

        Raises
        ------
        ConfigurationError
            If ``FTP_HOST``, ``FTP_USER`` or ``FTP_PASSWORD`` is missing, or
            ``FTP_PORT`` is not an integer. The message lists every missing
            setting and ``source`` (the dotenv file they were expected in).
        """
        missing = [name for name in REQUIRED_SETTINGS if not environ.get(name)]
        if missing:
            raise ConfigurationError(
                f"Missing required FTP configuration in {source}: " + ", ".join(missing),
                context={"missing": missing, "source": source},
            )
        raw_port = environ.get("FTP_PORT") or str(DEFAULT_FTP_PORT)
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigurationError(
                f"Invalid FTP_PORT: {raw_port}", context={"FTP_PORT": raw_port}
            ) from None
        return cls(
            host=environ["FTP_HOST"],
            user=environ["FTP_USER"],
            password=environ["FTP_PASSWORD"],
            port=port,
            remote_path=environ.get("FTP_REMOTE_PATH") or DEFAULT_FTP_REMOTE_PATH,
            secure=env_flag(environ, "FTP_SECURE"),
        )

    def describe(self) -> str:
        """One-line summary with the password masked."""
        return (
            f"host={self.host} port={self.port} user={self.user} "
            f"password={'*' * len(self.password)} remote_path={self.remote_path} "
            f"secure={self.secure}"
        )
