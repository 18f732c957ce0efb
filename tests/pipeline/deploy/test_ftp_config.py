import pytest

from therapytips_ssg.exceptions import ConfigurationError
from therapytips_ssg.pipeline.deploy.config import FtpConfig

BASE = {"FTP_HOST": "ftp.example.org", "FTP_USER": "deploy", "FTP_PASSWORD": "s3cret"}


def test_defaults_apply():
    cfg = FtpConfig.from_env(BASE)
    assert (cfg.host, cfg.user, cfg.port, cfg.remote_path, cfg.secure) == (
        "ftp.example.org",
        "deploy",
        21,
        "/",
        False,
    )


def test_optional_settings_are_read():
    cfg = FtpConfig.from_env(
        {**BASE, "FTP_PORT": "2121", "FTP_REMOTE_PATH": "/public_html", "FTP_SECURE": "TRUE"}
    )
    assert cfg.port == 2121
    assert cfg.remote_path == "/public_html"
    assert cfg.secure is True


def test_missing_settings_are_all_listed():
    with pytest.raises(ConfigurationError) as excinfo:
        FtpConfig.from_env({"FTP_HOST": "h"}, source=".env.staging")
    message = excinfo.value.message
    assert "FTP_USER" in message and "FTP_PASSWORD" in message
    assert ".env.staging" in message


def test_invalid_port():
    with pytest.raises(ConfigurationError, match="Invalid FTP_PORT"):
        FtpConfig.from_env({**BASE, "FTP_PORT": "twenty-one"})


def test_describe_masks_password():
    text = FtpConfig.from_env(BASE).describe()
    assert "s3cret" not in text
    assert "password=******" in text
