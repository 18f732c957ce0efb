"""Central application exception hierarchy.

This module defines the base application exception ``AppError`` and the
specialized subclasses used by the build and upload pipelines: invalid
configuration, failing remote data sources, template rendering, filesystem
operations and file transfers. Using one hierarchy keeps error handling in
the command-line layers uniform: every ``AppError`` becomes a logged message
and exit status 1.
"""

from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base exception for all application-level errors.

    Parameters
    ----------
    code : str
        Machine-readable error code (e.g., ``'REMOTE_FETCH_ERROR'``).
    message : str
        Human-readable message describing the error.
    context : Mapping[str, Any] | None, optional
        Optional structured context for logging.
    transient : bool, optional
        Whether the error is temporary and a re-run may succeed.

    Examples
    --------
    >>> e = AppError('CODE', 'message', context={'k': 'v'})
    >>> e.code
    'CODE'
    """

    __slots__ = ("code", "message", "context", "transient")

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})
        self.transient = bool(transient)

    def __str__(self) -> str:
        """Return a compact string representation of the error."""
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
            "is_transient": self.transient,
        }


class ConfigurationError(AppError):
    """Raised for invalid or missing configuration or CLI arguments."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "CONFIGURATION_ERROR", message, context=context, transient=False
        )


class ExternalServiceError(AppError):
    """Raised for failures from an external service."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        transient: bool = True,
        code: str = "EXTERNAL_SERVICE_ERROR",
    ) -> None:
        super().__init__(code, message, context=context, transient=transient)


class RemoteFetchError(ExternalServiceError):
    """Raised when a remote data source reports failure or cannot be read.

    Covers an API envelope with ``success = false`` as well as network and
    response parsing errors. The message is the server-provided one when
    available, otherwise a per-operation default.
    """

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            message, context=context, transient=True, code="REMOTE_FETCH_ERROR"
        )


class TransferError(ExternalServiceError):
    """Raised when uploading a file to the remote host fails."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            message, context=context, transient=True, code="TRANSFER_ERROR"
        )


class RenderError(AppError):
    """Raised when a page template fails to render.

    Attributes
    ----------
    output : str
        Output-relative path of the page that failed.
    """

    def __init__(
        self,
        output: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        merged = {"output": output, **dict(context or {})}
        super().__init__(
            "RENDER_ERROR",
            f"Error rendering {output}: {message}",
            context=merged,
            transient=False,
        )
        self.output = output


class FilesystemError(AppError):
    """Raised when a directory or file operation fails."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "FILESYSTEM_ERROR", message, context=context, transient=False
        )
