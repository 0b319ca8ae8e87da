"""Unified error handling for the KNoT Cloud SDK.

Every failure surfaced by the client derives from :class:`KnotCloudError`,
which keeps the original exception (if any) as ``cause`` so callers can
inspect what the transport actually reported.
"""

from typing import Any, Optional


class KnotCloudError(Exception):
    """Base exception for all KNoT Cloud SDK errors.

    This is the unified error type that encompasses all possible error cases
    in the SDK, providing meaningful error messages and proper error chaining.
    """

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __repr__(self) -> str:
        if self.cause:
            return f"{self.__class__.__name__}('{self.message}', cause={self.cause!r})"
        return f"{self.__class__.__name__}('{self.message}')"


class AuthorizationError(KnotCloudError):
    """Error raised when the cloud rejects the handshake.

    The transport signals this by emitting ``notReady`` instead of ``ready``
    after the credentials were presented.

    Examples:
        ```python
        try:
            await client.connect()
        except AuthorizationError:
            logger.error("check KNOT_CLOUD_UUID / KNOT_CLOUD_TOKEN")
        ```
    """

    def __init__(self, message: str = "Connection not authorized", cause: Optional[Exception] = None) -> None:
        super().__init__(message, cause)


class NotConnectedError(KnotCloudError):
    """Error raised when an operation needs a live session and there is none."""

    def __init__(self, message: str = "Not connected", cause: Optional[Exception] = None) -> None:
        super().__init__(message, cause)


class NotFoundError(KnotCloudError):
    """Error raised when a device id is absent from the directory snapshot.

    Examples:
        ```python
        try:
            device = await client.get_device("3a9c1f0e27b4d855")
        except NotFoundError as e:
            print(f"unknown device {e.device_id}")
        ```
    """

    def __init__(self, device_id: str, cause: Optional[Exception] = None) -> None:
        self.device_id = device_id
        super().__init__(f"Not found: {device_id}", cause)


class UnsupportedValueTypeError(KnotCloudError):
    """Error raised when a raw value is not a number, a boolean or base64."""

    def __init__(self, value: Any, cause: Optional[Exception] = None) -> None:
        self.value = value
        super().__init__(
            f"Supported types are boolean, number or Base64 strings (got {value!r})",
            cause,
        )


class TransportError(KnotCloudError):
    """Error reported by the underlying connection on an acknowledgment.

    The raw error object is kept untouched in ``detail``; the SDK never
    interprets it.

    Examples:
        ```python
        try:
            await client.subscribe("3a9c1f0e27b4d855", "data")
        except TransportError as e:
            logger.warning("subscribe rejected: %r", e.detail)
        ```
    """

    def __init__(self, detail: Any, cause: Optional[Exception] = None) -> None:
        self.detail = detail
        if cause is None and isinstance(detail, Exception):
            cause = detail
            message = "transport error"
        else:
            message = f"transport error: {detail}"
        super().__init__(message, cause)


class ConfigError(KnotCloudError):
    """Error that occurs due to configuration issues.

    This error is raised when configuration validation fails, a required
    configuration value is missing, or configuration loading fails.

    Examples:
        ```python
        try:
            config = ClientConfig.from_env()
        except ConfigError as e:
            sys.exit(str(e))
        ```
    """

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"configuration error: {message}", cause)

    @classmethod
    def missing_env_var(cls, var_name: str) -> "ConfigError":
        """Create a ConfigError for a missing environment variable."""
        return cls(f"missing environment variable: {var_name}")

    @classmethod
    def invalid_config(cls, message: str, cause: Optional[Exception] = None) -> "ConfigError":
        """Create a ConfigError for invalid configuration."""
        return cls(f"invalid configuration: {message}", cause)
