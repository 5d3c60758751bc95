"""
Exception hierarchy for the Arista exporter.

Client errors map to HTTP 400 and carry a message safe to return to the
caller. Device errors map to HTTP 500; the scrape is aborted and no metrics
are rendered.
"""


class ExporterError(Exception):
    """Base class for all exporter errors."""
    status_code = 500


class ClientError(ExporterError):
    """The request itself is invalid, no scrape is attempted."""
    status_code = 400


class MissingTargetError(ClientError):
    """No target parameter given."""

    def __init__(self):
        super().__init__("Target parameter is missing")


class UnknownModuleError(ClientError):
    """A requested module name is not one of the known probers."""

    def __init__(self, module):
        self.module = module
        super().__init__(f'Unknown module "{module}"')


class DuplicateModuleError(ClientError):
    """The same module was requested more than once."""

    def __init__(self, module):
        self.module = module
        super().__init__(f'Module "{module}" requested more than once')


class DeviceError(ExporterError):
    """Talking to the device failed."""
    status_code = 500


class DeviceConnectionError(DeviceError):
    """The target could not be reached or has no connection profile."""

    def __init__(self, target, reason=""):
        self.target = target
        self.reason = reason
        message = f'Failed to connect to "{target}"'
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CommandError(DeviceError):
    """The device rejected the commands or returned a malformed response."""


class DecodeError(CommandError):
    """A command result does not match the prober's schema."""


class ProberStateError(ExporterError):
    """A prober was used out of order (emit before register or decode)."""
