"""Error taxonomy shared by providers, controllers and the dispatcher."""


class VoyagerError(Exception):
    """Base class for failures that are shown on the status line."""


class TransientProviderError(VoyagerError):
    """Network, auth or throttling failure reported by the data layer."""


class ResourceNotFound(VoyagerError):
    """The entity disappeared between listing and describing it."""


class ValidationError(VoyagerError):
    """Malformed user input, e.g. a non-numeric count field."""


__all__ = [
    "ResourceNotFound",
    "TransientProviderError",
    "ValidationError",
    "VoyagerError",
]
