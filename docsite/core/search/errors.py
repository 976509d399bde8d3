class SearchError(Exception):
    """Base class for failures raised by search backends."""


class ConfigurationError(SearchError):
    """Backend cannot be built from the current search configuration."""


class BackendUnavailable(SearchError):
    """Remote index could not be reached or returned an unusable answer."""
