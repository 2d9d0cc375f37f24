"""Domain-specific errors for sonosctl."""


class SonosctlError(Exception):
    """Base error for sonosctl."""


class ConfigError(SonosctlError):
    """Raised when the user config file cannot be parsed or validated."""


class CacheError(SonosctlError):
    """Base error for the speaker address cache."""


class CacheReadError(CacheError):
    """Raised when the cache file exists but its content is malformed."""


class CacheWriteError(CacheError):
    """Raised when the cache file cannot be written."""


class NetworkDiscoveryError(SonosctlError):
    """Raised when the network scan for speakers fails."""


class AddressConnectError(SonosctlError):
    """Raised when a speaker at a given address cannot be reached."""


class SpeakerSelectionError(SonosctlError):
    """Raised when a speaker name cannot be resolved to a single target."""


class NoMatchError(SpeakerSelectionError):
    """Raised when no speaker name is close enough to the query."""


class NotConfirmedError(SpeakerSelectionError):
    """Raised when the user declines the suggested speaker."""


class SpeakerCommandError(SonosctlError):
    """Raised when a control command cannot be run on a speaker."""
