class GedcomError(Exception):
    """Base exception for gedcom_records failures."""


class FatalInputError(GedcomError):
    """
    Raised when the input cannot yield a record graph at all
    (empty input, undecodable bytes, no GEDCOM lines).

    Per-line problems never raise; they are reported as diagnostics.
    """


class ConfigError(GedcomError):
    """Raised when the YAML configuration file is unreadable or malformed."""
