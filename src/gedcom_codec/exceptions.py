class GedcomCodecError(Exception):
    """Base exception for codec failures."""


class GedcomSyntaxError(GedcomCodecError, ValueError):
    """Raised when a GEDCOM line cannot be parsed according to basic syntax."""


class GedcomDecodeError(GedcomCodecError):
    """Raised when raw file bytes cannot be decoded as text."""


class RelationshipCycleError(GedcomCodecError):
    """Raised when a parent-child edge would make someone their own ancestor."""


class ConfigError(GedcomCodecError):
    """Raised when the configuration file is missing or malformed."""


class ModelError(GedcomCodecError, ValueError):
    """Raised when app-state JSON cannot be mapped onto the domain model."""
