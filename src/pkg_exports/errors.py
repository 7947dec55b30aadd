"""Exception hierarchy for the configuration and I/O layers.

The inference core is total and never raises; these errors surface only
where user input (options, manifests, entry lists) is read or validated.
"""

from __future__ import annotations


class ExportsError(Exception):
    """Base error for exports generation failures."""

    exit_code = 1


class ConfigError(ExportsError):
    """Invalid generation options."""

    exit_code = 2


class ManifestError(ExportsError):
    """Package manifest could not be read, parsed or written."""

    exit_code = 3


class EntrySourceError(ExportsError):
    """Build entries could not be collected."""

    exit_code = 4
