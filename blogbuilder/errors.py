from __future__ import annotations


class BuildError(Exception):
    """Base class for all errors raised while building a project."""


class ConfigError(BuildError):
    pass


class ScanError(BuildError):
    pass


class RenderError(BuildError):
    pass


class CopyError(BuildError):
    pass


class ShortenerError(BuildError):
    """Raised when the URL shortener script cannot be created.

    Unlike the other build errors this one does not abort a build.
    """


class InitError(BuildError):
    pass
