"""buildgate — verify a directory is a build root before build work starts."""

__version__ = "0.3.0"
