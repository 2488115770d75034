"""Exceptions raised by api-blueprint."""


class InvalidInputError(ValueError):
    """The renderer was given no documentation tree to render."""


class DocumentationLoadError(Exception):
    """A serialized documentation tree could not be read or validated."""
