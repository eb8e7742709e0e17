"""
Utilbelt error kinds.

All of them subclass TypeError: they report an argument of the wrong shape, so code that
already catches TypeError around utilbelt calls keeps working.
"""


# Classes --------------------------------------------------------------------------------------------------------------

class InvalidSelectorError(TypeError):
    """A selector argument is neither a field name nor a callable."""


class MissingSelectorError(TypeError):
    """No selector was given and the operation has no default extractor."""


class InvalidMergeSourceError(TypeError):
    """The source of a deep merge is None or not a mapping."""
