class SchedgenError(Exception):
    """Base class for input errors raised by schedgen."""


class PreferenceError(SchedgenError, ValueError):
    """A preference payload names an unknown day, slot or optimization flag."""


class CatalogError(SchedgenError, ValueError):
    """A catalog or professor data file is malformed."""
