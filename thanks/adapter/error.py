"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class DirectoryError(AdapterError):
    """The people directory could not be reached or gave a bad answer."""

    pass
