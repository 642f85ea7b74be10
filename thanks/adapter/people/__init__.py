"""People directory adapter."""

from .client import MockDirectory, PeopleApiDirectory

__all__ = ["MockDirectory", "PeopleApiDirectory"]
