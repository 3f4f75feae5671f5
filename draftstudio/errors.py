"""Exceptions raised by the studio core."""


class StudioError(Exception):
    """Base class for studio errors."""

    pass


class InconsistentDraftError(StudioError):
    """A draft has neither a modified nor an original item."""

    pass


class DraftExistsError(StudioError):
    """A draft (or live item) already exists at the requested path."""

    pass


class DraftNotFoundError(StudioError):
    """No draft exists at the requested path."""

    pass


class ItemNotFoundError(StudioError):
    """No live database entry exists at the requested path."""

    pass


class RefConflictError(StudioError):
    """The remote branch moved while a commit was being prepared."""

    pass
