"""Lifecycle statuses of drafts and tree items."""

from enum import Enum


class DraftStatus(str, Enum):
    """Lifecycle status of a pending change."""

    DELETED = "deleted"
    CREATED = "created"
    UPDATED = "updated"
    PRISTINE = "pristine"


class TreeStatus(str, Enum):
    """Status displayed on a tree item."""

    DELETED = "deleted"
    CREATED = "created"
    UPDATED = "updated"
    RENAMED = "renamed"
    OPENED = "opened"
