"""Publish pending drafts as a single commit."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..drafts import DraftManager
from ..git import GitProvider
from ..hooks import PUBLISH_COMPLETED, Hooks
from ..models import CommitResult, RawFile

logger = logging.getLogger(__name__)


class Publisher:
    """Collect drafts of every content kind and commit them to the provider."""

    def __init__(self, provider: GitProvider | None, engines: Sequence[DraftManager], hooks: Hooks):
        self.provider = provider
        self.engines = list(engines)
        self.hooks = hooks

    def pending_files(self) -> list[RawFile]:
        """Commit payload of every pending change, across content kinds."""
        files: list[RawFile] = []
        for engine in self.engines:
            files.extend(engine.list_as_raw_files())
        return files

    def has_changes(self) -> bool:
        return bool(self.pending_files())

    async def publish(self, message: str) -> CommitResult | None:
        """Commit every pending change, then discard the drafts.

        Drafts are only discarded once the commit succeeded; commit errors
        propagate to the caller.

        Args:
            message: Commit message.

        Returns:
            CommitResult, or None when nothing is pending or nothing was
            committed.
        """
        if self.provider is None:
            logger.warning("No git provider configured, nothing published")
            return None

        files = self.pending_files()
        if not files:
            logger.info("No pending changes to publish")
            return None

        result = await self.provider.commit_files(files, message)
        if result is None:
            return None

        for engine in self.engines:
            await engine.revert_all()

        logger.info(f"Published {len(files)} files: {result.commit_sha}")
        await self.hooks.call_hook(PUBLISH_COMPLETED, commit=result)
        return result
