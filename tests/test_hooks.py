"""Tests for the hook registry."""

import pytest

from draftstudio.hooks import DOCUMENT_UPDATED, PREVIEW_RERENDER, Hooks


class TestHooks:
    @pytest.mark.asyncio
    async def test_handlers_run_in_order(self):
        hooks = Hooks()
        calls = []

        async def first(**meta):
            calls.append(("first", meta))

        def second(**meta):
            calls.append(("second", meta))

        hooks.hook(DOCUMENT_UPDATED, first)
        hooks.hook(DOCUMENT_UPDATED, second)
        await hooks.call_hook(DOCUMENT_UPDATED, caller="DocumentDrafts.create")

        assert calls == [
            ("first", {"caller": "DocumentDrafts.create"}),
            ("second", {"caller": "DocumentDrafts.create"}),
        ]

    @pytest.mark.asyncio
    async def test_unregister(self):
        hooks = Hooks()
        calls = []

        unregister = hooks.hook(PREVIEW_RERENDER, lambda **meta: calls.append(meta))
        assert hooks.handler_count(PREVIEW_RERENDER) == 1

        unregister()
        unregister()
        await hooks.call_hook(PREVIEW_RERENDER, fs_path="index.md")

        assert calls == []
        assert hooks.handler_count(PREVIEW_RERENDER) == 0

    @pytest.mark.asyncio
    async def test_unknown_hook_is_noop(self):
        await Hooks().call_hook("studio:unknown")

    @pytest.mark.asyncio
    async def test_handler_errors_propagate(self):
        hooks = Hooks()

        def failing(**meta):
            raise ValueError("broken handler")

        hooks.hook(DOCUMENT_UPDATED, failing)

        with pytest.raises(ValueError):
            await hooks.call_hook(DOCUMENT_UPDATED)
