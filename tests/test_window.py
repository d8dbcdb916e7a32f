"""Tests for window call sites: a recording runner stands in for nircmd."""

import pytest

from nirpilot import window
from nirpilot.domain.errors import BlankValueError, SizeRequiredError
from nirpilot.domain.models import ActiveWindow, ByProcess


class TestWindowAction:
    @pytest.mark.asyncio
    async def test_prefixes_win(self, runner):
        code = await window.window_action("myfile.txt - Notepad", "activate", runner=runner)
        assert code == 0
        assert runner.last == ["win", "activate", "title", "myfile.txt - Notepad"]

    @pytest.mark.asyncio
    async def test_process_id(self, runner):
        await window.window_action({"process": 1234}, "close", runner=runner)
        assert runner.last == ["win", "close", "process", "/1234"]

    @pytest.mark.asyncio
    async def test_returns_runner_exit_code(self, make_runner):
        runner = make_runner(exit_code=3)
        assert await window.window_action(ActiveWindow(), "flash", runner=runner) == 3

    @pytest.mark.asyncio
    async def test_invalid_request_never_reaches_runner(self, runner):
        with pytest.raises(BlankValueError):
            await window.window_action({"className": " "}, "min", runner=runner)
        with pytest.raises(SizeRequiredError):
            await window.window_action("notepad", "move", runner=runner)
        assert runner.calls == []


class TestWindowFinder:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, verb",
        [
            ("flash", "flash"),
            ("min", "min"),
            ("max", "max"),
            ("activate", "activate"),
            ("center", "center"),
            ("close", "close"),
            ("focus", "focus"),
            ("normal", "normal"),
            ("toggle_max", "togglemax"),
            ("toggle_min", "togglemin"),
        ],
    )
    async def test_simple_methods(self, runner, method, verb):
        finder = window.active_window(runner)
        await getattr(finder, method)()
        assert runner.last == ["win", verb, "active"]

    @pytest.mark.asyncio
    async def test_set_size(self, runner):
        await window.by_title_exact("myfile.txt", runner).set_size(1, 1, 100, 100)
        assert runner.last == ["win", "setsize", "title", "myfile.txt", "1", "1", "100", "100"]

    @pytest.mark.asyncio
    async def test_move_by(self, runner):
        await window.by_process_name("notepad.exe", runner).move_by(-5, 0, 10, 20)
        assert runner.last == ["win", "move", "process", "notepad.exe", "-5", "0", "10", "20"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "factory, token",
        [
            (window.by_title_exact, "title"),
            (window.by_title_contains, "ititle"),
            (window.by_title_starts_with, "stitle"),
            (window.by_title_ends_with, "etitle"),
        ],
    )
    async def test_title_factories(self, runner, factory, token):
        await factory("myfile.txt", runner).max()
        assert runner.last == ["win", "max", token, "myfile.txt"]

    @pytest.mark.asyncio
    async def test_class_name_factory(self, runner):
        await window.by_class_name("Notepad", runner).min()
        assert runner.last == ["win", "min", "class", "Notepad"]

    @pytest.mark.asyncio
    async def test_process_id_factory(self, runner):
        finder = window.by_process_id(42, runner)
        assert finder.locator == ByProcess(42)
        await finder.close()
        assert runner.last == ["win", "close", "process", "/42"]

    @pytest.mark.asyncio
    async def test_blank_title_raises_on_action(self, runner):
        finder = window.by_title_contains("  ", runner)
        with pytest.raises(BlankValueError):
            await finder.flash()
        assert runner.calls == []
