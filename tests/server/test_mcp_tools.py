"""Tests for the MCP tool functions, called directly with a recording runner."""

import pytest

from nirpilot.adapters.nircmd import NirCmdNotFoundError
from nirpilot.config import NirPilotConfig
from nirpilot.server import mcp_server  # noqa: F401  (registers the tools)
from nirpilot.server.state import AppState, exit_result, run_tool, set_state
from nirpilot.server.tools import input_tools, system_tools, window_tools


@pytest.fixture
def state(runner):
    s = AppState(config=NirPilotConfig(), runner=runner)
    set_state(s)
    yield s
    set_state(None)


class TestRunTool:
    def test_exit_result(self):
        assert exit_result(0) == {"success": True, "exit_code": 0}
        assert exit_result(-1) == {"success": False, "exit_code": -1}

    @pytest.mark.asyncio
    async def test_runner_errors_become_results(self):
        async def boom():
            raise NirCmdNotFoundError("nircmd not found")

        result = await run_tool(boom)
        assert result == {"success": False, "error": "nircmd not found"}


class TestWindowTool:
    @pytest.mark.asyncio
    async def test_title_contains(self, state, runner):
        result = await window_tools.nirpilot_window_action(
            action="max", title="notepad", match="contains"
        )
        assert result == {"success": True, "exit_code": 0}
        assert runner.last == ["win", "max", "ititle", "notepad"]

    @pytest.mark.asyncio
    async def test_active_wins_over_title(self, state, runner):
        await window_tools.nirpilot_window_action(action="flash", title="x", active=True)
        assert runner.last == ["win", "flash", "active"]

    @pytest.mark.asyncio
    async def test_setsize(self, state, runner):
        await window_tools.nirpilot_window_action(
            action="setsize", process=42, x=0, y=0, width=800, height=600
        )
        assert runner.last == ["win", "setsize", "process", "/42", "0", "0", "800", "600"]

    @pytest.mark.asyncio
    async def test_setsize_incomplete(self, state, runner):
        result = await window_tools.nirpilot_window_action(
            action="setsize", title="notepad", x=0, y=0
        )
        assert result["success"] is False
        assert "action.size" in result["error"]
        assert runner.calls == []

    @pytest.mark.asyncio
    async def test_no_locator(self, state, runner):
        result = await window_tools.nirpilot_window_action(action="min")
        assert result["success"] is False
        assert runner.calls == []


class TestInputTools:
    @pytest.mark.asyncio
    async def test_send_key(self, state, runner):
        result = await input_tools.nirpilot_send_key(key="f5")
        assert result["success"] is True
        assert runner.last == ["sendkey", "0x74", "press"]

    @pytest.mark.asyncio
    async def test_unknown_key(self, state, runner):
        result = await input_tools.nirpilot_send_key(key="hyper")
        assert result["success"] is False

    @pytest.mark.asyncio
    async def test_shortcut(self, state, runner):
        result = await input_tools.nirpilot_key_shortcut(shortcut="paste")
        assert result == {"success": True, "exit_code": 0}
        assert len(runner.calls) == 3

    @pytest.mark.asyncio
    async def test_mouse(self, state, runner):
        await input_tools.nirpilot_set_cursor(x=5, y=6)
        await input_tools.nirpilot_mouse_button(button="left", action="dblclick")
        assert runner.calls == [["setcursor", "5", "6"], ["sendmouse", "left", "dblclick"]]


class TestSystemTools:
    @pytest.mark.asyncio
    async def test_screenshot_region(self, state, runner):
        await system_tools.nirpilot_screenshot(
            image_path="a.png", mode="Region", x=1, y=2, width=3, height=4
        )
        assert runner.last == ["savescreenshot", "a.png", "1", "2", "3", "4"]

    @pytest.mark.asyncio
    async def test_beep_defaults_to_winbeep(self, state, runner):
        await system_tools.nirpilot_beep()
        assert runner.last == ["stdbeep"]

    @pytest.mark.asyncio
    async def test_volume(self, state, runner):
        await system_tools.nirpilot_volume(action="mute")
        await system_tools.nirpilot_volume(action="set", percent=100)
        assert runner.calls == [["mutesysvolume", "1"], ["setsysvolume", "65535"]]

    @pytest.mark.asyncio
    async def test_clipboard(self, state, runner):
        await system_tools.nirpilot_clipboard(action="set", text="hi")
        assert runner.last == ["clipboard", "set", "hi"]

    @pytest.mark.asyncio
    async def test_question(self, make_runner):
        runner = make_runner(exit_code=48)
        set_state(AppState(config=NirPilotConfig(), runner=runner))
        try:
            result = await system_tools.nirpilot_message(kind="question", title="Q", text="Sure?")
        finally:
            set_state(None)
        assert result["success"] is True
        assert result["answer"] is True
