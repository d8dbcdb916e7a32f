"""Keyboard input through ``nircmd sendkey``."""

from typing import Optional, Union

from nirpilot.adapters.nircmd import run_nircmd
from nirpilot.domain.errors import ValidationError
from nirpilot.domain.keys import Key, KeyAction, key_token
from nirpilot.ports.outbound import CommandRunner


def _key_code(key: Union[Key, int, str]) -> int:
    if isinstance(key, str):
        try:
            return Key.lookup(key)
        except ValueError as exc:
            raise ValidationError(str(exc)) from None
    code = int(key)
    if not 0 < code < 0x100:
        raise ValidationError(f"Virtual key code out of range: {code}")
    return code


def _key_action(action: Union[KeyAction, str]) -> KeyAction:
    try:
        return KeyAction(action)
    except ValueError:
        raise ValidationError(f"Unknown key action: {action!r}") from None


async def send_key(
    key: Union[Key, int, str],
    action: Union[KeyAction, str] = KeyAction.PRESS,
    runner: Optional[CommandRunner] = None,
) -> int:
    """Press, hold down or release one key.

    ``key`` is a ``Key``, a raw virtual-key code or a key name such as
    ``"ctrl"``. Returns the nircmd exit code.
    """
    args = ["sendkey", key_token(_key_code(key)), _key_action(action).value]
    return await run_nircmd(args, runner)


async def _ctrl_chord(key: Key, runner: Optional[CommandRunner]) -> int:
    """Ctrl down, key press, Ctrl up; returns the first non-zero exit code."""
    codes = [await send_key(Key.CTRL, KeyAction.DOWN, runner)]
    try:
        codes.append(await send_key(key, KeyAction.PRESS, runner))
    finally:
        codes.append(await send_key(Key.CTRL, KeyAction.UP, runner))
    return next((code for code in codes if code != 0), 0)


async def cut(runner: Optional[CommandRunner] = None) -> int:
    """Ctrl+X"""
    return await _ctrl_chord(Key.X, runner)


async def copy(runner: Optional[CommandRunner] = None) -> int:
    """Ctrl+C"""
    return await _ctrl_chord(Key.C, runner)


async def paste(runner: Optional[CommandRunner] = None) -> int:
    """Ctrl+V"""
    return await _ctrl_chord(Key.V, runner)


async def select_all(runner: Optional[CommandRunner] = None) -> int:
    """Ctrl+A"""
    return await _ctrl_chord(Key.A, runner)


SHORTCUTS = {
    "cut": cut,
    "copy": copy,
    "paste": paste,
    "select_all": select_all,
}
