"""Shared fixtures."""

import pytest


class RecordingRunner:
    """CommandRunner stand-in that records every argument vector."""

    def __init__(self, exit_code=0):
        self.exit_code = exit_code
        self.calls = []

    async def run(self, args):
        self.calls.append(list(args))
        return self.exit_code

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def runner():
    return RecordingRunner()


@pytest.fixture
def make_runner():
    return RecordingRunner
