import os

import pytest

from hostfetch.modules.base import CommandResult


class FakeRunner:
    """Command runner that answers from a table instead of spawning processes."""

    def __init__(self, responses=None):
        self.responses = {}
        self.calls = []
        for command, response in (responses or {}).items():
            self.add(command, response)

    def add(self, command, response):
        if isinstance(response, str):
            response = CommandResult(True, response)
        self.responses[tuple(command)] = response

    def run(self, command):
        self.calls.append(list(command))
        return self.responses.get(tuple(command), CommandResult(False, ""))

    def called(self, command):
        return list(command) in self.calls


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def fake_root(tmp_path):
    """An empty directory standing in for /, with helpers to populate it."""

    class FakeRoot:
        path = str(tmp_path)

        def write(self, system_path, content=""):
            target = tmp_path / system_path.lstrip("/")
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
            return target

        def mkdir(self, system_path):
            target = tmp_path / system_path.lstrip("/")
            target.mkdir(parents=True, exist_ok=True)
            return target

        def exists(self, system_path):
            return os.path.exists(tmp_path / system_path.lstrip("/"))

    return FakeRoot()
