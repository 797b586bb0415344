import json
import os
import subprocess

import httpx
import pytest

from prsummary.domain.types import SummarizerConfig
from prsummary.infra.config.env_loader import EnvLoader


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep the developer's own configuration out of the tests"""
    for key in list(os.environ):
        if key.startswith('PRSUMMARY_') or key == 'ANTHROPIC_API_KEY':
            monkeypatch.delenv(key)
    EnvLoader.reset()
    yield
    EnvLoader.reset()


@pytest.fixture
def config():
    return SummarizerConfig(api_key='test-key')


class FakeApi:
    """Routes httpx requests by path and records them"""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def on(self, path, response):
        self.routes[path] = response
        return self

    def handler(self, request):
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={'error': 'no route'})
        if callable(route):
            return route(request)
        return route

    @property
    def transport(self):
        return httpx.MockTransport(self.handler)

    def calls(self, path):
        return [r for r in self.requests if r.url.path == path]

    def body(self, path, index=0):
        return json.loads(self.calls(path)[index].content)


@pytest.fixture
def fake_api():
    return FakeApi()


class FakeGit:
    """Stands in for subprocess.run, answering git commands from a table"""

    def __init__(self, outputs, failing=()):
        self.outputs = outputs
        self.failing = set(failing)
        self.calls = []

    def __call__(self, command, **kwargs):
        self.calls.append(list(command))
        key = ' '.join(command[1:])
        if key in self.failing:
            if kwargs.get('check'):
                raise subprocess.CalledProcessError(128, command, output='', stderr='fatal: bad revision')
            return subprocess.CompletedProcess(command, 128, stdout='', stderr='fatal: bad revision')
        return subprocess.CompletedProcess(command, 0, stdout=self.outputs.get(key, ''), stderr='')


@pytest.fixture
def fake_git(monkeypatch):
    def install(outputs, failing=()):
        fake = FakeGit(outputs, failing)
        monkeypatch.setattr(subprocess, 'run', fake)
        return fake
    return install
