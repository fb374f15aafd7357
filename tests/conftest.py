import pytest

class FakeResponse:
    def __init__(self, count=None, error=None):
        self.data = []
        self.count = count
        self.error = error

class FakeQuery:
    def __init__(self, client, table_name):
        self.client = client
        self.table_name = table_name

    def select(self, *columns, count=None, head=False):
        self.client.calls.append(
            {"table": self.table_name, "columns": columns, "count": count, "head": head}
        )
        return self

    def execute(self):
        if self.client.raises is not None:
            raise self.client.raises
        return self.client.response

class FakeClient:
    """Stands in for supabase.Client; records every query it receives."""
    def __init__(self, response=None, raises=None):
        self.response = response if response is not None else FakeResponse(count=0)
        self.raises = raises
        self.calls = []

    def table(self, name):
        return FakeQuery(self, name)

class SpyFactory:
    """Replacement for supabase.create_client."""
    def __init__(self, client=None, raises=None):
        self.client = client or FakeClient()
        self.raises = raises
        self.created = []

    def __call__(self, url, key):
        self.created.append((url, key))
        if self.raises is not None:
            raise self.raises
        return self.client

@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # the default .env is resolved from the working directory
    workdir = tmp_path / "workdir"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    # setenv first so values loaded from .env files get undone after each test
    for name in ("SUPABASE_URL", "SUPABASE_SERVICE_KEY"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

@pytest.fixture
def env_file(tmp_path):
    def _write(**values):
        path = tmp_path / ".env"
        path.write_text("".join(f"{k}={v}\n" for k, v in values.items()))
        return path
    return _write
