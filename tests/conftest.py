import os
import sys

import pytest

# Ensure repo root on sys.path for imports like `assessment...`
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

os.environ.setdefault("SUPABASE_URL", "https://example.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "dummy-key")
# TestClient talks plain http; secure cookies would never be sent back.
os.environ["COOKIE_SECURE"] = "false"

from assessment.db import supabase as supabase_module  # noqa: E402

from tests.fakesupabase import FakeSupabase, sample_challenges  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fake_supabase(monkeypatch):
    fake = FakeSupabase({"challenges": sample_challenges()})
    monkeypatch.setattr(supabase_module, "_client", fake)
    return fake
