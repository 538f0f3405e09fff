"""
Pytest configuration to ensure paths and environment are set up for tests.

`src/` is added to sys.path so imports like `from core.domain.models import Ticket`
work without installing the package, and the per-user config directory is
redirected to a throwaway folder so a developer's real `.env` never leaks in.
"""

import os
import sys
import tempfile
from pathlib import Path


def _ensure_src_on_sys_path() -> None:
    src_root = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_src_on_sys_path()

# Must run before `core.config` is imported: the user .env path is resolved at class creation.
os.environ["XDG_CONFIG_HOME"] = tempfile.mkdtemp(prefix="zendesk-tickets-tests-")

for _key in list(os.environ):
    if _key.startswith("ZENDESK_"):
        del os.environ[_key]

os.environ.setdefault("ZENDESK_BASE_URL", "https://acme.zendesk.com/api/v2")
os.environ.setdefault("ZENDESK_LOG_LEVEL", "WARNING")
