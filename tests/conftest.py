"""Pytest configuration.

Tests import from the `src.*` namespace. Put the repository root on `sys.path` so `pytest` works
from a plain checkout without `pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))
