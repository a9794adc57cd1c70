from __future__ import annotations

from typing import Dict

import pytest


@pytest.fixture
def project_modules() -> Dict[str, int]:
    """Module roots of a project checked out from two repository locations."""
    return {
        "http://server/repo/trunk/proj": 12,
        "https://server/svn/repo/trunk": 11,
    }
