import subprocess
import sys

import pytest


@pytest.mark.parametrize(
    "module",
    [
        "boosterforge",
        "boosterforge.catalog.http",
        "boosterforge.catalog.base",
        "boosterforge.domain",
        "boosterforge.domain.generator",
        "boosterforge.config",
        "boosterforge.telegram",
        "boosterforge.cli",
    ],
)
def test_module_imports_in_fresh_interpreter(module):
    result = subprocess.run(
        [sys.executable, "-c", f"import {module}"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
