"""Contains configurations for the test run."""

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def resources_folder() -> Path:
    """Returns the path to the test resources folder."""
    return Path(__file__).parents[1] / "resources"


@pytest.fixture(scope="session")
def sample_run_path(resources_folder: Path) -> Path:
    """Returns the path to the sample soul-link run file."""
    return resources_folder / "sample_run.yml"
