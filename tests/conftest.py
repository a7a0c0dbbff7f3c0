"""Test configuration for errchain."""
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest
from errchain import config, make_path_stripper

TESTS_DIR = Path(__file__).parent


@pytest.fixture(autouse=True)
def restore_config():
    """Restore the process-wide defaults after every test."""
    yield
    config.reset()


@pytest.fixture
def strip_tests_dir():
    """Report captured paths relative to the tests directory."""
    config.configure(strip=make_path_stripper([str(TESTS_DIR)]))
    return TESTS_DIR


@pytest.fixture
def sample_chain():
    """Three-link chain: service <- repository <- database."""
    import errchain

    root = errchain.new("could not connect to database")
    middle = errchain.propagate(root, "could not create repository")
    return errchain.propagate(middle, "could not create service")
