# File: tests/conftest.py

import pytest
import os
import sys
import logging

# 1. Add project root to path
sys.path.append(os.getcwd())

# 2. Import Settings
from dircontainer.core.config.settings import settings


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Makes package debug logs visible to caplog.
    """
    logging.getLogger(settings.PLUGIN_ID).setLevel(logging.DEBUG)
    yield


@pytest.fixture
def project_root(tmp_path):
    """
    A project folder with a lib/ directory of archives:
    - a.jar with -src and -javadoc companions
    - b.zip (plain, different extension)
    - notes.txt (unrelated)
    """
    root = tmp_path / "project"
    lib = root / "lib"
    lib.mkdir(parents=True)

    (lib / "a.jar").write_bytes(b"PK")
    (lib / "a-src.jar").write_bytes(b"PK")
    (lib / "a-javadoc.jar").write_bytes(b"PK")
    (lib / "b.zip").write_bytes(b"PK")
    (lib / "notes.txt").write_text("not an archive")

    return root
