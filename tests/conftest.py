"""Root test configuration: isolate the shared result cache, logging and working directory"""

import logging

import pytest

from mdmatter.matter import clear_cache


@pytest.fixture(autouse=True)
def fresh_cache():
    """Clear the default client's cache around every test."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo root logger changes made by the CLI's configure_logging."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield
    root.setLevel(level)
    for handler in root.handlers[:]:
        if handler not in handlers and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so no mdmatter.yaml is picked up."""
    monkeypatch.chdir(tmp_path)
    for name in ("LANGUAGE", "DELIMITERS", "CLOSE_DELIMITER", "EXCERPT",
                 "EXCERPT_SEPARATOR", "UNSAFE_EVAL", "LOG_LEVEL"):
        monkeypatch.delenv(f"MDMATTER_{name}", raising=False)
