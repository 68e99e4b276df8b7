import logging

import pytest

import xctype.ini


@pytest.fixture
def ini_paths(tmp_path):
    """ Return lookup tuples of (not yet existing) ini files. """
    return ((str(tmp_path / 'etc' / 'default.ini'),
             str(tmp_path / 'home' / 'default.ini')),
            (str(tmp_path / 'etc' / 'logging.ini'),
             str(tmp_path / 'home' / 'logging.ini')))


@pytest.fixture(autouse=True)
def reset_ini(monkeypatch):
    """ Each test begins with an uninitialized configuration. """
    monkeypatch.setattr(xctype.ini, 'CFG', None)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
