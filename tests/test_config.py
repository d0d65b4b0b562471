from __future__ import annotations

import importlib

import config.testing


def test_testing_settings_do_not_create_a_directory_per_import():
    first = config.testing.DATA_DIR
    reloaded = importlib.reload(config.testing)

    assert reloaded.DATA_DIR == first
