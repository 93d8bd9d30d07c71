#!/usr/bin/env python3
"""
Test loading and merging the TOML configuration.
"""

from logging import DEBUG, INFO, WARNING

from katas.shared import Config, load_config


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "missing.toml")
    assert config == Config()
    assert config.fizzbuzz.default_bound == 100
    assert config.logging.level == INFO


def test_repository_config_loads():
    config = load_config()
    assert config.general.title == "katas"
    assert config.fizzbuzz.default_bound == 100
    assert config.fizzbuzz.max_bound == 10000


def test_log_level_names_are_converted(tmp_path):
    shared = tmp_path / "config.toml"
    shared.write_text('[logging]\nlevel = "debug"\n')
    assert load_config(shared).logging.level == DEBUG

    shared.write_text('[logging]\nlevel = "chatty"\n')
    assert load_config(shared).logging.level == INFO


def test_specific_file_overrides_sections(tmp_path):
    shared = tmp_path / "config.toml"
    shared.write_text(
        '[logging]\nlevel = "INFO"\n\n[network]\nhost = "0.0.0.0"\nport = 9000\n'
    )
    specific = tmp_path / "local.toml"
    specific.write_text('[logging]\nlevel = "WARNING"\n')

    config = load_config(shared, specific)

    assert config.logging.level == WARNING
    assert config.network.host == "0.0.0.0"
    assert config.network.port == 9000


def test_driver_settings_are_not_configurable(tmp_path):
    shared = tmp_path / "config.toml"
    shared.write_text('[fizzbuzz]\nstart_marker = "hijacked"\n\n[rot13]\nmessage = "nope"\n')

    config = load_config(shared)

    assert not hasattr(config, "rot13")
    assert not hasattr(config.fizzbuzz, "start_marker")
