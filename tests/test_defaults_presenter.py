# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import click

from launchers_lib.core.config import Config, DefaultResources
from launchers_lib.defaults import DefaultsPresenter
from launchers_lib.properties.defaults import Defaults


def _rows(table):
    return [line.split() for line in click.unstyle(table).splitlines()]


def test_presenter_sources(tmp_path):
    file = tmp_path / "defaults.yaml"
    file.write_text("memory: 8GB\n")
    cfg = Config(defaults=DefaultResources(queue="cpu"))

    rows = _rows(DefaultsPresenter(Defaults(file, cfg)).createTable())

    assert rows[0] == ["Variable", "Value", "Source"]
    assert ["nodes", "1", "built-in"] in rows
    assert ["memory", "8GB", "user"] in rows
    assert ["queue", "cpu", "config"] in rows
    assert ["account", "-", "built-in"] in rows
