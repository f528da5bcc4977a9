# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from pathlib import Path

import pytest

from launchers_lib.core.error import InvalidNameError
from launchers_lib.launch import Resolver
from launchers_lib.properties.resources import Resources


@pytest.fixture
def resolver():
    return Resolver(Resources(nodes=1, cores=1, memory="1000MB", gpus=0))


def test_resolve_resources_defaults_only(resolver):
    assert resolver.resolveResources(Resources()) == Resources(
        nodes=1, cores=1, memory="1000MB", gpus=0
    )


def test_resolve_resources_embedded_over_defaults(resolver):
    resolved = resolver.resolveResources(
        Resources(), Resources(cores=4, memory="2000MB")
    )

    assert resolved.cores == 4
    assert resolved.memory == "2000MB"


def test_resolve_resources_explicit_over_embedded(resolver):
    resolved = resolver.resolveResources(
        Resources(memory="4000MB", queue="gpu"), Resources(cores=4, memory="2000MB")
    )

    assert resolved == Resources(
        nodes=1, cores=4, memory="4000MB", gpus=0, queue="gpu"
    )


@pytest.mark.parametrize("name", ["md", "water_box", "opt-b3lyp", "run2"])
def test_resolve_name_valid(name):
    assert Resolver.resolveName(name) == name


@pytest.mark.parametrize(
    "name, message",
    [
        ("", "empty"),
        ("1md", "starts with a digit"),
        ("9", "starts with a digit"),
        ("my job", "whitespace"),
    ],
)
def test_resolve_name_invalid(name, message):
    with pytest.raises(InvalidNameError, match=message):
        Resolver.resolveName(name)


def test_name_from_file():
    assert Resolver.nameFromFile(Path("runs/md.part2.tpr")) == "md.part2"
    assert Resolver.nameFromFile(Path("opt.com")) == "opt"


def test_name_from_directory(tmp_path, monkeypatch):
    directory = tmp_path / "lipid_bilayer"
    directory.mkdir()
    monkeypatch.chdir(directory)

    assert Resolver.nameFromDirectory(Path(".")) == "lipid_bilayer"
