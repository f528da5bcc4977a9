# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import pytest

from launchers_lib.core.error import InvalidValueError
from launchers_lib.properties.resources import Resources


def test_resources_converts_integer_strings():
    res = Resources(nodes="2", cores="16", gpus="1")

    assert res.nodes == 2
    assert res.cores == 16
    assert res.gpus == 1


def test_resources_converts_integer_memory_to_string():
    assert Resources(memory=2000).memory == "2000"


@pytest.mark.parametrize("field", ["nodes", "cores", "gpus"])
def test_resources_invalid_integer_raises(field):
    with pytest.raises(InvalidValueError, match=f"for '{field}'"):
        Resources(**{field: "many"})


def test_resources_to_dict_skips_unset():
    res = Resources(cores=4, queue="gpu")

    assert res.toDict() == {"cores": 4, "queue": "gpu"}


def test_resources_from_dict_ignores_unknown_keys():
    res = Resources.fromDict({"cores": 8, "dry": True, "cpi": True, "memory": "4GB"})

    assert res == Resources(cores=8, memory="4GB")


def test_merge_resources_first_non_none_wins():
    explicit = Resources(memory="4000MB")
    embedded = Resources(cores=4, memory="2000MB")
    defaults = Resources(nodes=1, cores=1, memory="1000MB", gpus=0)

    merged = Resources.mergeResources(explicit, embedded, defaults)

    assert merged == Resources(nodes=1, cores=4, memory="4000MB", gpus=0)


def test_merge_resources_keeps_zero_values():
    merged = Resources.mergeResources(Resources(gpus=0), Resources(gpus=2))

    assert merged.gpus == 0


def test_merge_resources_no_values():
    assert Resources.mergeResources(Resources(), Resources()) == Resources()
