# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from unittest.mock import Mock

import pytest

from launchers_lib.core.error import InvalidNameError, LauncherError
from launchers_lib.core.repeater import Repeater


@pytest.fixture
def sample_items():
    return ["a.tpr", "b.tpr", "c.tpr"]


@pytest.fixture
def error_func():
    """Function that raises ValueError for a specific input."""

    def func(x):
        if x == "b.tpr":
            raise ValueError("bad item")
        return x.upper()

    return func


def test_repeater_runs_all_items_and_stores_results(sample_items):
    calls = []

    def func(x, suffix, prefix=""):
        calls.append(x)
        return f"{prefix}{x}{suffix}"

    repeater = Repeater(sample_items, func, ".job", prefix="job_")
    repeater.run()

    assert calls == sample_items
    assert repeater.results == {
        0: "job_a.tpr.job",
        1: "job_b.tpr.job",
        2: "job_c.tpr.job",
    }
    assert repeater.current_iteration == len(sample_items) - 1
    assert repeater.encountered_errors == {}


def test_repeater_handles_registered_exception(sample_items, error_func):
    handler = Mock()

    repeater = Repeater(sample_items, error_func)
    repeater.onException(ValueError, handler)
    repeater.run()

    handler.assert_called_once()
    exc_arg, meta_arg = handler.call_args.args

    assert isinstance(exc_arg, ValueError)
    assert meta_arg is repeater
    assert isinstance(repeater.encountered_errors[1], ValueError)
    # the failed item has no result, the others do
    assert repeater.results == {0: "A.TPR", 2: "C.TPR"}


def test_repeater_multiple_handlers(sample_items):
    def func(x):
        if x == "a.tpr":
            raise ValueError("val")
        if x == "b.tpr":
            raise TypeError("type")
        return x

    h_val = Mock()
    h_type = Mock()

    repeater = Repeater(sample_items, func)
    repeater.onException(ValueError, h_val)
    repeater.onException(TypeError, h_type)
    repeater.run()

    h_val.assert_called_once()
    h_type.assert_called_once()
    assert len(repeater.encountered_errors) == 2


def test_repeater_dispatches_subclass_to_base_handler(sample_items):
    def func(x):
        raise InvalidNameError(x)

    handler = Mock()
    repeater = Repeater(sample_items, func)
    repeater.onException(LauncherError, handler)
    repeater.run()

    assert handler.call_count == 3


def test_repeater_prefers_most_specific_handler(sample_items):
    def func(_):
        raise InvalidNameError("digit")

    general = Mock()
    specific = Mock()
    repeater = Repeater(sample_items, func)
    repeater.onException(LauncherError, general)
    repeater.onException(InvalidNameError, specific)
    repeater.run()

    general.assert_not_called()
    assert specific.call_count == 3


def test_repeater_unhandled_exception_propagates(sample_items):
    def func(x):
        if x == "b.tpr":
            raise KeyError("boom")
        return x

    repeater = Repeater(sample_items, func)

    with pytest.raises(KeyError, match="boom"):
        repeater.run()

    assert repeater.current_iteration == 1
    assert repeater.encountered_errors == {}


def test_repeater_all_failed(sample_items):
    def func(_):
        raise ValueError("bad")

    repeater = Repeater(sample_items, func)
    repeater.onException(ValueError, Mock())
    repeater.run()

    assert repeater.allFailed()


def test_repeater_not_all_failed(sample_items, error_func):
    repeater = Repeater(sample_items, error_func)
    repeater.onException(ValueError, Mock())
    repeater.run()

    assert not repeater.allFailed()


def test_repeater_empty_items():
    repeater = Repeater([], Mock())
    repeater.run()

    assert repeater.results == {}
    assert repeater.encountered_errors == {}
    assert repeater.current_iteration == 0
