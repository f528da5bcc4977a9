# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from unittest.mock import patch

import pytest

from launchers_lib.batch import SGE, BatchMeta, Slurm
from launchers_lib.core.config import CFG
from launchers_lib.core.error import LauncherError


def test_registry_contains_supported_systems():
    assert BatchMeta.fromStr("Slurm") is Slurm
    assert BatchMeta.fromStr("SGE") is SGE


def test_from_str_is_case_insensitive():
    assert BatchMeta.fromStr("slurm") is Slurm
    assert BatchMeta.fromStr("sge") is SGE


def test_from_str_unknown_raises():
    with pytest.raises(LauncherError, match="No batch system registered as 'PBS'"):
        BatchMeta.fromStr("PBS")


def test_guess_returns_first_available():
    with (
        patch.object(SGE, "isAvailable", return_value=False),
        patch.object(Slurm, "isAvailable", return_value=True),
    ):
        assert BatchMeta.guess() is Slurm


def test_guess_raises_when_nothing_available():
    with (
        patch.object(SGE, "isAvailable", return_value=False),
        patch.object(Slurm, "isAvailable", return_value=False),
        pytest.raises(LauncherError, match="Could not guess a batch system"),
    ):
        BatchMeta.guess()


def test_guess_returns_fallback_when_nothing_available():
    with (
        patch.object(SGE, "isAvailable", return_value=False),
        patch.object(Slurm, "isAvailable", return_value=False),
        patch("launchers_lib.batch.interface.meta.logger") as mock_logger,
    ):
        assert BatchMeta.guess(fallback=Slurm) is Slurm

    mock_logger.warning.assert_called_once()


def test_guess_prefers_available_over_fallback():
    with (
        patch.object(SGE, "isAvailable", return_value=True),
        patch.object(Slurm, "isAvailable", return_value=False),
    ):
        assert BatchMeta.guess(fallback=Slurm) is SGE


def test_obtain_explicit_name_wins(monkeypatch):
    monkeypatch.setenv(CFG.env_vars.batch_system, "SGE")

    assert BatchMeta.obtain("Slurm") is Slurm


def test_obtain_uses_environment_variable(monkeypatch):
    monkeypatch.setenv(CFG.env_vars.batch_system, "SGE")

    assert BatchMeta.obtain() is SGE


def test_obtain_uses_configuration(monkeypatch):
    monkeypatch.delenv(CFG.env_vars.batch_system, raising=False)
    monkeypatch.setattr(CFG, "batch_system", "SGE")

    assert BatchMeta.obtain() is SGE


def test_obtain_falls_back_to_guess(monkeypatch):
    monkeypatch.delenv(CFG.env_vars.batch_system, raising=False)
    monkeypatch.setattr(CFG, "batch_system", "")

    with patch.object(BatchMeta, "guess", return_value=Slurm) as mock_guess:
        assert BatchMeta.obtain() is Slurm

    mock_guess.assert_called_once()
