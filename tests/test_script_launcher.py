# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import pytest

from launchers_lib.batch import Slurm
from launchers_lib.core.config import Config, PathSettings
from launchers_lib.core.error import NoArgumentsError
from launchers_lib.properties.resources import Resources
from launchers_lib.script import ScriptLauncher


@pytest.fixture
def cfg(tmp_path):
    return Config(
        paths=PathSettings(
            messages_dir=str(tmp_path / "msg"), jobs_dir=str(tmp_path / "jobs")
        )
    )


@pytest.fixture
def work_dir(tmp_path):
    directory = tmp_path / "analysis"
    directory.mkdir()
    (directory / "analyze.sh").write_text("echo $@\n")
    (directory / "2nd.sh").write_text("echo\n")
    return directory


@pytest.fixture
def launcher(cfg, work_dir):
    return ScriptLauncher(
        cfg=cfg,
        defaults=Resources(nodes=1, cores=1, memory="1000MB", gpus=0),
        batch_system=Slurm,
        work_dir=work_dir,
    )


def test_script_arguments_passed_through(launcher, work_dir):
    launcher.launch(["--dry", "analyze.sh", "-n", "10", "two words", "--flag"])

    content = (work_dir / "analyze.job").read_text()
    assert content.endswith(
        f"cd {work_dir}\nbash analyze.sh -n 10 'two words' --flag > analyze.log 2>&1\n"
    )


def test_script_custom_name(launcher, work_dir):
    launcher.launch(["--dry", "--name", "second", "2nd.sh"])

    content = (work_dir / "second.job").read_text()
    assert "#SBATCH --job-name second\n" in content
    assert content.endswith("bash 2nd.sh > second.log 2>&1\n")


def test_script_digit_leading_name_rejected(launcher, work_dir):
    with pytest.raises(SystemExit):
        launcher.launch(["--dry", "2nd.sh"])

    assert not list(work_dir.glob("*.job"))


def test_script_missing_script(launcher):
    with pytest.raises(NoArgumentsError):
        launcher.launch(["--dry"])
