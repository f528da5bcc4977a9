# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from pathlib import Path
from unittest.mock import patch

from launchers_lib.batch.slurm import Slurm
from launchers_lib.properties.resources import Resources


def test_slurm_env_name_and_submit_command():
    assert Slurm.envName() == "Slurm"
    assert str(Slurm) == "Slurm"
    assert Slurm.submitCommand() == "sbatch"


def test_slurm_is_available():
    with patch("launchers_lib.batch.slurm.slurm.shutil.which", return_value="/usr/bin/sbatch"):
        assert Slurm.isAvailable()

    with patch("launchers_lib.batch.slurm.slurm.shutil.which", return_value=None):
        assert not Slurm.isAvailable()


def test_slurm_translate_header_full():
    res = Resources(
        nodes=2,
        cores=16,
        memory="8GB",
        gpus=1,
        queue="gpu",
        account="OPEN-1-1",
        nodelist="node[01-02]",
    )

    header = Slurm.translateHeader("md", res, Path("/home/user/msg/md.msg"))

    assert header == [
        "#SBATCH --job-name md",
        "#SBATCH --output /home/user/msg/md.msg",
        "#SBATCH --error /home/user/msg/md.msg",
        "#SBATCH --partition gpu",
        "#SBATCH --account OPEN-1-1",
        "#SBATCH --nodes 2",
        "#SBATCH --ntasks-per-node 16",
        "#SBATCH --mem 8GB",
        "#SBATCH --gres gpu:1",
        "#SBATCH --nodelist node[01-02]",
    ]


def test_slurm_translate_header_skips_absent_values():
    res = Resources(nodes=1, cores=1, memory="1000MB", gpus=0)

    header = Slurm.translateHeader("md", res, Path("/msg/md.msg"))

    assert header == [
        "#SBATCH --job-name md",
        "#SBATCH --output /msg/md.msg",
        "#SBATCH --error /msg/md.msg",
        "#SBATCH --nodes 1",
        "#SBATCH --ntasks-per-node 1",
        "#SBATCH --mem 1000MB",
    ]


def test_slurm_job_submit_runs_sbatch(tmp_path):
    job_file = tmp_path / "md.job"

    with patch("launchers_lib.batch.interface.interface.subprocess.run") as mock_run:
        mock_run.return_value.returncode = 0
        assert Slurm.jobSubmit(job_file) == 0

    args, kwargs = mock_run.call_args
    assert args == (["bash"],)
    assert kwargs["input"] == f"sbatch {job_file}"
    assert kwargs["check"] is False


def test_slurm_job_submit_returns_failure_code(tmp_path):
    with patch("launchers_lib.batch.interface.interface.subprocess.run") as mock_run:
        mock_run.return_value.returncode = 1
        assert Slurm.jobSubmit(tmp_path / "md.job") == 1
