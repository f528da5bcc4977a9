# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from unittest.mock import patch

import pytest

from launchers_lib.batch import Slurm
from launchers_lib.properties.request import Mode
from launchers_lib.submit import Submitter


@pytest.fixture
def job_file(tmp_path):
    job = tmp_path / "work" / "md.job"
    job.parent.mkdir()
    job.write_text("#!/bin/bash\n")
    return job


@pytest.fixture
def jobs_dir(tmp_path):
    directory = tmp_path / "jobs"
    directory.mkdir()
    return directory


def test_dry_run_never_submits(job_file, jobs_dir):
    with patch.object(Slurm, "jobSubmit") as mock_submit:
        result = Submitter(Slurm, jobs_dir).submit(job_file, Mode.DRY_RUN)

    assert result is None
    mock_submit.assert_not_called()
    assert job_file.is_file()
    assert not (jobs_dir / "md.job").exists()


def test_submit_calls_batch_system_and_archives(job_file, jobs_dir):
    with patch.object(Slurm, "jobSubmit", return_value=0) as mock_submit:
        result = Submitter(Slurm, jobs_dir).submit(job_file, Mode.SUBMIT)

    assert result == 0
    mock_submit.assert_called_once_with(job_file)
    assert not job_file.exists()
    assert (jobs_dir / "md.job").read_text() == "#!/bin/bash\n"


def test_submit_archives_even_on_failure(job_file, jobs_dir):
    with patch.object(Slurm, "jobSubmit", return_value=1):
        result = Submitter(Slurm, jobs_dir).submit(job_file, Mode.SUBMIT)

    assert result == 1
    assert (jobs_dir / "md.job").is_file()


def test_submit_overwrites_archived_file(job_file, jobs_dir):
    (jobs_dir / "md.job").write_text("old")

    with patch.object(Slurm, "jobSubmit", return_value=0):
        Submitter(Slurm, jobs_dir).submit(job_file, Mode.SUBMIT)

    assert (jobs_dir / "md.job").read_text() == "#!/bin/bash\n"
