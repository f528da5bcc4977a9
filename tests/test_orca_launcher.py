# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import pytest

from launchers_lib.batch import SGE
from launchers_lib.core.config import Config, PathSettings
from launchers_lib.orca import OrcaLauncher
from launchers_lib.properties.resources import Resources


@pytest.fixture
def cfg(tmp_path):
    return Config(
        paths=PathSettings(
            messages_dir=str(tmp_path / "msg"), jobs_dir=str(tmp_path / "jobs")
        )
    )


def test_orca_job_file(cfg, tmp_path):
    work_dir = tmp_path / "orca"
    work_dir.mkdir()
    (work_dir / "benzene.inp").write_text("! B3LYP def2-SVP\n")

    launcher = OrcaLauncher(
        cfg=cfg,
        defaults=Resources(nodes=1, cores=1, memory="1000MB", gpus=0),
        batch_system=SGE,
        work_dir=work_dir,
    )
    assert launcher.launch(["--dry", "-c", "8", "-q", "long", "benzene.inp"]) == 0

    msg = tmp_path / "msg" / "benzene.msg"
    assert (work_dir / "benzene.job").read_text() == (
        "#!/bin/bash\n"
        "#$ -N benzene\n"
        f"#$ -o {msg}\n"
        f"#$ -e {msg}\n"
        "#$ -S /bin/bash\n"
        "#$ -cwd\n"
        "#$ -q long\n"
        "#$ -pe smp 8\n"
        "#$ -l h_vmem=1000MB\n"
        "\n"
        "module load orca\n"
        "\n"
        f"cd {work_dir}\n"
        "$(which orca) benzene.inp > benzene.out\n"
    )
