# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from launchers_lib.jobfile import SubmissionScript


def _script():
    return SubmissionScript(
        name="md",
        header=["#SBATCH --job-name md", "#SBATCH --nodes 1"],
        environment=["module unload gromacs", "module load gromacs/2024"],
        body=["cd /data", "gmx mdrun -deffnm md > md.mdrun.log 2>&1"],
    )


def test_render_orders_sections():
    assert _script().render() == (
        "#!/bin/bash\n"
        "#SBATCH --job-name md\n"
        "#SBATCH --nodes 1\n"
        "\n"
        "module unload gromacs\n"
        "module load gromacs/2024\n"
        "\n"
        "cd /data\n"
        "gmx mdrun -deffnm md > md.mdrun.log 2>&1\n"
    )


def test_render_skips_empty_environment():
    script = SubmissionScript(name="run", header=["#$ -N run"], body=["bash run.sh"])

    assert script.render() == "#!/bin/bash\n#$ -N run\n\nbash run.sh\n"


def test_render_is_deterministic():
    assert _script().render() == _script().render()


def test_file_name():
    assert _script().fileName() == "md.job"


def test_write_creates_and_overwrites(tmp_path):
    (tmp_path / "md.job").write_text("stale")

    path = _script().write(tmp_path)

    assert path == tmp_path / "md.job"
    assert path.read_text() == _script().render()
