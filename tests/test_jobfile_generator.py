# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from pathlib import Path

from launchers_lib.batch import SGE, Slurm
from launchers_lib.jobfile import ScriptGenerator
from launchers_lib.properties.request import JobRequest
from launchers_lib.properties.resources import Resources


def _request(work_dir=Path("/data/run 1")):
    return JobRequest(
        name="md",
        resources=Resources(nodes=1, cores=8, memory="2000MB", gpus=0),
        work_dir=work_dir,
        input_files=[work_dir / "md.tpr"],
    )


def test_generate_slurm_script():
    generator = ScriptGenerator(Slurm, Path("/home/user/msg"))

    script = generator.generate(
        _request(), ["gmx mdrun -deffnm md"], ["gromacs/2018"], ["gromacs/2024"]
    )

    assert script.name == "md"
    assert script.header == [
        "#SBATCH --job-name md",
        "#SBATCH --output /home/user/msg/md.msg",
        "#SBATCH --error /home/user/msg/md.msg",
        "#SBATCH --nodes 1",
        "#SBATCH --ntasks-per-node 8",
        "#SBATCH --mem 2000MB",
    ]
    assert script.environment == [
        "module unload gromacs/2018",
        "module load gromacs/2024",
    ]
    assert script.body == ["cd '/data/run 1'", "gmx mdrun -deffnm md"]


def test_generate_sge_script_without_modules():
    generator = ScriptGenerator(SGE, Path("/msg"))

    script = generator.generate(_request(Path("/data")), ["bash run.sh"])

    assert script.header[0] == "#$ -N md"
    assert script.environment == []
    assert script.body == ["cd /data", "bash run.sh"]


def test_module_lines_unload_before_load():
    assert ScriptGenerator.moduleLines(["a"], ["b", "c"]) == [
        "module unload a",
        "module load b",
        "module load c",
    ]
    assert ScriptGenerator.moduleLines(None, None) == []
