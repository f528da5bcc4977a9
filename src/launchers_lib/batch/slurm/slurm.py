# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import shutil
from pathlib import Path

from launchers_lib.batch.interface import BatchInterface, BatchMeta, batch_system
from launchers_lib.core.logger import get_logger
from launchers_lib.properties.resources import Resources

logger = get_logger(__name__)


@batch_system
class Slurm(BatchInterface, metaclass=BatchMeta):
    # prefix of all directives
    DIRECTIVE = "#SBATCH"

    def envName() -> str:
        return "Slurm"

    def isAvailable() -> bool:
        return shutil.which("sbatch") is not None

    def submitCommand() -> str:
        return "sbatch"

    def translateHeader(job_name: str, res: Resources, message_file: Path) -> list[str]:
        options: list[tuple[str, object]] = [
            ("--job-name", job_name),
            ("--output", message_file),
            ("--error", message_file),
        ]

        if res.queue:
            options.append(("--partition", res.queue))
        if res.account:
            options.append(("--account", res.account))
        if res.nodes is not None:
            options.append(("--nodes", res.nodes))
        if res.cores is not None:
            options.append(("--ntasks-per-node", res.cores))
        if res.memory:
            options.append(("--mem", res.memory))
        if res.gpus:
            options.append(("--gres", f"gpu:{res.gpus}"))
        if res.nodelist:
            options.append(("--nodelist", res.nodelist))

        return [f"{Slurm.DIRECTIVE} {option} {value}" for option, value in options]
