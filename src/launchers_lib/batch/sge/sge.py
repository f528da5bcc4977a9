# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import shutil
from pathlib import Path

from launchers_lib.batch.interface import BatchInterface, BatchMeta, batch_system
from launchers_lib.core.logger import get_logger
from launchers_lib.properties.resources import Resources

logger = get_logger(__name__)


@batch_system
class SGE(BatchInterface, metaclass=BatchMeta):
    # prefix of all directives
    DIRECTIVE = "#$"

    def envName() -> str:
        return "SGE"

    def isAvailable() -> bool:
        # Slurm installations may provide a qsub wrapper
        return shutil.which("qsub") is not None and shutil.which("sbatch") is None

    def submitCommand() -> str:
        return "qsub"

    def translateHeader(job_name: str, res: Resources, message_file: Path) -> list[str]:
        options: list[str] = [
            f"-N {job_name}",
            f"-o {message_file}",
            f"-e {message_file}",
            "-S /bin/bash",
            "-cwd",
        ]

        if res.queue:
            options.append(f"-q {res.queue}")
        if res.account:
            options.append(f"-A {res.account}")
        if res.nodes is not None and res.nodes > 1:
            logger.warning(
                f"SGE does not support requesting {res.nodes} nodes. Requesting a single node."
            )
        if res.cores is not None:
            options.append(f"-pe smp {res.cores}")
        if res.memory:
            options.append(f"-l h_vmem={res.memory}")
        if res.gpus:
            options.append(f"-l gpu={res.gpus}")
        if res.nodelist:
            options.append(f"-l hostname={res.nodelist}")

        return [f"{SGE.DIRECTIVE} {option}" for option in options]
