# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass

# Arity of flags consuming all following tokens that do not start with '-'.
VARIADIC = -1


@dataclass(frozen=True)
class Flag:
    """
    Declarative specification of a single command-line flag.
    """

    # All spellings of the flag (e.g., ("-c", "--cores"))
    names: tuple[str, ...]

    # Name of the option the value is stored under
    dest: str

    # Number of values consumed: 0 (switch), 1, or VARIADIC
    arity: int = 1

    # Type the values are converted to
    kind: type = str

    # Placeholder shown in the usage block
    metavar: str = "VALUE"

    # Description shown in the usage block
    help: str = ""

    def takesValue(self) -> bool:
        """Return True if the flag consumes at least one value."""
        return self.arity != 0

    def isVariadic(self) -> bool:
        """Return True if the flag consumes a run of values."""
        return self.arity == VARIADIC

    def formatTerm(self) -> str:
        """Return the flag as shown in the usage block, e.g. '-c, --cores N'."""
        term = ", ".join(self.names)
        if self.isVariadic():
            return f"{term} {self.metavar} [{self.metavar} ...]"
        if self.takesValue():
            return f"{term} {self.metavar}"
        return term


HELP_FLAG = Flag(("-h", "--help"), "help", arity=0, help="Print this help and exit.")

# Flags understood by all launchers.
COMMON_FLAGS: list[Flag] = [
    Flag(
        ("--nodes",),
        "nodes",
        kind=int,
        metavar="N",
        help="Number of computing nodes to request.",
    ),
    Flag(
        ("--nodelist",),
        "nodelist",
        metavar="LIST",
        help="Comma-separated list of nodes to run the job on.",
    ),
    Flag(
        ("-c", "--cores"),
        "cores",
        kind=int,
        metavar="N",
        help="Number of CPU cores to request per node.",
    ),
    Flag(
        ("-m", "--memory"),
        "memory",
        metavar="MEM",
        help="Memory to request per node (e.g., 2000MB, 8GB).",
    ),
    Flag(
        ("-g", "--gpus"),
        "gpus",
        kind=int,
        metavar="N",
        help="Number of GPUs to request per node.",
    ),
    Flag(
        ("-q", "--queue"),
        "queue",
        metavar="QUEUE",
        help="Queue (partition) to submit the job to.",
    ),
    Flag(
        ("-a", "--account"),
        "account",
        metavar="ACCOUNT",
        help="Account to charge the job to.",
    ),
    Flag(
        ("--dry", "-j"),
        "dry",
        arity=0,
        help="Only write the job file, do not submit it.",
    ),
    HELP_FLAG,
]
