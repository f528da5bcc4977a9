# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Structured representation of job resource requirements.

This module defines the `Resources` dataclass, which captures the node, CPU,
memory, and GPU requirements of a job together with the queue, account, and
node list it should be submitted with.
"""

from dataclasses import asdict, dataclass, fields
from typing import Self

from launchers_lib.core.error import InvalidValueError
from launchers_lib.core.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Resources:
    """
    Dataclass representing computational resources requested for a job.
    """

    # Number of computing nodes to use
    nodes: int | None = None

    # Number of CPU cores to use per node
    cores: int | None = None

    # Amount of memory to allocate per node (e.g., 2000MB, 8GB)
    memory: str | None = None

    # Number of GPUs to use per node
    gpus: int | None = None

    # Queue (partition) to submit the job to
    queue: str | None = None

    # Account to charge the job to
    account: str | None = None

    # Explicit list of nodes to run the job on
    nodelist: str | None = None

    # fields that have to be converted to integers
    _INTEGER_FIELDS = ("nodes", "cores", "gpus")

    def __post_init__(self):
        for name in Resources._INTEGER_FIELDS:
            value = getattr(self, name)
            if isinstance(value, str):
                setattr(self, name, Resources._toInt(name, value))

        if isinstance(self.memory, int):
            self.memory = str(self.memory)

        logger.debug(f"Resources: {self}")

    def toDict(self) -> dict[str, object]:
        """Return all fields as a dict, excluding fields set to None."""
        return {k: v for k, v in asdict(self).items() if v is not None}

    @classmethod
    def fromDict(cls, data: dict[str, object]) -> Self:
        """
        Construct Resources from a dictionary, ignoring unknown keys.

        Args:
            data (dict[str, object]): Dictionary possibly containing resource fields.

        Returns:
            Resources: The constructed object.
        """
        field_names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in field_names})

    @staticmethod
    def mergeResources(*resources: "Resources") -> "Resources":
        """
        Merge multiple Resources objects.

        Earlier resources take precedence over later ones: for every field,
        the first value that is not None is used.

        Args:
            *resources (Resources): One or more Resources objects, in order of precedence.

        Returns:
            Resources: A new Resources object with merged fields.
        """
        merged_data = {}
        for f in fields(Resources):
            merged_data[f.name] = next(
                (
                    getattr(r, f.name)
                    for r in resources
                    if getattr(r, f.name) is not None
                ),
                None,
            )

        return Resources(**merged_data)

    @staticmethod
    def _toInt(name: str, value: str) -> int:
        try:
            return int(value)
        except ValueError as e:
            raise InvalidValueError(
                f"Invalid value '{value}' for '{name}': expected an integer."
            ) from e
