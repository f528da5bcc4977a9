# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import os
from abc import ABCMeta

from launchers_lib.core.config import CFG
from launchers_lib.core.error import LauncherError
from launchers_lib.core.logger import get_logger

from .interface import BatchInterface

logger = get_logger(__name__)


class BatchMeta(ABCMeta):
    """
    Metaclass for batch system classes.
    """

    # registry of supported batch systems
    _registry: dict[str, type[BatchInterface]] = {}

    def __str__(cls: type[BatchInterface]):
        """
        Get the string representation of the batch system class.
        """
        return cls.envName()

    @classmethod
    def register(mcs, batch_cls: type[BatchInterface]):
        """
        Register a batch system class in the metaclass registry.

        Args:
            batch_cls: Subclass of BatchInterface to register.
        """
        mcs._registry[batch_cls.envName()] = batch_cls

    @classmethod
    def fromStr(mcs, name: str) -> type[BatchInterface]:
        """
        Return the batch system class registered with the given name.

        The name is matched case-insensitively.

        Raises:
            LauncherError: If no class is registered for the given name.
        """
        for registered, batch_cls in mcs._registry.items():
            if registered.lower() == name.lower():
                return batch_cls

        raise LauncherError(f"No batch system registered as '{name}'.")

    @classmethod
    def guess(
        mcs, fallback: type[BatchInterface] | None = None
    ) -> type[BatchInterface]:
        """
        Attempt to select an appropriate batch system implementation.

        The method scans through all registered batch systems in the order
        they were registered and returns the first one that reports itself
        as available.

        Args:
            fallback (type[BatchInterface] | None): Batch system returned if none
                of the registered ones is available.

        Raises:
            LauncherError: If no available batch system is found among the registered ones
                and no fallback is provided.

        Returns:
            type[BatchInterface]: The first available batch system class.
        """
        for BatchSystem in mcs._registry.values():
            if BatchSystem.isAvailable():
                logger.debug(f"Guessed batch system: {str(BatchSystem)}.")
                return BatchSystem

        if fallback:
            logger.warning(
                f"No batch system available. Writing job files for '{str(fallback)}'."
            )
            return fallback

        # raise error if there is no available batch system
        raise LauncherError(
            "Could not guess a batch system. No registered batch system available."
        )

    @classmethod
    def obtain(
        mcs, name: str | None = None, fallback: type[BatchInterface] | None = None
    ) -> type[BatchInterface]:
        """
        Obtain a batch system class.

        Priority:
            1. Explicitly provided name
            2. Environment variable
            3. Configuration
            4. Guessed batch system
            5. Fallback (if provided)

        Args:
            name (str | None): Optional name of the batch system to obtain.
            fallback (type[BatchInterface] | None): Batch system used if nothing
                is selected and none can be guessed.

        Returns:
            type[BatchInterface]: The selected batch system class.

        Raises:
            LauncherError: If the selected name is not registered
                or no available batch system can be guessed.
        """
        if name:
            return mcs.fromStr(name)

        if name := os.environ.get(CFG.env_vars.batch_system):
            logger.debug(
                f"Using batch system name from an environment variable: {name}."
            )
            return mcs.fromStr(name)

        if CFG.batch_system:
            logger.debug(f"Using batch system from the configuration: {CFG.batch_system}.")
            return mcs.fromStr(CFG.batch_system)

        return mcs.guess(fallback)


def batch_system(cls):
    """
    Class decorator to register a batch system class with the BatchMeta registry.
    """
    BatchMeta.register(cls)
    return cls
