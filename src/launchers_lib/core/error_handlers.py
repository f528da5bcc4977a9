# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys

from .config import CFG
from .logger import get_logger
from .repeater import Repeater

logger = get_logger(__name__)


def handle_skipped_item(
    exception: BaseException,
    metadata: Repeater,
) -> None:
    """
    Report an error tied to a single input and continue with the next one.

    Terminates the launcher only if processing failed for all inputs.
    """
    item = metadata.items[metadata.current_iteration]
    if item is not None and len(metadata.items) > 1:
        logger.error(f"{exception} Skipping '{item}'.")
    else:
        logger.error(exception)

    # if the operation failed for all items
    if metadata.allFailed():
        sys.exit(CFG.exit_codes.default)
