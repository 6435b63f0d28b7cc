"""
Precondition/postcondition checks.

Every table-producing operation calls ``require`` on its inputs, builds its result,
then calls ``ensure`` on the result before returning it. Each call carries a static
description of the checked property, attached verbatim to the raised failure.

Notes:
    - Failed checks are logged at DEBUG on this module's logger, then raised.
    - There is no switch to disable checks.
"""

from __future__ import annotations

import logging

from .errors import PostconditionViolation, PreconditionViolation

__all__ = ["require", "ensure"]

logger = logging.getLogger(__name__)


def require(
    condition: bool,
    description: str,
    *,
    kind: type[PreconditionViolation] = PreconditionViolation,
) -> None:
    """
    Check a precondition.

    Args:
        condition (bool): Evaluated property of the caller's inputs.
        description (str): Static statement of the property, e.g. "len(values) == table.nrows".
        kind (type[PreconditionViolation]): Failure class to raise; subclasses narrow the
            kind (e.g. RowIndexError).

    Raises:
        PreconditionViolation: If condition is false.
    """
    if not condition:
        logger.debug("precondition failed: %s", description)
        raise kind(description)


def ensure(condition: bool, description: str) -> None:
    """
    Check a postcondition.

    Raises:
        PostconditionViolation: If condition is false.
    """
    if not condition:
        logger.debug("postcondition failed: %s", description)
        raise PostconditionViolation(description)
