"""Encounter status derivation from PV1/PV2 event fields."""

import logging
from typing import Any

from ..core.data_models import EncounterStatus

logger = logging.getLogger(__name__)


def get_encounter_status(var1: Any, var2: Any, var3: Any) -> str:
    """
    Derive the encounter status code.

    Only presence is checked, never the content: a discharge date (var1)
    means finished, otherwise an admit date (var2) means arrived, otherwise a
    cancellation marker (var3) means cancelled.

    Returns:
        An ``EncounterStatus`` code, "unknown" when no signal is present
    """
    logger.info(f"Generating encounter status from var1 {var1}, var2 {var2}, var3 {var3}")

    status = EncounterStatus.UNKNOWN
    if var1 is not None:
        status = EncounterStatus.FINISHED
    elif var2 is not None:
        status = EncounterStatus.ARRIVED
    elif var3 is not None:
        status = EncounterStatus.CANCELLED
    return status.to_code()
