from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence, Union


# PUBLIC_INTERFACE
def list_envelope(quests: Union[Sequence[Any], Iterable[Any]]) -> Dict[str, Any]:
    """
    Build the success envelope for the quest list endpoint.

    Args:
        quests: The quests on the current page.

    Returns:
        Dict with keys: status, results (number of quests returned), quests.
    """
    # Ensure quests is materialized as a list (in case an iterator is passed)
    materialized: List[Any] = list(quests) if not isinstance(quests, list) else quests
    return {
        "status": "success",
        "results": len(materialized),
        "quests": materialized,
    }


# PUBLIC_INTERFACE
def fail_envelope(message: str, **extra: Any) -> Dict[str, Any]:
    """Build the failure envelope: status 'fail' plus a message and any extra keys."""
    return {"status": "fail", "message": message, **extra}
