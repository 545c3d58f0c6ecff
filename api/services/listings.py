# services/listings.py
from typing import Any, Dict, Tuple

from scraper.interfaces.models import Blocked, Failure, Outcome, Success


def blocked_message(outcome: Blocked) -> str:
    return (
        f"{outcome.platform.display_name} blocked automated access to this listing. "
        "Please enter the property details manually."
    )


def outcome_to_response(outcome: Outcome) -> Tuple[int, Dict[str, Any]]:
    """Outcome -> (HTTP-Status, JSON-Body) an der Service-Grenze."""
    if isinstance(outcome, Success):
        return 200, outcome.listing.to_dict()

    if isinstance(outcome, Blocked):
        return 403, {
            "error": "SCRAPING_BLOCKED",
            "message": blocked_message(outcome),
            "platform": outcome.platform.value,
        }

    if isinstance(outcome, Failure):
        return 400, {"error": outcome.detail}

    raise TypeError(f"Unknown outcome: {outcome!r}")
