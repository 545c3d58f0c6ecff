import asyncio
import json
import sys

from api.services.listings import outcome_to_response
from pipelines.ingest_listing import ingest
from scraper.utils.log import setup_logging


async def run(url: str) -> int:
    print(f"Parsing listing: {url}")

    outcome = await ingest(url)
    status, body = outcome_to_response(outcome)

    print("\nResult:")
    print(json.dumps(body, ensure_ascii=False, indent=2))

    return 0 if status == 200 else 1


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python main.py <listing-url>")
        sys.exit(2)

    setup_logging()
    sys.exit(asyncio.run(run(sys.argv[1])))
