"""Receipt Processor command line interface.

    receipt-processor serve                 run the API with uvicorn
    receipt-processor submit payload.json   send a receipt to a running API
    receipt-processor score payload.json    score a receipt locally
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import httpx
from pydantic import ValidationError

from app.api.schemas.receipts import ReceiptPayload
from app.config import get_settings
from app.errors import MalformedReceiptError, ReceiptValidationError, ScoringError
from app.logging_config import configure_logging
from app.points import score
from app.validation import validate

logger = logging.getLogger(__name__)


class CLIError(Exception):
    """Base exception for CLI errors."""


class PayloadError(CLIError):
    """Payload file could not be read or decoded."""


class APIError(CLIError):
    """API answered with something other than 200."""


def load_payload(path: Path) -> dict[str, Any]:
    """Read a receipt JSON file."""
    logger.info("Reading JSON payload from file: %s", path)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise PayloadError(f"Error reading payload file '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise PayloadError(f"Payload file '{path}' is not valid JSON: {e}") from e


def print_breakdown(points: int, breakdown: list[str]) -> None:
    print(f"Total Points: {points}")
    print("Breakdown:")
    for line in breakdown:
        print(f"  - {line}")


def submit_receipt(client: httpx.Client, payload: dict[str, Any]) -> dict[str, Any]:
    """POST a receipt, then fetch its breakdown.

    Returns:
        dict with keys: id, points, breakdown
    """
    logger.info("Sending POST request to: %s/receipts/process", client.base_url)
    response = client.post("/receipts/process", json=payload)
    if response.status_code != 200:
        raise APIError(f"POST request failed with status {response.status_code}: {response.text}")

    receipt_id = response.json().get("id")
    if not receipt_id:
        raise APIError("POST response does not contain 'id'")
    logger.info("Receipt processed successfully. Received ID: %s", receipt_id)

    response = client.get(f"/receipts/{receipt_id}/breakdown")
    if response.status_code != 200:
        raise APIError(f"GET request failed with status {response.status_code}: {response.text}")

    body = response.json()
    return {"id": receipt_id, "points": body["points"], "breakdown": body["breakdown"]}


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def cmd_submit(args: argparse.Namespace) -> int:
    payload = load_payload(args.payload)

    with httpx.Client(base_url=args.url, timeout=args.timeout) as client:
        try:
            result = submit_receipt(client, payload)
        except httpx.HTTPError as e:
            raise APIError(f"Error talking to {args.url}: {e}") from e

    print(f"Receipt Processed. ID: {result['id']}")
    print_breakdown(result["points"], result["breakdown"])
    return 0


def cmd_score(args: argparse.Namespace) -> int:
    data = load_payload(args.payload)

    try:
        receipt = ReceiptPayload.model_validate(data).to_receipt()
    except ValidationError as e:
        raise MalformedReceiptError(f"Payload does not look like a receipt: {e}") from e

    try:
        validate(receipt)
        result = score(receipt)
    except ReceiptValidationError as e:
        print(f"Invalid receipt: {e.message}", file=sys.stderr)
        return 1
    except ScoringError as e:
        logger.error("Points engine rejected a validated receipt: %s", e)
        print("Error: internal error while scoring receipt", file=sys.stderr)
        return 1

    print_breakdown(result.points, list(result.breakdown))
    return 0


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="receipt-processor",
        description="Score purchase receipts for reward points",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=settings.host)
    serve.add_argument("--port", type=int, default=settings.port)
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve.set_defaults(func=cmd_serve)

    submit = subparsers.add_parser("submit", help="Send a receipt file to a running API")
    submit.add_argument("payload", type=Path, help="Path to a receipt JSON file")
    submit.add_argument("--url", default=settings.api_base_url, help="API base URL")
    submit.add_argument("--timeout", type=float, default=10.0, help="Request timeout in seconds")
    submit.set_defaults(func=cmd_submit)

    score_cmd = subparsers.add_parser("score", help="Score a receipt file without the API")
    score_cmd.add_argument("payload", type=Path, help="Path to a receipt JSON file")
    score_cmd.set_defaults(func=cmd_score)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        return args.func(args)
    except (CLIError, MalformedReceiptError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
