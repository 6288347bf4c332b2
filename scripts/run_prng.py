"""Command line harness for the ranxoshi generator."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "prng_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from ranxoshi import DEFAULT_SEED, StreamConfig, run_streams
from ranxoshi.streams import OUTPUT_KINDS


def _parse_seed(value: str) -> str:
    """Accept 64 hex digits (optionally 0x-prefixed) and normalise them."""

    payload = value.strip().lower()
    if payload.startswith("0x"):
        payload = payload[2:]

    try:
        seed = bytes.fromhex(payload)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Seed must be hexadecimal, received '{value}'.") from exc

    if len(seed) != 32:
        raise argparse.ArgumentTypeError(
            f"Seed must be exactly 32 bytes (64 hex digits), received {len(seed)} bytes."
        )
    return seed.hex()


def _parse_count(value: str) -> int:
    try:
        count = int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc
    if count < 0:
        raise argparse.ArgumentTypeError("Counts must not be negative.")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw deterministic xoshiro256** samples")
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=DEFAULT_SEED.hex(),
        help="32-byte seed as 64 hex digits (bytes 00..1f by default)",
    )
    parser.add_argument(
        "--streams",
        type=_parse_count,
        default=1,
        help="Number of jump-separated streams to derive from the seed",
    )
    parser.add_argument("--samples", type=_parse_count, default=8, help="Values drawn per stream")
    parser.add_argument(
        "--kind",
        choices=OUTPUT_KINDS,
        default="u64",
        help="Output conversion applied to each raw word",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "prng_logs/latest_run.json under the repository root."
        ),
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity on stderr",
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    cfg = StreamConfig(
        seed=args.seed,
        streams=args.streams,
        samples=args.samples,
        kind=args.kind,
    )
    result = run_streams(cfg)

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logging.getLogger("run_prng").info("report written to %s", log_path)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
