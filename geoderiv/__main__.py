import argparse
import logging
import sys
from typing import List, Optional, Sequence

from geoderiv import GeometryError, get_card, list_cards, run_checks

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_vector(value: str) -> List[float]:
    return [float(part) for part in value.split(",") if part.strip()]


def _evaluate(name: str, x: List[float]) -> int:
    card = get_card(name)
    try:
        distance = card.value(x)
    except GeometryError as exc:
        logger.error("value failed for %s: %s: %s", name, type(exc).__name__, exc)
        return 1
    print(f"value = {distance!r}")
    try:
        gradient = card.grad(x)
    except GeometryError as exc:
        print(f"grad  = <{type(exc).__name__}: {exc}>")
        return 0
    print("grad  = [" + ", ".join(f"{float(g)!r}" for g in gradient) + "]")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Verify nearest-feature distance cards by finite differences")
    parser.add_argument(
        "--card",
        action="append",
        choices=list_cards(),
        help="Card to check (repeatable, default: all cards)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=47,
        help="Sampler seed (default: 47)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=12,
        help="Number of sampled inputs per card (default: 12)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available cards and exit",
    )
    parser.add_argument(
        "--eval",
        nargs=2,
        metavar=("CARD", "X"),
        help="Evaluate value and grad of CARD at the comma-separated input X",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.list:
        for name in list_cards():
            card = get_card(name)
            print(f"{name}\t{card.input_size}\t{card.summary}")
        return

    if args.eval:
        name, raw = args.eval
        if name not in list_cards():
            parser.error(f"unknown card {name!r}")
        try:
            x = _parse_vector(raw)
        except ValueError:
            parser.error(f"expected comma-separated numbers, got {raw!r}")
        raise SystemExit(_evaluate(name, x))

    if args.samples < 0:
        parser.error("--samples must be non-negative")

    results = run_checks(args.card, seed=args.seed, count=args.samples)
    failed = [result for result in results if not result.passed]
    for result in results:
        status = "ok" if result.passed else "FAILED"
        print(f"{result.card}: {status} ({result.samples} samples, max error {result.max_error:.3g})")
        for failure in result.failures:
            print(f"  {failure}")
    if failed:
        logger.error("%d card(s) failed finite-difference verification", len(failed))
        raise SystemExit(1)


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:])
