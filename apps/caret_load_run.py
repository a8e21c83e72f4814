from __future__ import annotations

import argparse
import logging
from pathlib import Path

from core.api import load_from_yaml, validate_from_yaml
from core.orchestration.registry import DictLoaderRegistry
from plugins.caret import CaretModelLoader


def build_registry() -> DictLoaderRegistry:
    return DictLoaderRegistry.of(CaretModelLoader())


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate or load an R model from YAML config.")
    parser.add_argument("config_yaml", type=Path, help="Path to model load YAML")
    parser.add_argument(
        "--load",
        action="store_true",
        help="Load the model into an embedded R session after validation",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level)
    registry = build_registry()

    errors = validate_from_yaml(args.config_yaml, registry=registry)
    for error in errors:
        print(error)
    if errors:
        return 1

    if not args.load:
        print(f"{args.config_yaml}: ok")
        return 0

    model = load_from_yaml(args.config_yaml, registry=registry)
    try:
        print(model)
    finally:
        model.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
