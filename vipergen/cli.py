"""Command-line entry points.

Usage::

    vipergen Checkout Order
    vipergen-reactive Checkout Order
    python -m vipergen Checkout Order
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from pydantic import ValidationError

from vipergen.config import Config
from vipergen.errors import UsageError
from vipergen.scaffolder import ModuleGenerator, Variant
from vipergen.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    printable,
)

MISSING_MODULE_MESSAGE = "You have to to provide a module name as the first argument."
MISSING_PREFIX_MESSAGE = "You have to to provide a type prefix as the second argument."


def _build_parser(prog: str, variant: Variant) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description=f"Generate a {variant.value} VIPER module (view controller, "
        "presenter, interactor, router)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {prog} Checkout Order\n"
            f"  VIPERGEN_OUTPUT_DIR=./Modules {prog} Checkout Order\n"
        ),
    )
    # Optional at the argparse level so missing values get the fixed messages.
    parser.add_argument("module", nargs="?", help="Directory to create the module in")
    parser.add_argument("prefix", nargs="?", help="Stem of every generated type name")
    return parser


def _validate(args: argparse.Namespace) -> tuple[str, str]:
    if not args.module:
        raise UsageError(MISSING_MODULE_MESSAGE)
    if not args.prefix:
        raise UsageError(MISSING_PREFIX_MESSAGE)
    return args.module, args.prefix


def run(variant: Variant, argv: list[str] | None = None, prog: str = "vipergen") -> int:
    """Parse *argv*, generate the module, and return the process exit code."""
    args = _build_parser(prog, variant).parse_args(argv)

    try:
        module, prefix = _validate(args)
    except UsageError as exc:
        console.print(str(exc), markup=False, highlight=False, soft_wrap=True)
        return 1

    try:
        config = Config.from_env()
    except (ValidationError, ValueError) as exc:
        print_error(f"Invalid configuration: {exc}")
        return 1

    generator = ModuleGenerator(config)
    result = asyncio.run(generator.generate(module, prefix, variant=variant))

    if not result.ok:
        print_error(str(result.first_error))
        if result.written_files:
            console.print(
                printable(f"Already written: {', '.join(result.written_files)}"),
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
        return 1

    print_summary_table(
        {str(i): name for i, name in enumerate(result.written_files, start=1)},
        title=str(result.created_directory),
    )
    print_success(f"Created {variant.value} module '{prefix}' in {result.created_directory}")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point for the plain, protocol-based variant."""
    sys.exit(run(Variant.PLAIN, argv, prog="vipergen"))


def main_reactive(argv: list[str] | None = None) -> None:
    """Entry point for the Combine-based variant."""
    sys.exit(run(Variant.REACTIVE, argv, prog="vipergen-reactive"))


if __name__ == "__main__":
    main()
