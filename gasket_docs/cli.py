"""CLI entrypoints for gasket docs commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config_set
from .index import generate_index
from .logging import configure_logging


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gasket-docs",
        description="Generate the markdown docs index for a gasket app.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    index_parser = subparsers.add_parser(
        "index",
        help="Write README.md into the docs root from a docs config set file.",
    )
    _add_verbose_option(index_parser, suppress_default=True)
    index_parser.add_argument(
        "config",
        help="Path to a YAML or JSON docs config set.",
    )
    index_parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for gasket docs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=getattr(args, "log_file", None),
    )

    if args.command == "index":
        try:
            config_set = load_config_set(Path(args.config))
            index_path = generate_index(config_set)
        except ConfigError as exc:
            parser.exit(1, f"Invalid docs config set: {exc}\n")
        except OSError as exc:
            parser.exit(1, f"gasket-docs index failed: {exc}\nRun with --verbose for more details.\n")
        print(f"Docs index written to {_relativize(index_path)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
