# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the fixturegen command-line interface."""

import argparse
import dataclasses
import sys
from pathlib import Path

from fixturegen.config import CONFIG_FILE_NAME, ConfigError, GeneratorConfig, load_config
from fixturegen.frontend import ExtractionError, load_package, parse_source
from fixturegen.generator import ExternalTypeRegistry, generate, generate_formatted
from fixturegen.model import TypeModel
from fixturegen.model.artifact import read_artifact, serialize

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the fixturegen CLI."""
    parser = argparse.ArgumentParser(
        prog="fixturegen",
        description="fixturegen - generate Go test fixtures from type declarations",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate fixture functions for a Go package",
        description="Generate one fixture function per record, enumeration and alias type.",
    )
    generate_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the Go package (default: current directory)",
    )
    input_group = generate_parser.add_mutually_exclusive_group()
    input_group.add_argument(
        "--source",
        metavar="FILE",
        help="Read type declarations from a single Go file instead of a package",
    )
    input_group.add_argument(
        "--model",
        metavar="FILE",
        help="Read the type model from a JSON artifact written by 'fixturegen model'",
    )
    generate_parser.add_argument("--outpkg", metavar="NAME", help="Package name of the generated file")
    generate_parser.add_argument(
        "--out",
        metavar="FILE",
        help="Output file path (prints to stdout if not specified)",
    )
    generate_parser.add_argument("--type-prefix", metavar="PREFIX", help="Qualifier for emitted type names")
    generate_parser.add_argument("--func-infix", metavar="INFIX", help="Infix for fixture function names")
    generate_parser.add_argument(
        "--classic",
        action="store_true",
        help="Emit value-returning fixtures without mutators",
    )
    generate_parser.add_argument(
        "--config",
        metavar="FILE",
        help=f"Configuration file (default: DIRECTORY/{CONFIG_FILE_NAME} when present)",
    )
    generate_parser.add_argument(
        "--no-format",
        action="store_true",
        help="Skip formatting the output with gofmt",
    )

    # model subcommand
    model_parser = subparsers.add_parser(
        "model",
        help="Dump the extracted type model as JSON",
        description="Extract the type model and write it as a JSON artifact.",
    )
    model_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the Go package (default: current directory)",
    )
    model_parser.add_argument("--source", metavar="FILE", help="Read a single Go file instead of a package")
    model_parser.add_argument(
        "--out",
        metavar="FILE",
        help="Output file path (prints to stdout if not specified)",
    )

    # serve subcommand
    serve_parser = subparsers.add_parser(
        "serve",
        help="Launch the fixture generator playground",
        description="Launch a web UI that generates fixtures from pasted Go source.",
    )
    serve_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help=f"Directory whose {CONFIG_FILE_NAME} supplies external types (default: current directory)",
    )
    serve_parser.add_argument(
        "--config",
        metavar="FILE",
        help=f"Configuration file (default: DIRECTORY/{CONFIG_FILE_NAME} when present)",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8050,
        help="Port to run the server on (default: 8050)",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "model":
        return _cmd_model(args)
    if args.command == "serve":
        return _cmd_serve(args)
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    directory = Path(args.directory).resolve()

    try:
        config, config_dir = _load_generator_config(directory, args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    registry = config.registry()
    try:
        model = _load_model(directory, args.source, args.model, registry)
    except ExtractionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"Error: cannot load model '{args.model}': {exc}", file=sys.stderr)
        return 1

    options = config.options()
    if args.type_prefix is not None:
        options = dataclasses.replace(options, type_name_prefix=args.type_prefix)
    if args.func_infix is not None:
        options = dataclasses.replace(options, function_name_infix=args.func_infix)
    if args.classic:
        options = dataclasses.replace(options, mod_style=False)

    package = args.outpkg or config.package
    if args.no_format:
        output = generate(model, package, options, registry)
    else:
        output = generate_formatted(model, package, options, registry)

    out_path: Path | None = None
    if args.out:
        out_path = Path(args.out)
    elif config.output:
        out_path = config_dir / config.output
    return _write_output(output, out_path)


def _cmd_model(args: argparse.Namespace) -> int:
    """Handle the model subcommand."""
    directory = Path(args.directory).resolve()
    try:
        config, _ = _load_generator_config(directory, None)
        model = _load_model(directory, args.source, None, config.registry())
    except (ConfigError, ExtractionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    out_path = Path(args.out) if args.out else None
    return _write_output(serialize(model) + "\n", out_path)


def _cmd_serve(args: argparse.Namespace) -> int:
    """Handle the serve subcommand."""
    from fixturegen.webui.app import create_app

    try:
        config, _ = _load_generator_config(Path(args.directory).resolve(), args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Serving fixture generator playground at http://{args.host}:{args.port}/")
    app = create_app(config.registry())
    app.run(host=args.host, port=args.port, debug=False)
    return 0


def _load_generator_config(directory: Path, config_arg: str | None) -> tuple[GeneratorConfig, Path]:
    """Return the effective configuration and the directory relative paths in it refer to."""
    if config_arg:
        config_path = Path(config_arg).resolve()
        return load_config(config_path), config_path.parent
    config_path = directory / CONFIG_FILE_NAME
    if config_path.exists():
        return load_config(config_path), directory
    return GeneratorConfig(), directory


def _load_model(
    directory: Path,
    source_arg: str | None,
    model_arg: str | None,
    registry: ExternalTypeRegistry,
) -> TypeModel:
    if model_arg:
        return read_artifact(Path(model_arg))
    if source_arg:
        source_path = Path(source_arg)
        try:
            source = source_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ExtractionError(f"Cannot read source file '{source_path}': {exc}") from exc
        return parse_source(source, registry)

    loaded = load_package(directory, registry)
    for warning in loaded.warnings:
        print(f"Warning: {warning}", file=sys.stderr)
    return loaded.model


def _write_output(text: str, out_path: Path | None) -> int:
    if out_path is None:
        sys.stdout.write(text)
        return 0
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot write output file '{out_path}': {exc}", file=sys.stderr)
        return 1
    print(f"Wrote {out_path}", file=sys.stderr)
    return 0
