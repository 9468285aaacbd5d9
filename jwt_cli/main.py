"""
JWT command-line tool - command dispatch
"""
import os
import sys
from collections.abc import Sequence

from loguru import logger

from jwt_cli.cli.commands import (
    DECODE,
    ENCODE,
    HELP,
    PARSER_BUILDERS,
    VALIDATE,
    overview_usage,
    program_name,
)
from jwt_cli.cli.output import render_error, render_json, render_token
from jwt_cli.config import Settings, get_settings
from jwt_cli.core.exceptions import JWTToolError
from jwt_cli.core.logging import setup_logging
from jwt_cli.models.options import DecodeOptions, EncodeOptions, ValidateOptions
from jwt_cli.services.token_service import TokenService


def build_options(command: str, args, settings: Settings) -> DecodeOptions | ValidateOptions | EncodeOptions:
    """Turn parsed arguments into the option model for a subcommand"""
    # Arguments are kept as raw bytes, exactly as given on the command line
    if command == DECODE:
        return DecodeOptions(token=os.fsencode(args.token), show_help=args.show_help)

    secret = os.fsencode(args.secret if args.secret is not None else settings.secret)

    if command == VALIDATE:
        return ValidateOptions(
            token=os.fsencode(args.token),
            secret=secret,
            allowed_algorithms=settings.allowed_algorithms_list,
            show_help=args.show_help,
        )

    return EncodeOptions(
        claims=os.fsencode(args.claims),
        secret=secret,
        algorithm=os.fsencode(args.algorithm).decode("utf-8", errors="replace"),
        show_help=args.show_help,
    )


def execute(
    command: str,
    options: DecodeOptions | ValidateOptions | EncodeOptions,
    settings: Settings,
    service: TokenService,
) -> None:
    """Run one operation and print its result"""
    if command == DECODE:
        contents = service.decode(options)
        render_json(contents.to_output(), indent=settings.indent)
    elif command == VALIDATE:
        contents = service.validate(options)
        render_json(contents.to_output(), indent=settings.indent)
    elif command == ENCODE:
        render_token(service.encode(options))


def main(argv: Sequence[str] | None = None, settings: Settings | None = None) -> int:
    """
    Entry point for one invocation

    Args:
        argv: Full argument vector including the program name (defaults to sys.argv)
        settings: Settings to use instead of reading the environment

    Returns:
        Process exit status: 0 on success or help, 1 on any token error
    """
    argv = list(sys.argv if argv is None else argv)
    settings = settings or get_settings()
    setup_logging(settings)

    prog = program_name(argv[0] if argv else None)
    command = argv[1].lower() if len(argv) > 1 else HELP

    if command not in PARSER_BUILDERS:
        print(overview_usage(prog))
        return 0

    parser = PARSER_BUILDERS[command](prog)
    # argparse reports flag errors and exits with status 2
    args = parser.parse_args(argv[2:])
    options = build_options(command, args, settings)

    if options.show_help:
        print(parser.format_help(), end="")
        return 0

    logger.debug(f"Running {command}")
    try:
        execute(command, options, settings, TokenService())
    except JWTToolError as e:
        logger.debug(f"{command} failed: {type(e).__name__}")
        render_error(e)
        return 1

    return 0


def run():
    """Console script entry point"""
    sys.exit(main())
