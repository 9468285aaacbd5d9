"""
Argument parsers and usage text for each subcommand

Parsers are built per invocation, nothing is shared between runs.
"""
import argparse
import os
import sys

DECODE = "decode"
ENCODE = "encode"
VALIDATE = "validate"
HELP = "help"

EXAMPLE_JWT = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.eyJmb28iOiJiYXIifQ."
    "-fKGu6c4VNyGzGuzG1M0Cx87gyYFxM3-o2H_vRAnfVY"
)


def program_name(argv0: str | None = None) -> str:
    """Name the tool is invoked as, for usage text"""
    name = os.path.basename(argv0 or sys.argv[0] or "")
    if not name or name in ("__main__.py", "-c"):
        return "jwt-cli"
    return name


def _add_help_flag(parser: argparse.ArgumentParser):
    parser.add_argument("-h", "-help", "--help", dest="show_help", action="store_true",
                        help="Show this help and exit")


def build_decode_parser(prog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"{prog} decode",
        description="Displays a JWT's claims without performing any verification of them or the signature.",
        epilog=f"Example:\n  {prog} decode {EXAMPLE_JWT}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    _add_help_flag(parser)
    parser.add_argument("token", nargs="?", default="", metavar="jwt", help="The JWT to decode")
    return parser


def build_validate_parser(prog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"{prog} validate",
        description="Verifies a JWT's claims and signature.",
        epilog=f"Example:\n  {prog} validate --secret password {EXAMPLE_JWT}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-secret", "--secret", default=None, help="The signing secret")
    _add_help_flag(parser)
    parser.add_argument("token", nargs="?", default="", metavar="jwt", help="The JWT to validate")
    return parser


def build_encode_parser(prog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"{prog} encode",
        description="Encodes a JWT.",
        epilog=f"Example:\n  {prog} encode --alg HS256 --secret password '{{\"foo\":\"bar\"}}'",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-secret", "--secret", default=None, help="The signing secret")
    parser.add_argument("-alg", "--alg", dest="algorithm", default="", help="The algorithm")
    _add_help_flag(parser)
    parser.add_argument("claims", nargs="?", default="", metavar="json-encoded-payload",
                        help="The claims to encode, as a JSON object")
    return parser


PARSER_BUILDERS = {
    DECODE: build_decode_parser,
    VALIDATE: build_validate_parser,
    ENCODE: build_encode_parser,
}


def overview_usage(prog: str) -> str:
    """Top-level usage listing every subcommand"""
    return (
        "Encodes, decode and validate JWTs.\n"
        "\n"
        f"{prog} encode [OPTIONS] <json-encoded-payload>\t Encodes a JWT\n"
        f"{prog} decode [OPTIONS] <jwt>\t\t\t Decodes a JWT, without validating it\n"
        f"{prog} validate [OPTIONS] <jwt>\t\t\t Decodes & verifies a JWT's claims and signature\n"
        "\n"
        f"Use the {prog} <cmd> --help for more information"
    )
