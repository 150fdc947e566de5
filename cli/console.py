"""
HillCipher Command Line Interface

Usage:
    python -m hillcipher <command> [args]

Commands:
    cipher      Cipher a given source text
    decipher    Decipher a given cipher text

Examples:
    python -m hillcipher cipher -k FJCRXLUDN -s CODIGO -f H
    python -m hillcipher decipher -k FJCRXLUDN -s WLPGSE

The HILL_CIPHER_NAMESPACE environment variable supplies a custom namespace
when --namespace is not given.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, TextIO

import colorama
from colorama import Fore, Style

from ..cipher_core.hill_processor import HillProcessor, Report
from ..errors import ProcessingError

logger = logging.getLogger(__name__)

NAMESPACE_ENV_VAR = 'HILL_CIPHER_NAMESPACE'


def _letter(value: str) -> str:
    """argparse type for a single character argument."""
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"expected a single character, got '{value}'")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the cipher and decipher commands."""
    parser = argparse.ArgumentParser(
        prog='hillcipher',
        description="Cipher and decipher text using the Hill's cipher method",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    commands = parser.add_subparsers(dest='command', required=True)

    cipher_cmd = commands.add_parser('cipher', help='Cipher a given source text')
    cipher_cmd.add_argument('-k', '--key', required=True,
                            help='Key to cipher the source text')
    cipher_cmd.add_argument('-s', '--source', required=True,
                            help='Source text to cipher')
    cipher_cmd.add_argument('-f', '--fill-letter', required=True, type=_letter,
                            help="Source text's fill letter")
    cipher_cmd.add_argument('-n', '--namespace',
                            help='Custom namespace for the base of the algorithm')

    decipher_cmd = commands.add_parser('decipher', help='Decipher a given source text')
    decipher_cmd.add_argument('-k', '--key', required=True,
                              help='Key to decipher the source text')
    decipher_cmd.add_argument('-s', '--source', required=True,
                              help='Cipher source text')
    decipher_cmd.add_argument('-f', '--fill-letter', type=_letter,
                              help="Known source text's fill letter")
    decipher_cmd.add_argument('-n', '--namespace',
                              help='Known namespace used to cipher the source text')

    return parser


def format_report(report: Report) -> str:
    """Format a Report as the colorized block printed to the console."""
    def label(text: str, color: str = Fore.YELLOW) -> str:
        return f"{color}{text}{Style.RESET_ALL}"

    namespace = report.def_namespace if report.def_namespace is not None else "Default namespace"
    return "\n".join([
        f"  {label('Used key')}: {report.used_key}",
        f"  {label('Source text')}: {report.source_txt}",
        f"  {label('Result text', Fore.BLUE)}: {report.result_txt}",
        f"  {label('Filled?')}: {str(report.filled).lower()}",
        f"  {label('Namespace')}: {namespace}",
    ])


def print_error(error: Exception, stream: Optional[TextIO] = None) -> None:
    """Print an error message with a bold red prefix."""
    stream = stream if stream is not None else sys.stderr
    print(f"{Style.BRIGHT}{Fore.RED}error{Fore.RESET}: {error}{Style.RESET_ALL}", file=stream)


def run(argv: Optional[List[str]] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None) -> int:
    """
    Run the application.

    Args:
        argv: Command line arguments (default: sys.argv[1:])
        stdout: Stream for the report (default: sys.stdout)
        stderr: Stream for errors (default: sys.stderr)

    Returns:
        The process exit code
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    namespace = args.namespace if args.namespace is not None else os.environ.get(NAMESPACE_ENV_VAR)
    processor = HillProcessor(
        key=args.key,
        source=args.source,
        fill_letter=args.fill_letter,
        namespace=namespace,
    )

    try:
        report = processor.cipher() if args.command == 'cipher' else processor.decipher()
    except ProcessingError as e:
        logger.debug("%s process failed", args.command, exc_info=True)
        print_error(e, stderr)
        return 1

    print(format_report(report), file=stdout if stdout is not None else sys.stdout)
    return 0


def main() -> None:
    """Console script entry point."""
    colorama.just_fix_windows_console()
    sys.exit(run())


if __name__ == "__main__":
    main()
