"""Command-line entrypoint for hashing files."""
from __future__ import annotations

import logging
import os
from typing import Sequence

import click

from filehash import __version__
from filehash.config import configure_logging, settings
from filehash.errors import FileHashError
from filehash.models import HashAlgorithm, HashOptions
from filehash.utils.formatting import format_error, format_result
from filehash.utils.hashing import compute_digest
from filehash.utils.validation import validate_file

logger = logging.getLogger(__name__)

VERSION_MESSAGE = (
    "%(prog)s %(version)s\n"
    "A simple file hash calculator supporting MD5, SHA1, and SHA256"
)

EXAMPLES = """\b
Examples:
  filehash file.txt                # Calculate MD5 hash
  filehash -s file.txt             # Calculate SHA1 hash
  filehash -S file.txt             # Calculate SHA256 hash
  filehash -a file.txt             # Calculate all hash types
  filehash *.txt                   # Calculate MD5 for all .txt files
"""


class LeadingFlagsCommand(click.Command):
    """Only parse options that appear before the first file argument.

    Scanning stops at the first token that is not exactly a known flag.
    That token and everything after it are handed to click as positional
    arguments, so ``file.txt -s`` hashes a file literally named ``-s``.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        known = set()
        for param in self.get_params(ctx):
            if isinstance(param, click.Option):
                known.update(param.opts)
                known.update(param.secondary_opts)

        split = 0
        while split < len(args) and args[split] in known:
            split += 1
        return super().parse_args(ctx, [*args[:split], "--", *args[split:]])


def report_error(error: FileHashError) -> None:
    """Write an error line to stderr, keeping undecodable file name bytes as given."""
    click.echo(os.fsencode(format_error(error)), err=True)


def hash_file(path: str, algorithms: Sequence[HashAlgorithm], chunk_size: int) -> bool:
    """Validate and hash one file, printing each digest as it completes.

    Returns False if validation or any digest pass failed.
    """
    try:
        validate_file(path)
    except FileHashError as exc:
        logger.debug("Skipping %s: %s", path, exc)
        report_error(exc)
        return False

    ok = True
    for algorithm in algorithms:
        try:
            result = compute_digest(path, algorithm, chunk_size)
        except FileHashError as exc:
            logger.debug("%s pass failed for %s: %s", algorithm.display_name, path, exc)
            report_error(exc)
            ok = False
            continue
        click.echo(format_result(result), nl=False)
    return ok


def run(options: HashOptions, chunk_size: int | None = None) -> int:
    """Hash every file in ``options`` and return the process exit code."""

    chunk_size = chunk_size or settings.chunk_size
    algorithms = options.algorithms
    exit_code = 0
    for path in options.files:
        if not hash_file(path, algorithms, chunk_size):
            exit_code = 1
    logger.debug("Processed %d file(s), exit code %d", len(options.files), exit_code)
    return exit_code


@click.command(
    "filehash",
    cls=LeadingFlagsCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=EXAMPLES,
)
@click.version_option(__version__, "-v", "--version", prog_name="filehash", message=VERSION_MESSAGE)
@click.option("-m", "--md5", "algorithm", flag_value=HashAlgorithm.MD5.value,
              help="Calculate MD5 hash (default)")
@click.option("-s", "--sha1", "algorithm", flag_value=HashAlgorithm.SHA1.value,
              help="Calculate SHA1 hash")
@click.option("-S", "--sha256", "algorithm", flag_value=HashAlgorithm.SHA256.value,
              help="Calculate SHA256 hash")
@click.option("-a", "--all", "all_algorithms", is_flag=True, default=False,
              help="Calculate all hash types")
@click.argument("files", nargs=-1, metavar="FILE...")
@click.pass_context
def main(ctx: click.Context, algorithm: str | None, all_algorithms: bool, files: tuple[str, ...]) -> None:
    """Calculate hash values for files."""

    configure_logging(settings.log_level)

    if not files:
        click.echo("Error: No files specified", err=True)
        click.echo(ctx.get_help())
        ctx.exit(1)

    options = HashOptions(
        algorithm=HashAlgorithm(algorithm or HashAlgorithm.MD5.value),
        all_algorithms=all_algorithms,
        files=files,
    )
    ctx.exit(run(options))


if __name__ == "__main__":
    main()
