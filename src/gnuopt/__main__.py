## gnuopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# gnuopt — POSIX getopt with GNU long options, as a library and a getopt(1) style command.
#

import sys
from dataclasses import dataclass

import click

from .errors import GetoptSpecError
from .runtime import Resolver
from .formatting import write_without_ansi, format_command_line, format_json, format_error


@dataclass(frozen=True)
class RuntimeConfig:
    verbose: int
    posix: bool
    long_only: bool
    json: bool
    plain: bool


def _split_long_specs(values: tuple[str, ...]) -> list[str]:
    return [name.strip() for value in values for name in value.split(',') if name.strip()]


@click.command(context_settings={'allow_interspersed_args': False})
@click.option('--options', '-o', 'short_spec', default='', help='Short option characters, `:` for a required and `::` for an optional argument.')
@click.option('--longoptions', '-l', 'long_specs', multiple=True, help='Comma-separated long option names, `=` or `==` suffixed for arguments.')
@click.option('--alternative', '-a', is_flag=True, help='Allow long options to start with a single prefix character.')
@click.option('--posix', is_flag=True, help='Stop option scanning at the first positional argument.')
@click.option('--json', 'as_json', is_flag=True, help='Print the result as a JSON object.')
@click.option('--verbose', '-v', default=0, count=True, help='Trace each token as it is resolved.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, short_spec: str, long_specs: tuple[str, ...], alternative: bool, posix: bool,
        as_json: bool, verbose: int, plain: bool, tokens: tuple[str, ...]) -> None:
    env_posix = Resolver.from_environ().posix
    config = RuntimeConfig(verbose=verbose, posix=posix or env_posix, long_only=alternative, json=as_json, plain=plain)

    if config.plain:
        writer = write_without_ansi(sys.stdout.write)
        sys.stdout.write, sys.stderr.write = writer, writer

    resolver = Resolver(posix=config.posix, verbosity=config.verbose)
    try:
        outcome = resolver.resolve(list(tokens), short_spec, _split_long_specs(long_specs), long_only=config.long_only)
    except GetoptSpecError as exc:
        print(f"\033[30;43m SPEC ERROR. \033[0m {exc}", file=sys.stderr)
        ctx.exit(2)

    if config.json:
        print(format_json(outcome))
    elif outcome.ok:
        print(format_command_line(outcome))

    if not outcome.ok:
        print(format_error(outcome), file=sys.stderr)
        ctx.exit(1)
    ctx.exit(0)


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='gnuopt')


if __name__ == "__main__":
    main()
