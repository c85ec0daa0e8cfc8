"""
Palindromo CLI Interface
Provides commands for checking text, normalizing it and running the live checker
"""
import sys

import click
from rich.console import Console
from rich.table import Table

from ..core.checker import ASCII, MODES, check as check_text, normalize, is_palindrome
from ..core.logger import PalindromoLogger
from ..core.config import Config, DISPLAY_KEYS, parse_initial_result


# Initialize rich console for pretty output
console = Console()


def _parse_setting(pair: str):
    """Split KEY=VALUE and coerce the value for its key"""
    if "=" not in pair:
        raise click.BadParameter(f"Expected KEY=VALUE, got '{pair}'", param_hint="--set")

    key, value = pair.split("=", 1)
    key = key.strip()
    if key not in DISPLAY_KEYS:
        raise click.BadParameter(
            f"Unknown setting '{key}'. Valid: {', '.join(DISPLAY_KEYS)}", param_hint="--set"
        )

    if key == "initial_result":
        try:
            return key, parse_initial_result(value)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--set")

    if key == "normalization" and value not in MODES:
        raise click.BadParameter(
            f"Invalid normalization '{value}'. Valid: {', '.join(MODES)}", param_hint="--set"
        )

    return key, value


@click.group()
@click.pass_context
def cli(ctx):
    """Palindromo - live palindrome checker"""
    ctx.ensure_object(dict)

    # Load configuration
    config = Config()
    ctx.obj['config'] = config

    ctx.obj['logger'] = PalindromoLogger(log_dir=str(config.get_log_dir()), console_output=False)

    for warning in config.warnings:
        ctx.obj['logger'].warning(warning)
        console.print(f"[yellow]Warning:[/yellow] {warning}")


@cli.command()
@click.argument('texts', nargs=-1)
@click.option('--ascii', 'ascii_only', is_flag=True, help='Only consider ASCII letters and digits')
@click.option('--plain', is_flag=True, help='Print one result line per input instead of a table')
@click.option('--exit-code', is_flag=True, help='Exit with status 1 if any input is not a palindrome')
@click.pass_context
def check(ctx, texts, ascii_only, plain, exit_code):
    """Check whether each TEXT is a palindrome (reads stdin lines when no TEXT or '-')"""
    config = ctx.obj['config']
    logger = ctx.obj['logger']
    mode = ASCII if ascii_only else config.normalization

    if not texts or texts == ('-',):
        texts = tuple(line.rstrip("\r\n") for line in sys.stdin)

    if not texts:
        console.print("[yellow]Nothing to check[/yellow]")
        return

    all_palindromes = True

    if plain:
        for text in texts:
            result = is_palindrome(text, mode)
            logger.log_check(text, result)
            all_palindromes = all_palindromes and result
            click.echo(config.format_result(result))
    else:
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Input", style="white")
        table.add_column("Normalized", style="dim")
        table.add_column(config.prompt, justify="center")

        for text in texts:
            normalized, result = check_text(text, mode)
            logger.log_check(text, result)
            all_palindromes = all_palindromes and result

            color = "green" if result else "red"
            table.add_row(text, normalized, f"[{color}]{config.result_label(result)}[/{color}]")

        console.print(table)

    if exit_code and not all_palindromes:
        ctx.exit(1)


@cli.command(name='normalize')
@click.argument('text')
@click.option('--ascii', 'ascii_only', is_flag=True, help='Only keep ASCII letters and digits')
@click.pass_context
def normalize_cmd(ctx, text, ascii_only):
    """Print the normalized comparison form of TEXT"""
    mode = ASCII if ascii_only else ctx.obj['config'].normalization
    click.echo(normalize(text, mode))


@cli.command()
@click.pass_context
def tui(ctx):
    """Launch the live palindrome checker"""
    from .tui.run import run

    try:
        run(ctx.obj['config'])
    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {str(e)}\n")
        ctx.obj['logger'].error(f"TUI failed: {str(e)}")
        raise click.Abort()


@cli.command(name='config')
@click.option('--set', 'settings', multiple=True, metavar='KEY=VALUE',
              help='Persist a display setting (can be specified multiple times)')
@click.pass_context
def config_cmd(ctx, settings):
    """Show or change display settings"""
    config = ctx.obj['config']
    logger = ctx.obj['logger']

    if settings:
        changes = dict(_parse_setting(pair) for pair in settings)
        try:
            config.set_display_config(**changes)
        except (ValueError, OSError) as e:
            console.print(f"\n[bold red]Error:[/bold red] {str(e)}\n")
            logger.error(f"Saving settings failed: {str(e)}")
            raise click.Abort()

        logger.info(f"Settings updated: {', '.join(sorted(changes))}")
        console.print(f"[bold green]✓ Saved to[/bold green] {config.get_settings_path()}")

    table = Table(title="Display Settings", show_header=True, header_style="bold")
    table.add_column("Setting", style="yellow")
    table.add_column("Value", style="white")

    for key, value in config.get_display_config().items():
        table.add_row(key, "[dim]none[/dim]" if value is None else str(value))

    console.print(table)


def main():
    """Entry point"""
    cli(obj={})


if __name__ == '__main__':
    main()
