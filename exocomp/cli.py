"""CLI interface for Exocomp."""

import logging
import sys
import time
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from exocomp import __version__
from exocomp.backend import ApiBackend, EntityStore
from exocomp.bot import Bot
from exocomp.config import ConfigManager, Settings, SitelinkPropertySyncConfig, load_settings
from exocomp.errors import InitializationError
from exocomp.logger import configure_logging
from exocomp.modules import AVAILABLE_MODULES, RunStatistics, SitelinkPropertySync
from exocomp.utils import format_duration

console = Console()
stderr_console = Console(file=sys.stderr)

RULE = "=" * 80


def build_store(
    config_manager: ConfigManager,
    settings: Settings,
    module_config: SitelinkPropertySyncConfig,
) -> EntityStore:
    """Connect to the Wikibase instance and return the entity store."""
    wbi = config_manager.get_wikibase_integrator(settings)
    return ApiBackend(wbi, summary=module_config.summary, namespace=module_config.namespace)


def report_stats(logger: logging.Logger, stats: RunStatistics, elapsed: float) -> None:
    """Log the statistics block and print the summary table."""
    logger.info("")
    logger.info(RULE)
    logger.info("Execution Statistics")
    logger.info(RULE)
    logger.info(f"Items checked:  {stats.checked}")
    logger.info(f"Items synced:   {stats.synced}")
    logger.info(f"Items skipped:  {stats.skipped}")
    logger.info(f"Errors:         {stats.errors}")
    logger.info(f"Execution time: {format_duration(elapsed)}")
    logger.info(RULE)

    table = Table(title="Sync Summary")
    table.add_column("Checked", style="cyan")
    table.add_column("Synced", style="green")
    table.add_column("Skipped", style="yellow")
    table.add_column("Errors", style="red")
    table.add_row(str(stats.checked), str(stats.synced), str(stats.skipped), str(stats.errors))

    console.print(Panel(
        table,
        title="Success" if not stats.errors else "Completed with errors",
        border_style="green" if not stats.errors else "yellow",
    ))


@click.group()
@click.version_option(version=__version__)
def cli():
    """Exocomp - a maintenance bot for Wikibase instances"""
    pass


@cli.command(name="sync")
@click.option(
    '--config', '-c',
    'config_path',
    type=click.Path(path_type=Path),
    default='config.yml',
    help='Path to project config'
)
@click.option('--dry-run', is_flag=True, help='Run without making changes')
@click.option('--verbose', is_flag=True, help='Enable verbose debug output')
@click.option('--debug', is_flag=True, help='Enable wiki client debug output')
def sync(config_path: Path, dry_run: bool, verbose: bool, debug: bool) -> None:
    """Synchronize item sitelinks with a property."""
    start_time = time.monotonic()
    module_name = SitelinkPropertySync.name

    try:
        settings = load_settings()
        logger = configure_logging(
            settings.log_path,
            'debug' if verbose else settings.log_level,
            debug=debug,
            console=console,
        )
    except (InitializationError, OSError) as e:
        stderr_console.print(f"[red]✗ ERROR: {e}[/red]")
        raise click.Abort()

    logger.info(RULE)
    logger.info("Exocomp Bot - Sitelink Property Sync Module")
    logger.info(RULE)
    logger.info(f"Start time: {datetime.now():%Y-%m-%d %H:%M:%S}")
    if dry_run:
        logger.warning("DRY-RUN MODE: Changes will NOT be written to the wiki")
    if debug:
        logger.debug("DEBUG MODE: Enabling wiki client debug output")

    try:
        config_manager = ConfigManager(config_path)
        module_config = config_manager.module_config(module_name)

        logger.info(f"Connecting to {settings.wikibase_url} as {settings.bot_username}...")
        store = build_store(config_manager, settings, module_config)
        logger.info(f"Bot authenticated as: {settings.bot_username}")

        bot = Bot(logger)
        module = AVAILABLE_MODULES[module_name](store, module_config, dry_run=dry_run, logger=logger)
        bot.register_module(module_name, module)
        logger.info(f"Configuration: {module_config.model_dump_json()}")
    except InitializationError as e:
        logger.error(f"Initialization failed: {e}")
        raise click.Abort()
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        raise click.Abort()

    logger.info("Starting synchronization process...")
    try:
        stats = bot.run_module(module_name)
    except KeyboardInterrupt:
        logger.warning("Interrupted, statistics cover the items processed so far")
        report_stats(logger, module.stats, time.monotonic() - start_time)
        raise click.Abort()
    except Exception as e:
        logger.exception(f"Module execution failed: {e}")
        raise click.Abort()

    report_stats(logger, stats, time.monotonic() - start_time)
    logger.info("Bot completed successfully")
    logger.info(f"End time: {datetime.now():%Y-%m-%d %H:%M:%S}")


@cli.command(name="modules")
def modules() -> None:
    """List the available bot modules."""
    table = Table(title="Modules")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Version", style="green")
    table.add_column("Author")

    for name, module_class in AVAILABLE_MODULES.items():
        metadata = module_class.METADATA
        table.add_row(name, metadata.description, metadata.version, metadata.author)

    console.print(table)


if __name__ == "__main__":
    cli()
