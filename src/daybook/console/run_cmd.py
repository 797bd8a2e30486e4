"""daybook run: start the interactive diary console."""

from __future__ import annotations

import click


@click.command()
@click.option("--config", "config_file", type=click.Path(dir_okay=False), help="YAML or JSON config file.")
@click.option("--no-seed", is_flag=True, help="Start without the demo authors and entries.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override the configured log level.",
)
def run(config_file: str | None, no_seed: bool, log_level: str | None) -> None:
    """Open the diary in the terminal."""
    from loguru import logger

    from daybook.console.common import configure_logging, create_registries, load_config
    from daybook.console.seed import ensure_admin, seed_demo_data
    from daybook.console.session import DiarySession
    from daybook.core.exceptions import DaybookError

    try:
        config = load_config(config_file)
        configure_logging(config, log_level)
        entries, authors = create_registries(config)
        ensure_admin(
            authors,
            display_name=config.get("admin.display_name", "admin"),
            password=str(config.get("admin.password", "admin123")),
        )
        if config.get_bool("seed.demo_data", True) and not no_seed:
            seed_demo_data(authors, entries)
    except DaybookError as e:
        raise click.ClickException(str(e)) from e

    logger.debug(f"Starting session with {len(authors)} author(s) and {len(entries)} entries")
    DiarySession(entries, authors).start()
