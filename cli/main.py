# cli/main.py
import click
from bookcase.config import settings
from bookcase.logging_config import setup_logging
from bookcase.sa.database import Database
from .commands.db import db
from .commands.dev import dev
from .commands.events import events
from .commands.serve import serve

@click.group()
@click.option('--database-url', default=None, help='Database to use (default: $DATABASE_URL or sqlite:///bookcase.db)')
@click.option('--log-level', default=None, help='Logging level (default: $LOG_LEVEL or INFO)')
@click.pass_context
def cli(ctx, database_url: str, log_level: str):
    """Bookcase personal library CLI"""
    setup_logging(log_level or settings.log_level, settings.log_file)
    ctx.obj = Database(database_url)

cli.add_command(db)
cli.add_command(dev)
cli.add_command(events)
cli.add_command(serve)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
