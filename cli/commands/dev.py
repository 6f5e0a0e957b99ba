import click
from bookcase.sa.database import Database
from bookcase.services import DevModePopulateService, DevModeDepopulateService

@click.group()
def dev():
    """Development helper commands"""
    pass

@dev.command()
@click.pass_obj
def populate(database: Database):
    """Load the Flintstones / Rubbles sample library"""
    database.init_db()
    session = database.get_session()
    try:
        DevModePopulateService(session).populate()
        click.echo(click.style("\nSample data loaded", fg='green'))
    except Exception as e:
        click.echo(click.style(f"\nError loading sample data: {e}", fg='red'))
        raise click.Abort()
    finally:
        session.close()

@dev.command()
@click.pass_obj
def depopulate(database: Database):
    """Delete all rows from every table"""
    database.init_db()
    session = database.get_session()
    try:
        counts = DevModeDepopulateService(session).depopulate()
    finally:
        session.close()

    click.echo("\n" + click.style("Removed:", fg='blue'))
    for name, count in counts.items():
        click.echo(click.style(f"{name}: ", fg='blue') + click.style(str(count), fg='cyan'))
