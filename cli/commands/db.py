import click
from bookcase.sa.database import Database

@click.group()
def db():
    """Database schema commands"""
    pass

@db.command()
@click.pass_obj
def init(database: Database):
    """Create any missing tables"""
    database.init_db()
    click.echo(click.style("Tables created", fg='green'))

@db.command()
@click.confirmation_option(prompt='Drop every table and all data?')
@click.pass_obj
def drop(database: Database):
    """Drop all tables"""
    database.drop_all()
    click.echo(click.style("Tables dropped", fg='yellow'))
