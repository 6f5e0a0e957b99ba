import click
from bookcase.sa.database import Database
from bookcase.sa.repositories import MutatedModelEventRepository

TYPE_COLORS = {
    'INSERTED': 'green',
    'UPDATED': 'yellow',
    'DELETED': 'red',
}

@click.group()
def events():
    """Audit trail commands"""
    pass

@events.command(name='list')
@click.option('--limit', default=None, type=int, help='Show at most this many events')
@click.pass_obj
def list_events(database: Database, limit: int):
    """Show insert/update/delete events, oldest first"""
    with database.get_db() as session:
        rows = MutatedModelEventRepository(session).list_events(limit=limit)
        if not rows:
            click.echo(click.style("No events recorded", fg='yellow'))
            return
        for event in rows:
            click.echo(
                click.style(f"{event.id:>5} ", fg='cyan') +
                click.style(event.created_at.strftime('%Y-%m-%d %H:%M:%S'), fg='blue') + " " +
                click.style(f"{event.type.value:<8}", fg=TYPE_COLORS[event.type.value]) + " " +
                event.model
            )
