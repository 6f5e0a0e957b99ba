import click
import uvicorn
from bookcase.config import settings
from bookcase.sa.database import Database

@click.command()
@click.option('--host', default=None, help='Interface to bind (default: $BOOKCASE_HOST or 127.0.0.1)')
@click.option('--port', default=None, type=int, help='Port to listen on (default: $BOOKCASE_PORT or 8000)')
@click.pass_obj
def serve(database: Database, host: str, port: int):
    """Run the REST API"""
    from api.app import create_app

    host = host or settings.host
    port = port or settings.port
    click.echo(f"\nServing {database.connection_string} on http://{host}:{port}")
    uvicorn.run(create_app(database), host=host, port=port)
