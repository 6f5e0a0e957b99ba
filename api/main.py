# api/main.py
from api.app import create_app

app = create_app()

# Main execution
if __name__ == "__main__":
    import uvicorn
    from bookcase.config import settings

    uvicorn.run("api.main:app", host=settings.host, port=settings.port)
