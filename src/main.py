"""FastAPI app entry for vidstash."""
from src.config import settings
from src.interfaces.api.app import create_app

app = create_app(settings)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
