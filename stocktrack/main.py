from stocktrack.config import Settings, get_settings
from stocktrack.core.logging import setup_logging
from stocktrack.factory import create_app

setup_logging()
settings: Settings = get_settings()

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "stocktrack.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


__all__ = ["app"]
