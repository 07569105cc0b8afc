import uvicorn
from dotenv import load_dotenv

from infrastructure.services import get_settings
from server import server

load_dotenv()

server_app = server.handler


def main():
    """Serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        server_app,
        host=settings.server.HOST,
        port=settings.server.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
