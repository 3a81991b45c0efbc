import uvicorn

from src.api import create_app
from src.config import configure_logging, get_config

config = get_config()
configure_logging(config.logging)

app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
