import uvicorn
from dotenv import load_dotenv

from src.config import get_config

load_dotenv()


if __name__ == "__main__":
    config = get_config()
    uvicorn.run(
        "src.main:app",
        host=config.api.host,
        port=config.api.port,
        log_config=None,  # logging is configured by the app on startup
    )
