import sys

import uvicorn
from loguru import logger

from chatbot_server.config import settings


def main() -> None:
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL)
    logger.info(f"Serving SimpleChatBot on http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(
        "chatbot_server.app:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
