import os

from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Logger Constants
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
SERVICE_NAME: str = os.getenv("FIFO_SEMAPHORE_SERVICE_NAME", "fifo-semaphore")
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> <blue>[{level}]</blue> "
    "<cyan>{extra[logger_name]}</cyan> - <level>{message}</level>"
)
