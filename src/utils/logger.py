import os
from dotenv import load_dotenv, find_dotenv
from loguru import logger  # Import Loguru's logger for easy logging

load_dotenv(find_dotenv())
LOG_FILE = os.environ.get("LOG_FILE", "emoji_search.log")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Add a log file where all log messages will be stored
logger.add(
    LOG_FILE,            # Name of the log file
    level=LOG_LEVEL,     # Minimum log level to record (INFO, WARNING, ERROR)
    format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
)
