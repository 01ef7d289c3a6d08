import logging
import os

from config.constant import DEFAULT_LOG_FILE

LOG_FILE = os.environ.get("SIMPLECHAT_LOG_FILE", DEFAULT_LOG_FILE)

# Make sure the log directory exists
log_dir = os.path.dirname(LOG_FILE)
if log_dir:
    os.makedirs(log_dir, exist_ok=True)

# Log to a file only, stdout belongs to the conversation
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    handlers=[
        logging.FileHandler(LOG_FILE, encoding="utf-8")
    ]
)

logger = logging.getLogger("simple_chat")
