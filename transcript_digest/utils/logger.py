import os
import sys
import logging

from transcript_digest.config import config

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
logging_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), "logs")
logging_path = os.path.join(logging_dir, "transcriptdigest.log")
if not os.path.exists(logging_dir):
    os.makedirs(logging_dir)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format=logging_str,
    handlers=[
        logging.FileHandler(logging_path),
        logging.StreamHandler(sys.stdout)
    ]
)

logging = logging.getLogger('transcriptdigest')
