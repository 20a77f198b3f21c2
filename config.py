import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
TEMPLATES_DIR = os.getenv(
    "TEMPLATES_DIR", str(Path(__file__).resolve().parent / "templates")
)
