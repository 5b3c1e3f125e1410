import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# === Base project path ===
PROJECT_ROOT = Path(__file__).resolve().parents[1]

# === Common directories ===
CONFIG_DIR = PROJECT_ROOT / "config"
LOG_DIR = Path(os.getenv("HERDSYNC_LOG_DIR", str(PROJECT_ROOT)))

# === Bundled data files ===
CONSTANTS_PATH = CONFIG_DIR / "constants.json"
PROTOCOLS_PATH = CONFIG_DIR / "protocols.json"

# === Default log file path ===
LOG_PATH = LOG_DIR / "herdsync.log"
