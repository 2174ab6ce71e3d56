# talentconnect/config.py
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# --- Load env from talentconnect/.env OR .env (whichever exists) ---
root = Path(__file__).resolve().parents[1]          # project root
package_env = root / "talentconnect" / ".env"
root_env = root / ".env"
if package_env.exists():
    load_dotenv(package_env)
elif root_env.exists():
    load_dotenv(root_env)

# === 🪵 Logging ===
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# === 🔎 Result caps ===
SEARCH_LIMIT = int(os.getenv("SEARCH_LIMIT", "50"))
MATCH_LIMIT = int(os.getenv("MATCH_LIMIT", "25"))

# === 🧰 Skill normalization limits ===
MAX_SKILLS = int(os.getenv("MAX_SKILLS", "20"))
MAX_SKILL_LENGTH = int(os.getenv("MAX_SKILL_LENGTH", "50"))

# === 📊 Stats ===
TOP_SKILLS_LIMIT = int(os.getenv("TOP_SKILLS_LIMIT", "10"))
TOP_SKILLS_SCAN = int(os.getenv("TOP_SKILLS_SCAN", "10"))  # skills per candidate counted


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the process-wide logging format. Call once from the hosting app."""
    logging.basicConfig(
        level=(level or LOG_LEVEL),
        format=LOG_FORMAT,
    )
