"""Configuration management for the Medication Handout application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from handout.utilities.constants import DEFAULT_DATE_FORMAT

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Date shown at the top of the handout
DATE_FORMAT: Final[str] = os.getenv('DATE_FORMAT', DEFAULT_DATE_FORMAT)

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = BASE_DIR / 'data'
STATIC_DIR: Final[Path] = BASE_DIR / 'static'
IMAGES_DIR: Final[Path] = BASE_DIR / 'images'
TEMPLATES_DIR: Final[Path] = BASE_DIR / 'templates'

# Catalog source: a local JSON file or an http(s) URL
MEDICATIONS_SOURCE: Final[str] = os.getenv('MEDICATIONS_SOURCE', str(DATA_DIR / 'medications.json'))
# Local key-value store holding the handout draft
DRAFT_STORE_FILE: Final[Path] = Path(os.getenv('DRAFT_STORE_FILE', str(DATA_DIR / 'local_storage.json')))
