from pathlib import Path


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

# Log directory
LOG_DIR = BASE_DIR / 'logs'

# Optional dotenv file with THEATRE_SIM_* overrides
ENV_PATH = BASE_DIR / '.env'
