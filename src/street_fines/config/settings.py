import os
import yaml
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_CONFIG_PATH = Path(__file__).parent / "settings.yaml"
CONFIG_PATH = Path(os.getenv("STREET_FINES_CONFIG") or DEFAULT_CONFIG_PATH)


# Loading CSV columns and pipeline settings from YAML file
def load_config(file_path):
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Settings file not found: {file_path}")
    with open(file_path, "r", encoding="utf-8") as file:
        return yaml.safe_load(file) or {}


SETTINGS = load_config(CONFIG_PATH)

# Where the address and fine live in the parking tickets CSV
CSV_COLUMNS = {
    "address": SETTINGS.get("csv", {}).get("address_column", "location2"),
    "fine": SETTINGS.get("csv", {}).get("fine_column", "set_fine_amount"),
}

# Worker pool and chunking, plus how many streets to report
PIPELINE_CONFIG = {
    "workers": 4,
    "chunksize": 100_000,
    "top_n": 20,
    **SETTINGS.get("pipeline", {}),
}

DATA_STORAGE = {
    "raw": "data/raw/",
    "processed": "data/processed/",
    "output_file": "street_totals.csv",
    **SETTINGS.get("data_storage", {}),
}

LOGGING_CONFIG = {
    "level": "INFO",
    **SETTINGS.get("logging", {}),
}
