import os
from dotenv import load_dotenv
from pathlib import Path
import bittensor as bt

env_path = Path(__file__).parents[1] / '.env'
load_dotenv(dotenv_path=env_path)

# Network selection (see warpscore.networks.registry for supported ids)
NETWORK_ID = int(os.getenv('NETWORK_ID', '1'))

# Accounts scoring strictly below this weight are ignored
MIN_ACCOUNT_WEIGHT = float(os.getenv('MIN_ACCOUNT_WEIGHT', '0.01'))

# Report output
OUTPUT_DIR = Path(os.getenv('OUTPUT_DIR', str(Path(__file__).resolve().parents[2] / "output")))
REPORT_LABEL = "teamScores"
EVENTS_RETENTION_SIZE = 2 * 1024 * 1024  # 2 MB

# Team indexer (reads team membership from the control contract)
TEAM_INDEXER_URL = os.getenv('TEAM_INDEXER_URL', 'http://localhost:8080')
TEAM_SOURCE_TIMEOUT = float(os.getenv('TEAM_SOURCE_TIMEOUT', '30'))
TEAM_INDEXER_API_KEY = os.getenv('TEAM_INDEXER_API_KEY')

# Log out all non-sensitive config variables
bt.logging.info(f"NETWORK_ID: {NETWORK_ID}")
bt.logging.info(f"MIN_ACCOUNT_WEIGHT: {MIN_ACCOUNT_WEIGHT}")
bt.logging.info(f"OUTPUT_DIR: {OUTPUT_DIR}")
bt.logging.info(f"TEAM_INDEXER_URL: {TEAM_INDEXER_URL}")
bt.logging.info(f"TEAM_SOURCE_TIMEOUT: {TEAM_SOURCE_TIMEOUT}s")
