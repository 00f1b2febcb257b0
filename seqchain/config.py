import os
from pathlib import Path

# --- Path Configuration ---
# Use the SEQCHAIN_HOME env var for the project root, with a fallback.
# Default corpus and model locations are resolved from here.
PROJECT_ROOT = Path(os.environ.get('SEQCHAIN_HOME', Path(__file__).parent.parent))
TRAINING_DATA_DIR = PROJECT_ROOT / 'training_data'
CORPUS_SOURCE_DIR = TRAINING_DATA_DIR / 'sources'
DEFAULT_CORPUS_PATH = TRAINING_DATA_DIR / 'corpus.txt'
DEFAULT_MODEL_PATH = TRAINING_DATA_DIR / 'markov_model.pkl'

# --- Chain Configuration ---
DEFAULT_ORDER = 3         # Tokens per predictor
DEFAULT_MODE = 'names'    # 'names' feeds characters, 'words' feeds words

# --- Generation Configuration ---
DEFAULT_MAX_LENGTH = 12
DEFAULT_COUNT = 10

# --- Logging ---
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
