"""
Saving and loading trained chains.

Two formats, picked by file suffix:
- `.json`: predictor length plus, per predictor, its ordered
  (cumulative_weight, outcome) entries and total. Tokens must be JSON values.
- anything else: a pickle of the MarkovChain object.

Both restore the exact cumulative weights, so a loaded chain keeps
recording and sampling as if it had never been saved.
"""
import json
import logging
import pickle
from pathlib import Path

from .distribution import Distribution
from .markov_chain import MarkovChain
from .predictor import Predictor

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def chain_to_dict(chain):
    return {
        "version": FORMAT_VERSION,
        "predictor_length": chain.predictor_length,
        "predictors": [
            {
                "predictor": list(predictor),
                "total": dist.total,
                "entries": [[weight, outcome] for weight, outcome in dist.entries()],
            }
            for predictor, dist in chain.items()
        ],
    }


def chain_from_dict(data, rng=None, seed=None):
    try:
        version = data.get("version")
        if version != FORMAT_VERSION:
            raise ValueError(f"Unsupported chain format version {version!r}, expected {FORMAT_VERSION}")
        predictor_length = data["predictor_length"]
        if isinstance(predictor_length, bool) or not isinstance(predictor_length, int):
            raise ValueError(f"Predictor length must be an integer, got {predictor_length!r}")

        chain = MarkovChain(predictor_length, rng=rng, seed=seed)
        for item in data["predictors"]:
            predictor = Predictor(item["predictor"])
            if predictor in chain:
                raise ValueError(f"Duplicate predictor {predictor!r}")
            dist = Distribution.from_entries(item["entries"], item["total"])
            chain._restore(predictor, dist)
    except (AttributeError, KeyError, TypeError) as e:
        raise ValueError(f"Malformed chain data: {e!r}") from e
    return chain


def save_chain(chain, path):
    """Writes `chain` to `path`, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == '.json':
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(chain_to_dict(chain), f)
    else:
        with open(path, 'wb') as f:
            pickle.dump(chain, f)
    logger.debug(f"Saved chain with {len(chain)} predictors to {path}")


def load_chain(path, rng=None, seed=None):
    """
    Reads a chain written by `save_chain`.

    `rng` and `seed` only apply to JSON files; a pickled chain keeps the
    generator it was saved with unless `rng` is given.

    Raises:
        ValueError: If the file doesn't hold a valid MarkovChain.
    """
    path = Path(path)
    if path.suffix == '.json':
        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"{path} is not valid JSON: {e}") from e
        chain = chain_from_dict(data, rng=rng, seed=seed)
    else:
        with open(path, 'rb') as f:
            chain = pickle.load(f)
        if not isinstance(chain, MarkovChain):
            raise ValueError('Loaded object is not a MarkovChain instance')
        if rng is not None:
            chain.rng = rng
    logger.debug(f"Loaded chain with {len(chain)} predictors from {path}")
    return chain
