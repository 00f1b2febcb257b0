import logging
from pathlib import Path

import click

from .. import config
from ..feeders import FEEDERS
from .markov_chain import MarkovChain
from .persistence import save_chain


def train_chain(corpus, order=config.DEFAULT_ORDER, mode=config.DEFAULT_MODE, progress=False):
    """
    Builds a MarkovChain from a line-per-path corpus.

    Args:
        corpus: Path to the corpus file, or an iterable of lines.
        order (int): Predictor length.
        mode (str): 'names' for character tokens, 'words' for word tokens.
        progress (bool): Show a progress bar while feeding.
    """
    if mode not in FEEDERS:
        raise ValueError(f"Unknown mode: {mode}")
    chain = MarkovChain(order)
    feeder = FEEDERS[mode](chain)
    feeder.feed(corpus, progress=progress)
    return chain, feeder.paths


@click.command()
@click.argument('corpus', type=click.Path(exists=True, dir_okay=False, path_type=Path),
                default=config.DEFAULT_CORPUS_PATH)
@click.option('--order', '-n', type=click.IntRange(min=1), default=config.DEFAULT_ORDER, show_default=True,
              help="Number of preceding tokens each prediction looks at.")
@click.option('--mode', type=click.Choice(sorted(FEEDERS)), default=config.DEFAULT_MODE, show_default=True,
              help="Tokenize lines into characters (names) or words.")
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path), default=config.DEFAULT_MODEL_PATH,
              show_default=True, help="Where to save the trained chain (.pkl or .json).")
def main(corpus: Path, order: int, mode: str, output: Path):
    """Train a Markov chain on CORPUS, one path per line."""
    logging.basicConfig(level=logging.INFO, format=config.LOG_FORMAT)

    logging.info(f"Reading corpus from {corpus}...")
    chain, paths = train_chain(corpus, order=order, mode=mode, progress=True)
    if paths == 0:
        raise click.ClickException(f"No paths found in {corpus}")
    logging.info(f"Trained Markov chain of order {order} on {paths} paths ({len(chain)} predictors).")

    save_chain(chain, output)
    logging.info(f"Model saved to {output}")


if __name__ == '__main__':
    main()
