import logging
import random
from pathlib import Path

import click

from .. import config
from .persistence import load_chain


def generate_strings(chain, count, max_length=config.DEFAULT_MAX_LENGTH, glue="", rng=None):
    """Generates `count` strings, skipping empty results."""
    results = []
    # Empty results are retried, up to ten attempts per requested string
    for _ in range(count * 10):
        if len(results) >= count:
            break
        text = chain.generate_string(max_length, glue=glue, rng=rng)
        if text:
            results.append(text)
    return results


@click.command()
@click.option('--model', '-m', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=config.DEFAULT_MODEL_PATH, show_default=True, help="Path to a trained chain.")
@click.option('--count', '-c', type=click.IntRange(min=0), default=config.DEFAULT_COUNT, show_default=True,
              help="How many sequences to generate.")
@click.option('--max-length', '-l', type=click.IntRange(min=0), default=config.DEFAULT_MAX_LENGTH,
              show_default=True, help="Maximum tokens per sequence.")
@click.option('--glue', default="", help="Text inserted between tokens (use ' ' for word chains).")
@click.option('--seed', type=int, default=None, help="Seed for reproducible output.")
@click.option('--output', '-o', 'output_file', type=click.Path(dir_okay=False, writable=True, path_type=Path),
              default=None, help="Write results here instead of stdout.")
def main(model: Path, count: int, max_length: int, glue: str, seed, output_file: Path):
    """Generate sequences from a trained Markov chain."""
    logging.basicConfig(level=logging.INFO, format=config.LOG_FORMAT)

    try:
        chain = load_chain(model)
    except ValueError as e:
        raise click.ClickException(f"Error loading model: {e}")

    rng = random.Random(seed) if seed is not None else None
    results = generate_strings(chain, count, max_length=max_length, glue=glue, rng=rng)
    if len(results) < count:
        logging.warning(f"Only generated {len(results)} of {count} non-empty sequences.")

    if output_file:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text("".join(f"{line}\n" for line in results), encoding='utf-8')
        logging.info(f"Wrote {len(results)} sequences to {output_file}")
    else:
        for line in results:
            click.echo(line)


if __name__ == '__main__':
    main()
