from pathlib import Path

import click

from .. import config
from .persistence import load_chain


def format_chain(chain):
    """Yields one line per predictor and per cumulative entry."""
    for predictor, dist in chain.items():
        yield f"{predictor!r} (total={dist.total})"
        for weight, outcome in dist.entries():
            yield f": {weight!r} -> {outcome!r}"
        yield ""


@click.command()
@click.option('--model', '-m', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=config.DEFAULT_MODEL_PATH, show_default=True, help="Path to a trained chain.")
def main(model: Path):
    """Print every predictor of a trained chain with its cumulative weights."""
    try:
        chain = load_chain(model)
    except ValueError as e:
        raise click.ClickException(str(e))

    click.echo(f"Predictor length: {chain.predictor_length}, predictors: {len(chain)}")
    click.echo()
    for line in format_chain(chain):
        click.echo(line)


if __name__ == '__main__':
    main()
