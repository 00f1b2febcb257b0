import logging
from pathlib import Path

import click
from tqdm import tqdm

from . import config


def normalize_lines(lines, seen=None):
    """
    Strips each line and drops blanks and repeats, keeping first-seen order.
    Pass a shared `seen` set to dedupe across several calls.
    """
    seen = set() if seen is None else seen
    for line in lines:
        line = line.strip()
        if line and line not in seen:
            seen.add(line)
            yield line


def build_corpus(source_files):
    """Combines the given text files into one list of normalized lines."""
    lines = []
    seen = set()
    for source in tqdm(source_files, desc="Reading sources", unit="file"):
        try:
            with open(source, 'r', encoding='utf-8') as f:
                lines.extend(normalize_lines(f, seen))
        except UnicodeDecodeError as e:
            logging.error(f"Skipping {source}, not valid UTF-8: {e}")
    return lines


@click.command()
@click.option('--input-dir', type=click.Path(exists=True, file_okay=False, path_type=Path),
              default=config.CORPUS_SOURCE_DIR, show_default=True,
              help="Directory containing .txt source files.")
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              default=config.DEFAULT_CORPUS_PATH, show_default=True, help="Path to the output corpus file.")
def main(input_dir: Path, output: Path):
    """Combine and normalize text files into a single training corpus."""
    logging.basicConfig(level=logging.INFO, format=config.LOG_FORMAT)

    source_files = sorted(input_dir.glob("*.txt"))
    logging.info(f"Found {len(source_files)} source files in {input_dir}")
    if not source_files:
        logging.warning(f"No .txt files in {input_dir}. Nothing to do.")
        return

    lines = build_corpus(source_files)

    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, 'w', encoding='utf-8') as f:
        f.write("\n".join(lines))
        if lines:
            f.write("\n")

    logging.info(f"Successfully wrote {len(lines)} lines to {output}")


if __name__ == '__main__':
    main()
