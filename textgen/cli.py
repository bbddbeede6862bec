"""Command-line interface for training and generation."""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from textgen.data.tokenizer import read_text
from textgen.models.markov import MarkovTextGenerator


logger = logging.getLogger(__name__)


def setup_logging(level=logging.INFO):
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def seed_type(value: str) -> int:
    """Parse a seed within the range torch.Generator accepts."""
    seed = int(value)
    if not -2**63 <= seed < 2**64:
        raise argparse.ArgumentTypeError(f"seed {seed} is outside [-2**63, 2**64)")
    return seed


def build_model(args) -> MarkovTextGenerator:
    """Train a model on every data file, in order."""
    model = MarkovTextGenerator(args.seed)
    for path in args.data:
        text = read_text(path)
        if args.retrain:
            model.retrain(text)
        else:
            model.train(text)
        logger.info(f"Trained on {path}: {len(model)} distinct words")
    return model


def generate(args, model: MarkovTextGenerator) -> None:
    """Print generated text."""
    if not model.is_trained:
        logger.warning("No words found in training data")
    print(model.generate_text(args.words))


def dump(args, model: MarkovTextGenerator) -> None:
    """Print each word with its recorded successors."""
    print(model, end='')


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='Train an order-1 Markov chain on text and generate from it'
    )
    parser.add_argument(
        '--data',
        type=Path,
        action='append',
        required=True,
        help='Training text file (repeat to train on several files in order)'
    )
    parser.add_argument(
        '--seed',
        type=seed_type,
        default=42,
        help='Seed for the random source'
    )
    parser.add_argument(
        '--retrain',
        action='store_true',
        help='Reset the model before each file, so only the last one counts'
    )
    parser.add_argument('-v', '--verbose', action='store_true')

    subparsers = parser.add_subparsers(dest='command', required=True)

    generate_parser = subparsers.add_parser('generate')
    generate_parser.add_argument('--words', type=int, default=20)
    generate_parser.set_defaults(func=generate)

    dump_parser = subparsers.add_parser('dump')
    dump_parser.set_defaults(func=dump)

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        model = build_model(args)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read training data: {e}")
        return 1

    args.func(args, model)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
