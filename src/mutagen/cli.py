"""
Command line for previewing and sampling grammars.

    python -m src.mutagen.cli preview examples/grammars/gorey_fate.mutagen -n 5
    python -m src.mutagen.cli generate grammar.mutagen -n 1000 -o out.csv
    python -m src.mutagen.cli frequencies grammar.mutagen --rule=-race- -n 5000
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .config import GeneratorConfig, load_config
from .errors import MutagenError
from .grammar import load_grammar
from .sampling import choice_frequencies, preview, sample_outputs, seed_range

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate seeded text from a Mutagen grammar"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("preview", "Print outputs for consecutive seeds"),
        ("generate", "Sweep seeds and write seed/text records"),
        ("frequencies", "Print how often each distinct output occurs"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("grammar", nargs="?", help="Grammar file")
        sub.add_argument("--config", "-c", help="YAML run configuration")
        sub.add_argument(
            "--rule", "-r", dest="root_rule",
            help="Rule to generate; pass as --rule=-name- since names start with a dash",
        )
        sub.add_argument("--count", "-n", type=int, help="Number of seeds")
        sub.add_argument("--start-seed", "-s", type=int, help="First seed")
        sub.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
        if name == "generate":
            sub.add_argument("--output", "-o", dest="output_path", help="CSV output path")

    return parser


def resolve_config(args: argparse.Namespace) -> GeneratorConfig:
    """File configuration (if any) overridden by command-line flags."""
    config = load_config(args.config) if args.config else GeneratorConfig()
    config = config.merged({
        "grammar_path": Path(args.grammar) if args.grammar else None,
        "root_rule": args.root_rule,
        "count": args.count,
        "start_seed": args.start_seed,
        "output_path": Path(args.output_path) if getattr(args, "output_path", None) else None,
        "log_level": args.log_level,
    })
    if config.grammar_path is None:
        raise ValueError("No grammar given (pass a path or set grammar_path in --config)")
    return config


def run(args: argparse.Namespace) -> int:
    config = resolve_config(args)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    grammar = load_grammar(config.grammar_path)
    factory = grammar.factory(config.root_rule)
    logger.info(
        f"Rule {config.root_rule}: {factory.compiled.cycles_used} cycles, "
        f"labels {factory.compiled.labels}"
    )

    if args.command == "preview":
        for seed, text in zip(
            seed_range(config.count, config.start_seed),
            preview(factory, config.count, config.start_seed),
        ):
            print(f"{seed}: {text}")
        return 0

    seeds = seed_range(config.count, config.start_seed)
    df = sample_outputs(
        factory,
        seeds,
        progress=lambda items: tqdm(items, desc="Generating", unit="seed"),
    )

    if args.command == "generate":
        if config.output_path:
            config.output_path.parent.mkdir(parents=True, exist_ok=True)
            df.to_csv(config.output_path, index=False)
            print(f"Wrote {len(df)} records to {config.output_path}")
        else:
            for row in df.itertuples(index=False):
                print(f"{row.seed}: {row.text}")
        return 0

    freq = choice_frequencies(df["text"])
    print(f"{len(freq)} distinct outputs from {len(df)} seeds")
    for text, count, frequency in freq.itertuples(index=False, name=None):
        print(f"  {frequency:6.1%}  {count:6d}  {text}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except (MutagenError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
