"""CLI entrypoint for geoquest."""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path

from geoquest.logging_config import setup_logging


def main(argv: list[str] | None = None) -> int:
    setup_logging()

    parser = argparse.ArgumentParser(prog="geoquest")
    sub = parser.add_subparsers(dest="command", required=True)

    canon_parser = sub.add_parser("canonicalize", help="Map raw country names to map keys")
    canon_parser.add_argument("names", nargs="+")

    check_parser = sub.add_parser("check", help="Check a guess against a quiz's answers")
    check_parser.add_argument("guess")
    check_parser.add_argument("--title", required=True)
    check_parser.add_argument("--answer", action="append", default=[])

    summary_parser = sub.add_parser("summarize", help="Legend statistics for a set of values")
    summary_parser.add_argument("values", nargs="+", type=float)

    color_parser = sub.add_parser("color", help="Color for a ratio in [0, 1]")
    color_parser.add_argument("ratio", type=float)
    group = color_parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--palette", help="Name of a pooled or category palette")
    group.add_argument("--colors", nargs="+", help="Explicit color stops")

    build_parser = sub.add_parser("build", help="Build a colored quiz from a local dataset file")
    build_parser.add_argument("file", type=Path)
    build_parser.add_argument("--id", dest="quiz_id")
    build_parser.add_argument("--category")
    build_parser.add_argument("--value-field", default="value")
    build_parser.add_argument("--strategy", choices=["random", "category"])
    build_parser.add_argument("--seed", type=int)

    args = parser.parse_args(argv)

    if args.command == "canonicalize":
        return _canonicalize(args.names)
    if args.command == "check":
        return _check(args.guess, args.title, args.answer)
    if args.command == "summarize":
        return _summarize(args.values)
    if args.command == "color":
        return _color(args.ratio, args.palette, args.colors)
    if args.command == "build":
        return _build(args.file, args.quiz_id, args.category, args.value_field, args.strategy, args.seed)
    return 2


def _canonicalize(names: list[str]) -> int:
    from geoquest.canonicalize import get_canonicalizer

    canonicalizer = get_canonicalizer()
    for name in names:
        result = canonicalizer.resolve(name)
        print(f"{name} -> {result.key} ({result.strategy.value})")
    return 0


def _check(guess: str, title: str, answers: list[str]) -> int:
    from geoquest.answers import get_resolver
    from geoquest.models import QuizAnswerSpec

    spec = QuizAnswerSpec(title=title, answer_variations=answers)
    strategy = get_resolver().match(guess, spec)
    if strategy is None:
        print("incorrect")
        return 1
    print(f"correct ({strategy.value})")
    return 0


def _summarize(values: list[float]) -> int:
    from geoquest.color_scale import summarize

    print(json.dumps(summarize(values).model_dump(), indent=2))
    return 0


def _color(ratio: float, palette_name: str | None, colors: list[str] | None) -> int:
    from geoquest.color_scale import get_engine
    from geoquest.palettes import CATEGORY_PALETTES, PALETTE_POOL

    if colors:
        stops = colors
    else:
        by_name = {p.name: p for p in (*PALETTE_POOL, *CATEGORY_PALETTES.values())}
        palette = by_name.get(palette_name)
        if palette is None:
            print(f"Unknown palette: {palette_name}. Known: {', '.join(sorted(by_name))}", file=sys.stderr)
            return 2
        stops = list(palette.colors)

    print(get_engine().color_hex(ratio, stops))
    return 0


def _build(
    file: Path,
    quiz_id: str | None,
    category: str | None,
    value_field: str,
    strategy: str | None,
    seed: int | None,
) -> int:
    from geoquest.palettes import PaletteStrategy
    from geoquest.quiz import QuizBuilder

    with file.open("r", encoding="utf-8") as f:
        dataset = json.load(f)

    builder = QuizBuilder(rng=random.Random(seed) if seed is not None else None)
    if strategy:
        builder.strategy = PaletteStrategy(strategy)

    try:
        quiz = builder.build(dataset, quiz_id or file.stem, category=category, value_field=value_field)
    except ValueError as e:
        print(f"Cannot build quiz: {e}", file=sys.stderr)
        return 1

    print(json.dumps(quiz.model_dump(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
