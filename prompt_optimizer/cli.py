"""CLI tool for Prompt Optimizer.

Usage:
    python -m prompt_optimizer.cli analyze --text "..." [--json]
    python -m prompt_optimizer.cli enhance --text "..." [--auto | --scores '{"clarity": 5, ...}'] [--seed 42]
    python -m prompt_optimizer.cli optimize --file prompt.txt [--seed 42] [--json]
    python -m prompt_optimizer.cli examples [--category data]
    python -m prompt_optimizer.cli lexicon
"""
import argparse
import json
import random
import sys


def cmd_analyze(args):
    """Score a prompt on all four dimensions."""
    from prompt_optimizer.analyzer import analyze

    text = _require_prompt(args)
    report = analyze(text, _lexicon(args))
    _emit(args, report)


def cmd_enhance(args):
    """Rewrite a prompt based on its sub-scores."""
    from prompt_optimizer.analyzer import ScoreBreakdown, analyze
    from prompt_optimizer.enhancer import enhance

    text = _require_prompt(args)
    lexicon = _lexicon(args)

    scores = None
    if args.scores:
        try:
            scores = ScoreBreakdown.from_dict(json.loads(args.scores))
        except (json.JSONDecodeError, ValueError, TypeError) as e:
            print(f"❌ Invalid --scores: {e}")
            sys.exit(1)
    elif args.auto:
        scores = analyze(text, lexicon).breakdown

    result = enhance(text, scores, rng=_rng(args), lexicon=lexicon)
    _emit(args, result)


def cmd_optimize(args):
    """Analyze, enhance and re-score in one go."""
    from prompt_optimizer.pipeline import optimize_prompt

    text = _require_prompt(args)
    result = optimize_prompt(text, rng=_rng(args), lexicon=_lexicon(args))
    _emit(args, result)


def cmd_examples(args):
    """Show before/after prompt examples."""
    from prompt_optimizer.examples import format_examples, get_examples

    examples = get_examples(args.category)
    if args.json:
        print(json.dumps([e.to_dict() for e in examples], ensure_ascii=False, indent=2))
    else:
        print(format_examples(examples))


def cmd_lexicon(args):
    """Show the active vocabulary tables."""
    from prompt_optimizer.lexicon import describe_lexicon
    print(describe_lexicon(_lexicon(args)))


def _read_input(file_path=None, text=None):
    """Read input from file or text argument."""
    if file_path:
        with open(file_path) as f:
            return f.read()
    if text:
        return text
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return None


def _require_prompt(args) -> str:
    from prompt_optimizer.validator import validate_prompt

    text = _read_input(args.file, args.text)
    if text is None:
        print("❌ No input. Use --file or --text")
        sys.exit(1)
    result = validate_prompt(text, args.max_length)
    if not result.passed:
        print(f"❌ {result.first_error}")
        sys.exit(1)
    return text


def _lexicon(args):
    from prompt_optimizer.config import config
    from prompt_optimizer.lexicon import DEFAULT_LEXICON, LexiconError, load_lexicon

    path = getattr(args, "lexicon", None) or config.LEXICON_PATH
    if not path:
        return DEFAULT_LEXICON
    try:
        return load_lexicon(path)
    except (OSError, LexiconError) as e:
        print(f"❌ Cannot load lexicon: {e}")
        sys.exit(1)


def _rng(args):
    from prompt_optimizer.config import config

    seed = args.seed if args.seed is not None else config.ENHANCE_SEED
    return random.Random(seed) if seed is not None else None


def _emit(args, result):
    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(result.summary())


def _add_input_args(p):
    p.add_argument("--file", "-f", help="Input file")
    p.add_argument("--text", "-t", help="Input text")
    p.add_argument("--max-length", type=int, default=None, help="Maximum prompt length")
    p.add_argument("--json", action="store_true", help="Print JSON output")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prompt-optimizer",
        description="Prompt Optimizer CLI — Score prompts and rewrite them into stronger ones",
    )
    parser.add_argument("--lexicon", "-l", help="JSON file overriding vocabulary tables")
    sub = parser.add_subparsers(dest="command", help="Command")

    # analyze
    p = sub.add_parser("analyze", help="Score a prompt")
    _add_input_args(p)

    # enhance
    p = sub.add_parser("enhance", help="Rewrite a prompt")
    _add_input_args(p)
    p.add_argument("--scores", "-s", help="Prior sub-scores as JSON")
    p.add_argument("--auto", action="store_true", help="Analyze first and use those scores")
    p.add_argument("--seed", type=int, default=None, help="Seed for phrasing choices")

    # optimize
    p = sub.add_parser("optimize", help="Analyze, enhance and re-score")
    _add_input_args(p)
    p.add_argument("--seed", type=int, default=None, help="Seed for phrasing choices")

    # examples
    p = sub.add_parser("examples", help="Show before/after examples")
    p.add_argument("--category", "-c", help="Filter by category")
    p.add_argument("--json", action="store_true", help="Print JSON output")

    # lexicon
    sub.add_parser("lexicon", help="Show vocabulary tables")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    commands = {
        "analyze": cmd_analyze,
        "enhance": cmd_enhance,
        "optimize": cmd_optimize,
        "examples": cmd_examples,
        "lexicon": cmd_lexicon,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()
