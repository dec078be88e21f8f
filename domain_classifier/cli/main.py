"""CLI: domain-classifier classify, layers, benchmark, config validate."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import statistics
import sys

from ..config import load_config, validate_config
from ..engine import DomainClassifier
from ..vocabulary import list_vocabularies


def _get_classifier(config_path: str | None = None) -> DomainClassifier:
    config = load_config(config_path)
    classifier = DomainClassifier(config)
    asyncio.run(classifier.initialize())
    return classifier


def cmd_classify(args):
    """Classify a prompt and print the result."""
    classifier = _get_classifier(args.config)
    prompt = args.prompt if args.prompt is not None else sys.stdin.read()

    if args.explain:
        result = classifier.explain(prompt)
        if args.json:
            print(json.dumps(result.to_dict(), indent=2))
            return
        print(f"Domain:     {result.domain.value}")
        print(f"Confidence: {result.confidence}")
        print(f"Aggregate:  {result.aggregate:.3f}")
        print(f"Time:       {result.processing_time:.2f}ms")
        print()
        print(f"{'Layer':<12} {'Domain':<10} {'Score':>6}  Indicators")
        print("-" * 60)
        for s in result.layer_scores:
            print(f"{s.method:<12} {s.domain.value:<10} {s.score:>6.2f}  {', '.join(s.indicators)}")
        return

    result = classifier.classify_domain(prompt)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return
    print(f"Domain:     {result.domain.value}")
    print(f"Confidence: {result.confidence}")
    print(f"Indicators: {', '.join(result.indicators)}")
    print(f"Time:       {result.processing_time:.2f}ms")


def cmd_layers(args):
    """List classification layers and their weights."""
    classifier = _get_classifier(args.config)
    layers = classifier.layer_info()
    print(f"{'Layer':<12} {'Weight':>6}")
    print("-" * 19)
    for info in layers:
        print(f"{info.name:<12} {info.weight:>6.2f}")
    print(f"{'total':<12} {sum(i.weight for i in layers):>6.2f}")


def cmd_benchmark(args):
    """Time the built-in sample prompts against the processing budget."""
    classifier = _get_classifier(args.config)
    budget = classifier.config.max_processing_time
    runs = max(1, args.runs)

    timings: list[float] = []
    correct = 0
    total = 0
    for vocabulary in list_vocabularies():
        for prompt in vocabulary.sample_prompts:
            total += 1
            result = classifier.classify_domain(prompt)
            if result.domain == vocabulary.domain:
                correct += 1
            timings.append(result.processing_time)
            for _ in range(runs - 1):
                timings.append(classifier.classify_domain(prompt).processing_time)

    if not timings:
        print("No sample prompts registered.")
        return

    over = sum(1 for t in timings if t > budget)
    print(f"Prompts:   {total} x {runs} runs")
    print(f"Accuracy:  {correct}/{total} ({correct / total:.1%})")
    print(f"Mean:      {statistics.mean(timings):.3f}ms")
    print(f"Median:    {statistics.median(timings):.3f}ms")
    print(f"Max:       {max(timings):.3f}ms")
    print(f"Budget:    {budget}ms ({over} over)")


def cmd_config_validate(args):
    """Validate the config file."""
    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Config error: {e}", file=sys.stderr)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        print("Config errors:", file=sys.stderr)
        for e in errors:
            print(f"  - {e}", file=sys.stderr)
        sys.exit(1)

    print("Config is valid.")
    print(f"  min_confidence:       {config.min_confidence}")
    print(f"  max_processing_time:  {config.max_processing_time}ms")
    print(f"  performance logging:  {config.enable_performance_logging}")
    print(f"  layer weights:        {config.layer_weights}")
    print(f"  domain priority:      {', '.join(d.value for d in config.domain_priority)}")


def main():
    parser = argparse.ArgumentParser(
        prog="domain-classifier",
        description="Classify prompts into code, writing, analysis, or research",
    )
    parser.add_argument("--config", "-c", help="Path to config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    # classify
    classify_parser = subparsers.add_parser("classify", help="Classify a prompt")
    classify_parser.add_argument("prompt", nargs="?", help="Prompt text (default: stdin)")
    classify_parser.add_argument("--json", action="store_true", help="Print JSON")
    classify_parser.add_argument(
        "--explain", action="store_true", help="Show per-layer scores without fallbacks",
    )

    # layers
    subparsers.add_parser("layers", help="List layers and weights")

    # benchmark
    benchmark_parser = subparsers.add_parser("benchmark", help="Time the sample prompts")
    benchmark_parser.add_argument("--runs", "-n", type=int, default=10, help="Runs per prompt")

    # config
    config_parser = subparsers.add_parser("config", help="Config management")
    config_sub = config_parser.add_subparsers(dest="config_command")
    config_sub.add_parser("validate", help="Validate config file")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "classify": cmd_classify,
        "layers": cmd_layers,
        "benchmark": cmd_benchmark,
    }

    if args.command == "config":
        if args.config_command == "validate":
            cmd_config_validate(args)
        else:
            config_parser.print_help()
    elif args.command in commands:
        commands[args.command](args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
