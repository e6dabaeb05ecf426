#!/usr/bin/env python3
import argparse
import sys

from strength.benchmark import HASHERS, calibrated_settings, run_benchmark
from strength.evaluator import evaluate
from strength.formatting import describe_crack_time, format_number


def main(argv=None):
    parser = argparse.ArgumentParser(description="Measure local hashing speed")
    parser.add_argument("--models", nargs="+", choices=list(HASHERS), default=list(HASHERS))
    parser.add_argument("--duration", type=float, default=1.0, help="seconds per model")
    parser.add_argument("--sample", default="Tr0ub4dor&3", help="password to estimate")
    parser.add_argument("--output-dir", default="results")
    args = parser.parse_args(argv)

    print("🚀 STARTING HASH BENCHMARK")
    print("=" * 60)

    metrics = run_benchmark(args.models, duration=args.duration)
    report = metrics.save_report(args.output_dir)

    print("\n📈 Results:")
    for model, data in report["models"].items():
        assumed = report["assumed_guesses_per_second"].get(model)
        print(
            f"   - {model:<7} measured {format_number(data['guesses_per_second']):>16}/s"
            f"   assumed {format_number(assumed)}/s"
        )

    settings = calibrated_settings(metrics)
    default_report = describe_crack_time(evaluate(args.sample).crack_estimate)
    local_report = describe_crack_time(evaluate(args.sample, settings).crack_estimate)
    print(f"\n🔑 Sample password ({len(args.sample)} chars):")
    print(f"   - Assumed GPU speeds: {default_report.time_to_crack}")
    print(f"   - This machine:       {local_report.time_to_crack}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
