#!/usr/bin/env python3
import argparse
import sys
from pathlib import Path

from zxcvbn import zxcvbn

from generator.charsets import CLASSES_BY_NAME
from generator.request import GenerationRequest
from generator.password_generator import generate_passwords
from strength.evaluator import evaluate
from strength.formatting import describe_crack_time, format_result

BASE = Path("passwords")

SETS = {
    # name: (length, classes)
    "easy": (8, ("lower", "digits")),
    "medium": (12, ("lower", "upper", "digits")),
    "hard": (20, ("lower", "upper", "digits", "symbols")),
}

"""
zxcvbn scores every password 0-4 as a cross-check of our own 0-10 score

0 # too guessable: risky password. (guesses < 10^3)
1 # very guessable: protection from throttled online attacks. (guesses < 10^6)
2 # somewhat guessable: protection from unthrottled online attacks. (guesses < 10^8)
3 # safely unguessable: moderate protection from offline slow-hash scenario. (guesses < 10^10)
4 # very unguessable: strong protection from offline slow-hash scenario. (guesses >= 10^10)
"""


def reference_score(pw):
    result = zxcvbn(pw)
    return {
        "score": result["score"],
        "crack_time": result["crack_times_display"]["offline_fast_hashing_1e10_per_second"],
    }


def build_set(name, count, length=None, classes=None):
    """Generate one preset and score every password"""
    preset_length, preset_classes = SETS[name]
    request = GenerationRequest(
        length=length or preset_length,
        classes=tuple(classes or preset_classes),
        quantity=count,
    ).validate()

    rows = []
    for generated in generate_passwords(request):
        result = evaluate(generated.password)
        rows.append(
            {
                "password": generated.password,
                "mode": generated.mode,
                "score": result.score,
                "tier": result.tier.label,
                "time_to_crack": describe_crack_time(result.crack_estimate).time_to_crack,
                "zxcvbn": reference_score(generated.password),
            }
        )
    return rows


def write_set(name, rows, base=BASE):
    base.mkdir(exist_ok=True)
    out = base / f"{name}_passwords.txt"
    out.write_text("\n".join(row["password"] for row in rows) + "\n")
    return out


def check(password):
    result = evaluate(password)
    print(format_result(result, verbose=True))
    if password:
        ref = reference_score(password)
        print(f"\nzxcvbn: {ref['score']}/4, fast-hash crack time {ref['crack_time']}")
    return result


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate or check passwords")
    parser.add_argument("--set", choices=sorted(SETS), action="append", dest="sets")
    parser.add_argument("--count", type=int, default=10)
    parser.add_argument("--length", type=int)
    parser.add_argument(
        "--classes", nargs="+", choices=sorted(CLASSES_BY_NAME), help="override preset classes"
    )
    parser.add_argument("--out", type=Path, default=BASE)
    parser.add_argument("--check", metavar="PASSWORD", help="score a password and exit")
    args = parser.parse_args(argv)

    if args.check is not None:
        check(args.check)
        return 0

    for name in args.sets or list(SETS):
        try:
            rows = build_set(name, args.count, args.length, args.classes)
        except ValueError as e:
            print(f"❌ {name}: {e}")
            return 1

        out = write_set(name, rows, args.out)
        print(f"\n📄 {name}: {len(rows)} passwords -> {out}")
        for row in rows:
            print(
                f"   {row['password']}  {row['score']:>4}/10 {row['tier']:<11} "
                f"crack: {row['time_to_crack']:<20} zxcvbn: {row['zxcvbn']['score']}/4"
            )

    print("\n✅ Password generation completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
