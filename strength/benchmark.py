"""
Measure how fast this machine can compute each hash model, so the
crack-time assumptions in strength.config can be replaced by real numbers.

Rates are single-process CPU figures and sit far below GPU cracking rigs.
"""

import json
import time
from datetime import datetime
from pathlib import Path

import psutil
from passlib.hash import argon2, bcrypt, hex_md5, hex_sha256

from .config import SETTINGS, make_settings

HASHERS = {
    "md5": hex_md5,
    "sha256": hex_sha256,
    "bcrypt": bcrypt.using(rounds=12),
    "argon2": argon2,
}


class BenchmarkMetrics:
    def __init__(self, name="hash_benchmark"):
        self.name = name
        self.start_time = None
        self.end_time = None
        self.results = {}
        self.cpu_samples = []
        self.memory_samples = []
        self.process = psutil.Process()

    def start(self):
        self.start_time = time.time()
        self.results = {}
        # First cpu_percent() call only primes the counter
        self.process.cpu_percent()

    def record(self, model, hashes, elapsed):
        self.results[model] = {
            "hashes": hashes,
            "elapsed_seconds": round(elapsed, 4),
            "guesses_per_second": hashes / elapsed if elapsed > 0 else 0.0,
        }

    def sample_resources(self):
        try:
            self.cpu_samples.append(self.process.cpu_percent())
            self.memory_samples.append(
                self.process.memory_info().rss / 1024 / 1024
            )  # MB
        except psutil.Error:
            pass

    def stop(self):
        self.end_time = time.time()

    def measured_speeds(self):
        return {
            model: data["guesses_per_second"]
            for model, data in self.results.items()
            if data["guesses_per_second"] > 0
        }

    def get_report(self):
        total_time = self.end_time - self.start_time if self.end_time else 0

        return {
            "benchmark": self.name,
            "timestamp": datetime.now().isoformat(),
            "total_time_seconds": round(total_time, 2),
            "models": self.results,
            "assumed_guesses_per_second": dict(SETTINGS["hash_speeds"]),
            "avg_cpu_percent": (
                round(sum(self.cpu_samples) / len(self.cpu_samples), 2)
                if self.cpu_samples
                else 0
            ),
            "avg_memory_mb": (
                round(sum(self.memory_samples) / len(self.memory_samples), 2)
                if self.memory_samples
                else 0
            ),
        }

    def save_report(self, output_dir="results"):
        Path(output_dir).mkdir(exist_ok=True)
        report = self.get_report()

        filename = f"{output_dir}/{self.name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
        with open(filename, "w") as f:
            json.dump(report, f, indent=2)

        print(f"Report saved: {filename}")
        return report


def run_benchmark(models=None, duration=0.5, secret="correct horse", metrics=None):
    """
    Hash `secret` with each model for about `duration` seconds.

    models: iterable of keys from HASHERS (default: all of them)
    """
    models = list(models or HASHERS)
    unknown = [m for m in models if m not in HASHERS]
    if unknown:
        raise ValueError(f"Unknown hash model: {', '.join(unknown)}")

    metrics = metrics or BenchmarkMetrics()
    metrics.start()

    for model in models:
        hasher = HASHERS[model]
        hashes = 0
        started = time.perf_counter()
        elapsed = 0.0
        # Always at least one hash, even for slow models
        while hashes == 0 or elapsed < duration:
            hasher.hash(secret)
            hashes += 1
            elapsed = time.perf_counter() - started
        metrics.record(model, hashes, elapsed)
        metrics.sample_resources()

    metrics.stop()
    return metrics


def calibrated_settings(metrics: BenchmarkMetrics, **overrides):
    """Strength settings whose hash speeds are replaced by measured ones"""
    speeds = dict(SETTINGS["hash_speeds"])
    speeds.update(metrics.measured_speeds())
    return make_settings(hash_speeds=speeds, **overrides)
