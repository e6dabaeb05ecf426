import time

from flask import Flask, request, jsonify

from generator.password_generator import generate_passwords
from strength.evaluator import evaluate
from strength.formatting import describe_crack_time

from server.config import SETTINGS
from server.utils import log_request, parse_generation_request, parse_password

app = Flask(__name__)


@app.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "OK"})


@app.route("/generate", methods=["POST"])
def generate():
    start = time_ms()
    try:
        gen_request = parse_generation_request(request.get_json(silent=True))
    except ValueError as e:
        log_request({"endpoint": "generate", "result": "invalid", "error": str(e)})
        return jsonify({"error": str(e)}), 400

    passwords = generate_passwords(gen_request)

    log_request(
        {
            "endpoint": "generate",
            "result": "ok",
            "length": gen_request.length,
            "quantity": gen_request.quantity,
            "classes": [cls.name for cls in gen_request.classes],
            "mode": passwords[0].mode,
            "latency_ms": time_ms() - start,
        }
    )

    return jsonify(
        {
            "passwords": [p.password for p in passwords],
            "mode": passwords[0].mode,
            "pool_size": passwords[0].pool_size,
            "entropy_bits": passwords[0].entropy_bits,
        }
    )


@app.route("/evaluate", methods=["POST"])
def evaluate_password():
    start = time_ms()
    try:
        password = parse_password(request.get_json(silent=True))
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    result = evaluate(password)
    body = result.to_dict()

    if result.crack_estimate is not None:
        report = describe_crack_time(result.crack_estimate)
        body["time_to_crack"] = report.time_to_crack
        body["time_tier"] = report.tier
        if SETTINGS["verbose_explanation"]:
            body["explanation"] = report.explanation

    log_request(
        {
            "endpoint": "evaluate",
            "result": "ok",
            "length": len(password),
            "score": result.score,
            "tier": body["tier"],
            "latency_ms": time_ms() - start,
        }
    )

    return jsonify(body)


def time_ms():
    return int(time.time() * 1000)
