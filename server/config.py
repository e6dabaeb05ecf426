import os

SETTINGS = {
    "host": os.environ.get("PWTOOLS_HOST", "127.0.0.1"),
    "port": int(os.environ.get("PWTOOLS_PORT", 5000)),
    "log_enabled": os.environ.get("PWTOOLS_LOG_ENABLED", "1") == "1",
    "verbose_explanation": True,
}

REQUESTS_LOG = os.environ.get("PWTOOLS_REQUESTS_LOG", "requests.log")
