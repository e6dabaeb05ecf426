SETTINGS = {
    "min_length": 6,
    "max_length": 64,
    "min_quantity": 1,
    "max_quantity": 100,
    "default_length": 16,
    # Length at which generation switches to exact per-class quotas
    "exact_quota_min_length": 16,
}
