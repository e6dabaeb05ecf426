import random
import secrets

import pytest

from generator.charsets import ALL_CLASSES, DIGITS, LOWERCASE, SYMBOLS, UPPERCASE, union_alphabet
from generator.password_generator import (
    COVERAGE_FILL,
    EXACT_QUOTA,
    PasswordGenerator,
    generate_passwords,
)
from generator.request import GenerationRequest


def count_per_class(password, classes):
    return [sum(1 for c in password if c in cls) for cls in classes]


@pytest.mark.parametrize("length", [1, 2, 3, 6, 11, 12, 15, 16, 17, 20, 33, 64])
@pytest.mark.parametrize("classes", [None, ["lower"], ["digits", "symbols"], ["lower", "upper", "digits"]])
def test_length_and_alphabet(length, classes):
    gen = PasswordGenerator()
    result = gen.generate(length, classes)
    assert len(result) == length
    assert len(result.password) == length

    alphabet = union_alphabet(ALL_CLASSES if classes is None else [c for c in ALL_CLASSES if c.name in classes])
    assert set(result.password) <= set(alphabet)


def test_mode_selection():
    gen = PasswordGenerator()
    assert gen.select_mode(16, ALL_CLASSES) == EXACT_QUOTA
    assert gen.select_mode(64, (LOWERCASE, DIGITS)) == EXACT_QUOTA
    assert gen.select_mode(15, ALL_CLASSES) == COVERAGE_FILL
    assert gen.select_mode(6, ALL_CLASSES) == COVERAGE_FILL
    assert gen.select_mode(40, (LOWERCASE,)) == COVERAGE_FILL


def test_exact_quota_even_split():
    gen = PasswordGenerator()
    for _ in range(50):
        result = gen.generate(20, ["lower", "upper", "digits", "symbols"])
        assert result.mode == EXACT_QUOTA
        assert count_per_class(result.password, ALL_CLASSES) == [5, 5, 5, 5]


def test_exact_quota_remainder_goes_to_first_classes():
    gen = PasswordGenerator()
    for _ in range(50):
        result = gen.generate(18, None)
        assert count_per_class(result.password, ALL_CLASSES) == [5, 5, 4, 4]

    result = gen.generate(17, ["digits", "symbols"])
    assert count_per_class(result.password, (DIGITS, SYMBOLS)) == [9, 8]


def test_coverage_fill_places_every_class():
    gen = PasswordGenerator()
    for length in (4, 6, 12, 15):
        for _ in range(100):
            result = gen.generate(length, None)
            assert result.mode == COVERAGE_FILL
            assert all(count_per_class(result.password, ALL_CLASSES))


def test_length_shorter_than_class_count():
    gen = PasswordGenerator()
    for _ in range(50):
        result = gen.generate(2, None)
        assert len(result.password) == 2
        # the first two classes win the only two slots
        present = [n > 0 for n in count_per_class(result.password, ALL_CLASSES)]
        assert present[:2] == [True, True]


def test_single_class_uses_only_that_alphabet():
    result = PasswordGenerator().generate(30, ["upper"])
    assert set(result.password) <= set(UPPERCASE.alphabet)
    assert result.classes == ("upper",)
    assert result.pool_size == 26


def test_rejects_non_positive_length():
    with pytest.raises(ValueError):
        PasswordGenerator().generate(0)
    with pytest.raises(ValueError):
        PasswordGenerator().generate(-5, ["lower"])


def test_metadata():
    result = PasswordGenerator().generate(16, ["lower", "digits"])
    assert result.pool_size == 36
    assert result.entropy_bits == pytest.approx(16 * 5.1699, abs=0.01)
    assert str(result) == result.password


def test_injected_rng_is_used():
    first = PasswordGenerator(random.Random(7)).generate(20, None)
    second = PasswordGenerator(random.Random(7)).generate(20, None)
    assert first == second


def test_generate_passwords_quantity():
    request = GenerationRequest(length=20, classes=("lower", "upper", "digits", "symbols"), quantity=25)
    passwords = generate_passwords(request)
    assert len(passwords) == 25
    assert all(len(p) == 20 for p in passwords)
    assert all(p.mode == EXACT_QUOTA for p in passwords)
    assert len({p.password for p in passwords}) == 25


def test_empty_class_request_falls_back_to_all():
    request = GenerationRequest(length=12, classes=(), quantity=5)
    for p in generate_passwords(request):
        assert p.classes == ("lower", "upper", "digits", "symbols")


def test_default_rng_is_cryptographic():
    assert isinstance(PasswordGenerator().rng, secrets.SystemRandom)
