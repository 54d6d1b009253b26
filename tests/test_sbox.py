import pytest

from misty1.sbox import S7, S9, evaluate_sbox, verify_tables
from misty1.sbox import analysis
from misty1.sbox.analysis import (
    calculate_differential_uniformity,
    calculate_linear_bias,
    is_bijective,
)


def test_table_sizes():
    assert len(S7) == 128
    assert len(S9) == 512


def test_table_values_fit_domain():
    assert all(0 <= v <= 0x7f for v in S7)
    assert all(0 <= v <= 0x1ff for v in S9)


def test_tables_are_permutations():
    assert is_bijective(S7)
    assert is_bijective(S9)


def test_tables_are_immutable():
    with pytest.raises(TypeError):
        S7[0] = 0
    with pytest.raises(TypeError):
        S9[0] = 0


def test_verify_tables_passes():
    verify_tables()


def test_verify_tables_detects_corruption(monkeypatch):
    corrupted = (S9[1],) + S9[1:]
    monkeypatch.setattr(analysis, 'S9', corrupted)
    with pytest.raises(ValueError, match="S9 is not a permutation"):
        verify_tables()


def test_verify_tables_detects_truncation(monkeypatch):
    monkeypatch.setattr(analysis, 'S7', S7[:-1])
    with pytest.raises(ValueError, match="S7 must have 128 entries"):
        verify_tables()


def test_differential_uniformity_is_optimal():
    assert calculate_differential_uniformity(S7) == 2
    assert calculate_differential_uniformity(S9) == 2


def test_linear_bias_bounds():
    assert calculate_linear_bias(S7) <= 1 / 8
    assert calculate_linear_bias(S9) <= 1 / 16


def test_identity_sbox_is_weak():
    identity = list(range(16))
    metrics = evaluate_sbox(identity)
    assert metrics['bijective']
    assert metrics['differential'] == 16
    assert metrics['linear'] == 1.0


def test_evaluate_rejects_odd_size():
    with pytest.raises(ValueError):
        evaluate_sbox([0, 1, 2])
