import pytest

from cryptoleq.arith import UNUMBER_MAX, wrap
from cryptoleq.cell import CellTs, make_cell, minus_one
from cryptoleq.processor import Processor, ProcessorError, congruence


def test_n_of_one_rejected():
    with pytest.raises(ProcessorError, match="N cannot be 1"):
        Processor(1)


def test_open_mode_defaults():
    p = Processor(0)
    assert p.n2 == 0
    assert p.xp1 == 2
    assert p.xp2 == UNUMBER_MAX >> 1
    assert p.beta == 0


def test_parameters_invariants():
    p = Processor(143)
    assert p.n2 == 143 * 143
    assert p.a2 <= 143 < 2 * p.a2
    assert p.b2 == 1 << p.beta
    assert p.b2 * 2 < p.a2
    assert p.xp1 == 144


def test_power_of_two_beta():
    p = Processor(256)
    assert p.a2 == 256
    assert p.beta == p.high_bit_pos_n - 1


def test_set_beta_cannot_grow():
    p = Processor(143)
    with pytest.raises(ProcessorError, match="forbidden"):
        p.set_beta(p.beta + 1)


def test_set_beta_open_too_high():
    p = Processor(0)
    with pytest.raises(ProcessorError, match="too high"):
        p.set_beta(p.high_bit_pos_n // 2 + 1)


def test_set_beta_lower_allowed():
    p = Processor(143)
    p.set_beta(p.beta - 1)
    assert p.b2 == 1 << p.beta


def test_congruence_cases():
    assert congruence(5, 0) == 5
    assert congruence(20, 7) == 20 % 7
    assert congruence(7, 7) == 7
    assert congruence(100, 7) == 100 % 7


def test_leq_signs():
    p = Processor(143)
    assert p.leq(make_cell(143, 0)) is True
    assert p.leq(make_cell(143, 1)) is False
    assert p.leq(minus_one(143)) is True


def test_leq_x_and_ts_agree():
    p = Processor(143)
    for t in range(143):
        assert p.leq(make_cell(143, t)) == p.leq(CellTs.from_ts(143, t, 0))


def test_bam1_subtracts():
    p = Processor(143)
    r = p.bam1(make_cell(143, 5), make_cell(143, 9))
    assert r.ts().t == 9 - 5
    assert r.ts().s == 0


def test_open_bam1_uses_batt():
    p = Processor(0)
    r = p.bam1(make_cell(0, 5), make_cell(0, 9))
    assert tuple(r.ts()) == (4, 0)


def test_batt_mismatched_s():
    p = Processor(0)
    with pytest.raises(ProcessorError, match="Illegal instruction"):
        p.batt(make_cell(0, 5, 1), make_cell(0, 9, 2))


def test_cell_str_open_mode():
    p = Processor(0)
    assert p.cell_str(make_cell(0, 0)) == "0"
    assert p.cell_str(make_cell(0, 7)) == "7"
    assert p.cell_str(make_cell(0, wrap(-3))) == "-3"


def test_cell_str_encrypted_mode():
    p = Processor(143)
    assert p.cell_str(make_cell(143, 5, 2)) == "5.2"


def test_x2cell_round_trip():
    p = Processor(143)
    c = make_cell(143, 5, 2)
    assert p.x2cell(c.x()) == c


def test_show_mentions_modulus():
    assert "N=143" in Processor(143).show()