import math

import pytest

from core import DiagnosticKind, evaluate_line, process_line


def kinds(caplog):
    return [record.kind for record in caplog.records if hasattr(record, 'kind')]


class TestSetAndArithmetic():
    def test_set(self):
        assert evaluate_line(42.0, "5") == 5.0

    def test_set_decimal(self):
        assert evaluate_line(0, "1.5") == 1.5
        assert evaluate_line(0, "0.25") == pytest.approx(0.25)

    def test_set_ten_digits(self):
        assert evaluate_line(0, "1234567890") == 1234567890.0
        assert evaluate_line(0, "12345.67890") == pytest.approx(12345.6789)

    def test_arithmetic(self):
        assert evaluate_line(10, "+5") == 15.0
        assert evaluate_line(10, "-5") == 5.0
        assert evaluate_line(10, "*5") == 50.0
        assert evaluate_line(10, "/4") == 2.5
        assert evaluate_line(10, "%3") == 1.0
        assert evaluate_line(2, "^10") == 1024.0

    def test_space_between_operator_and_argument(self):
        assert evaluate_line(10, "+ 5") == 15.0
        assert evaluate_line(10, "*   2") == 20.0

    def test_remainder_follows_dividend_sign(self):
        assert evaluate_line(-7, "%3") == -1.0

    def test_fractional_power(self):
        assert evaluate_line(9, "^0.5") == pytest.approx(3.0)

    def test_accepts_int_accumulator(self):
        result = process_line(3, "+1")
        assert result == 4.0
        assert isinstance(result, float)


class TestUnary():
    def test_sqrt(self):
        assert evaluate_line(4, "SQRT") == 2.0

    def test_sqrt_negative(self, caplog):
        assert evaluate_line(-4, "SQRT") == -4.0
        assert kinds(caplog) == [DiagnosticKind.INVALID_SQRT_DOMAIN]

    def test_sqrt_zero(self, caplog):
        """ Only strictly positive values have a square root here. """
        assert evaluate_line(0, "SQRT") == 0.0
        assert kinds(caplog) == [DiagnosticKind.INVALID_SQRT_DOMAIN]

    def test_double_negation(self):
        for v in (0.5, -3.0, 1234.0):
            assert evaluate_line(evaluate_line(v, "_"), "_") == v

    def test_unary_with_suffix(self, caplog):
        assert evaluate_line(16, "SQRT 4") == 16.0
        assert evaluate_line(16, "_5") == 16.0
        assert evaluate_line(16, "SQRT ") == 16.0
        assert kinds(caplog) == [DiagnosticKind.UNEXPECTED_SUFFIX] * 3

    def test_set_then_sqrt(self):
        for v in (-10.0, 0.0, 99.0):
            assert evaluate_line(evaluate_line(v, "5"), "SQRT") == pytest.approx(math.sqrt(5))


class TestFold():
    def test_fold_add(self):
        assert evaluate_line(1, "(+) 2 3 4") == 10.0

    def test_fold_without_leading_space(self):
        assert evaluate_line(1, "(+)2 3 4") == 10.0

    def test_fold_trailing_whitespace(self):
        assert evaluate_line(1, "(*) 2 3   ") == 6.0

    def test_fold_tabs(self):
        assert evaluate_line(0, "(-) 1\t2") == -3.0

    def test_fold_pow(self):
        assert evaluate_line(2, "(^) 2 3") == 64.0

    @pytest.mark.parametrize('symbol', list('+-*/%^'))
    def test_fold_single_argument_matches_bare(self, symbol):
        bare = evaluate_line(7.0, symbol + "3")
        assert evaluate_line(7.0, "(" + symbol + ") 3") == bare
        assert evaluate_line(7.0, "(" + symbol + ")3") == bare

    def test_fold_discards_line_on_bad_token(self, caplog):
        assert evaluate_line(1, "(+) 2 a 4") == 1.0
        assert DiagnosticKind.MALFORMED_LITERAL in kinds(caplog)

    def test_fold_discards_line_on_bad_suffix(self, caplog):
        assert evaluate_line(1, "(+) 2 3a 4") == 1.0
        assert DiagnosticKind.MALFORMED_LITERAL in kinds(caplog)

    def test_fold_discards_line_on_long_literal(self):
        assert evaluate_line(1, "(+) 2 12345678901") == 1.0

    def test_fold_remainder_by_zero_discards_line(self, caplog):
        assert evaluate_line(100, "(%) 7 0 3") == 100.0
        assert kinds(caplog) == [DiagnosticKind.REMAINDER_BY_ZERO]

    def test_fold_division_by_zero_is_skipped(self, caplog):
        assert evaluate_line(100, "(/) 2 0 5") == 10.0
        assert kinds(caplog) == [DiagnosticKind.DIVISION_BY_ZERO]

    def test_fold_without_arguments(self, caplog):
        assert evaluate_line(5, "(+)") == 5.0
        assert evaluate_line(5, "(+)   ") == 5.0
        assert kinds(caplog) == [DiagnosticKind.MISSING_ARGUMENT] * 2


class TestRejectedLines():
    def test_division_by_zero(self, caplog):
        assert evaluate_line(10, "/0") == 10.0
        assert kinds(caplog) == [DiagnosticKind.DIVISION_BY_ZERO]

    def test_remainder_by_zero(self, caplog):
        assert evaluate_line(10, "%0") == 10.0
        assert kinds(caplog) == [DiagnosticKind.REMAINDER_BY_ZERO]

    def test_too_many_digits(self, caplog):
        assert evaluate_line(0, "12345678901") == 0.0
        assert evaluate_line(3, "+123456.78901") == 3.0
        assert kinds(caplog) == [DiagnosticKind.MALFORMED_LITERAL] * 2

    def test_unknown_operator(self, caplog):
        for line in ("x", "SQ", "SQRX", "(+", "(a)", "(+]", ".5", ""):
            assert evaluate_line(8, line) == 8.0
        assert kinds(caplog) == [DiagnosticKind.UNRECOGNIZED_OPERATOR] * 8

    def test_missing_argument(self, caplog):
        assert evaluate_line(8, "+") == 8.0
        assert evaluate_line(8, "+ ") == 8.0
        assert kinds(caplog) == [DiagnosticKind.MISSING_ARGUMENT] * 2

    def test_non_fold_rejects_second_argument(self, caplog):
        assert evaluate_line(8, "+2 3") == 8.0
        assert evaluate_line(8, "5 6") == 8.0
        assert kinds(caplog) == [DiagnosticKind.MALFORMED_LITERAL] * 2

    def test_non_fold_rejects_trailing_space(self):
        assert evaluate_line(8, "+2 ") == 8.0

    def test_malformed_literals(self, caplog):
        for line in ("+1.2.3", "+.", "+1e5", "+-1", "7x"):
            assert evaluate_line(8, line) == 8.0
        assert kinds(caplog) == [DiagnosticKind.MALFORMED_LITERAL] * 5

    def test_results_stay_finite(self, caplog):
        assert evaluate_line(10, "^400") == 10.0
        assert evaluate_line(-8, "^0.5") == -8.0
        assert evaluate_line(0, "^-1") == 0.0
        assert evaluate_line(1e308, "*10") == 1e308
        assert kinds(caplog) == [DiagnosticKind.NON_FINITE_RESULT] * 4

    def test_never_raises(self):
        for line in ("(", ")", "((", "()", "(+)x", "SQRT\n", "\t", "+\t1", "٣", "+٣"):
            value = evaluate_line(1.0, line)
            assert math.isfinite(value)
