"""Unit тесты для CalculatorSession.

Coverage:
- Данные по умолчанию и результат
- set_input: разбор, эхо ввода, повторный clamp после изменения долей и D
- Промежуточный ввод отрицательной прибыли ("" и "-")
- Классификация долей до и после clamp
- Ссылка: токен, legacy fallback, нераспознанная ссылка
"""

import logging

import pytest

from src.calculator import DEFAULT_STATE, CalculatorSession, UnknownInputFieldError
from src.core.domain import CalculatorState
from src.holdings import MINOR_EXCEEDS_MAJOR_MESSAGE, HoldingsConfig


@pytest.fixture
def session():
    """Fixture для сессии с данными по умолчанию."""
    return CalculatorSession()


class TestDefaults:
    """Тесты начального состояния"""

    def test_default_state(self, session) -> None:
        assert session.state == DEFAULT_STATE
        assert session.state.total_shares == 130
        assert session.link_error is False

    def test_default_result(self, session) -> None:
        result = session.result
        assert result.valid
        assert result.total == pytest.approx(3_692_307.69, abs=0.01)

    def test_default_input_echo(self, session) -> None:
        assert session.input_text("line_revenue") == "10000000"
        assert session.input_text("net_profit") == "40000000"
        assert session.input_text("major_shares") == "60"

    def test_initial_state_clamped(self) -> None:
        session = CalculatorSession(state=DEFAULT_STATE.with_updates(major_shares=200))
        assert session.state.major_shares == 130
        assert session.input_text("major_shares") == "130"


class TestSetInput:
    """Тесты set_input"""

    def test_revenue_input_parsed(self, session) -> None:
        session.set_input("line_revenue", "20,000,000")
        assert session.state.line_revenue == 20_000_000
        assert session.input_text("line_revenue") == "20,000,000"

    def test_invalid_text_degrades_to_zero(self, session) -> None:
        session.set_input("total_revenue", "abc")
        assert session.state.total_revenue == 0
        assert session.result.valid is False

    def test_line_revenue_above_total_invalid(self, session) -> None:
        session.set_input("line_revenue", "60000000")
        assert session.result.valid is False
        assert session.result.total == 0.0

    def test_minor_clamped_to_major(self, session) -> None:
        state = session.set_input("minor_shares", "70")

        assert state.minor_shares == 60
        assert session.input_text("minor_shares") == "60"
        assert session.last_input_status.valid is False
        assert session.last_input_status.message == MINOR_EXCEEDS_MAJOR_MESSAGE
        assert session.holdings_status.valid is True

    def test_major_clamped_to_total_shares(self, session) -> None:
        session.set_input("major_shares", "150")
        assert session.state.major_shares == 130
        assert session.input_text("major_shares") == "130"

    def test_total_shares_change_reclamps(self, session) -> None:
        session.set_input("minor_shares", "40")
        session.set_input("total_shares", "30")

        assert session.state.total_shares == 30
        assert session.state.major_shares == 30
        assert session.state.minor_shares == 30
        assert session.input_text("major_shares") == "30"
        assert session.input_text("total_shares") == "30"

    def test_reserve_warning(self, session) -> None:
        session.set_input("minor_shares", "56")
        status = session.holdings_status
        assert status.valid and status.warn
        assert session.result.minor == pytest.approx(session.result.total * 56 / 60)

    def test_custom_min_reserve(self) -> None:
        session = CalculatorSession(config=HoldingsConfig(min_reserve=20))
        session.set_input("minor_shares", "45")
        assert session.holdings_status.warn is True

    def test_fractional_shares_floored(self, session) -> None:
        session.set_input("major_shares", "59.9")
        assert session.state.major_shares == 59

    def test_unknown_field_rejected(self, session) -> None:
        with pytest.raises(UnknownInputFieldError, match="Unknown calculator input field"):
            session.set_input("dividend", "1")
        with pytest.raises(ValueError):
            session.input_text("dividend")

    def test_none_input_treated_as_empty(self, session) -> None:
        session.set_input("line_revenue", None)
        assert session.input_text("line_revenue") == ""
        assert session.state.line_revenue == 0


class TestNegativeNetProfitTyping:
    """Тесты промежуточного ввода отрицательной прибыли"""

    def test_minus_sign_kept_in_echo(self, session) -> None:
        session.set_input("net_profit", "-")

        assert session.input_text("net_profit") == "-"
        assert session.is_input_pending("net_profit")
        assert session.state.net_profit == 0
        assert session.net_profit_is_negative is False

    def test_empty_is_pending(self, session) -> None:
        session.set_input("net_profit", "")
        assert session.is_input_pending("net_profit")

    def test_negative_value_completed(self, session) -> None:
        session.set_input("net_profit", "-")
        session.set_input("net_profit", "-40000000")

        assert not session.is_input_pending("net_profit")
        assert session.net_profit_is_negative is True
        assert session.result.total == pytest.approx(-3_692_307.69, abs=0.01)

    def test_pending_only_for_net_profit(self, session) -> None:
        session.set_input("line_revenue", "")
        assert session.is_input_pending("line_revenue") is False

    def test_huge_net_profit_input(self, session) -> None:
        session.set_input("line_revenue", "50000000")
        session.set_input("major_shares", "130")
        session.set_input("minor_shares", "100")
        session.set_input("net_profit", "1e308")

        result = session.result
        assert result.valid
        assert result.major + result.minor == result.total
        assert result.minor == pytest.approx(1e308 * 100 / 130)


class TestShareLink:
    """Тесты ссылок"""

    def test_token_round_trip(self, session) -> None:
        session.set_input("net_profit", "-12345")
        session.set_input("minor_shares", "10")

        restored = CalculatorSession.from_link(token=session.share_fragment)

        assert restored.state == session.state
        assert restored.link_error is False

    def test_share_token_matches_state(self, session) -> None:
        assert session.share_token == "v1:5yc1s.tro8w.1bmoe8.3m.1o.0"
        assert session.share_fragment == "#" + session.share_token

    def test_legacy_query_fallback(self) -> None:
        restored = CalculatorSession.from_link(token="#garbage", query="?c=-100&minor=5")

        assert restored.state.net_profit == -100
        assert restored.state.minor_shares == 5
        assert restored.state.major_shares == DEFAULT_STATE.major_shares
        assert restored.link_error is False

    def test_unrecognised_link_keeps_defaults(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="dividend_split"):
            restored = CalculatorSession.from_link(token="v1:bad", query="x=1")

        assert restored.link_error is True
        assert restored.state == DEFAULT_STATE
        assert "could not be decoded" in caplog.text

    def test_no_link_is_not_an_error(self) -> None:
        restored = CalculatorSession.from_link()
        assert restored.link_error is False
        assert restored.state == DEFAULT_STATE

    def test_linked_state_is_clamped(self) -> None:
        restored = CalculatorSession.from_link(token="v1:0.0.0.a.z.z")
        assert restored.state.major_shares == 10
        assert restored.state.minor_shares == 10
        assert restored.last_input_status.valid is True

    def test_contract_violation_logged(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="dividend_split"):
            restored = CalculatorSession.from_link(query="d=0&major=10")

        assert "violates calculator_state contract" in caplog.text
        assert restored.state.total_shares == 0
        assert restored.state.major_shares == 0
        assert restored.result.valid is False

    @pytest.mark.parametrize(
        ("token", "field"),
        [
            ("v1:1.2.2." + "z" * 250 + ".1.0", "total_shares"),
            ("v1:" + "z" * 250 + ".1.0.1.1.0", "line_revenue"),
            ("v1:1.1." + "z" * 5000 + ".1.1.1", "net_profit"),
        ],
    )
    def test_oversized_token_fields_load(self, token: str, field: str) -> None:
        """Огромные поля ссылки загружаются как 0, без exception"""
        restored = CalculatorSession.from_link(token=token)
        assert restored.link_error is False
        assert getattr(restored.state, field) == 0
        assert restored.input_text(field) == "0"

    def test_load_state_replaces_echo(self, session) -> None:
        session.load_state(CalculatorState(line_revenue=5, total_revenue=10, major_shares=1))
        assert session.input_text("line_revenue") == "5"
        assert session.input_text("total_shares") == "130"
