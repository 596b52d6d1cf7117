"""Unit Tests for the Stock, StockUnit, User and SessionState models"""
import pytest
from pydantic import ValidationError

from stock_tracker.core.exceptions import InvalidInputError, ParseError
from stock_tracker.models import SessionState, Stock, StockProperty, StockUnit, User, UserProperty


class TestStock:

    def test_from_ticker_defaults(self):
        stock = Stock.from_ticker("FOO")
        assert stock.ticker == "FOO"
        assert stock.company_name == ""
        assert stock.value == 0.0

    def test_empty_ticker_rejected(self):
        with pytest.raises(InvalidInputError):
            Stock.from_ticker("  ")

    @pytest.mark.parametrize("name,expected", [
        ("t", StockProperty.TICKER),
        ("TICKER", StockProperty.TICKER),
        ("cn", StockProperty.COMPANY_NAME),
        ("company_name", StockProperty.COMPANY_NAME),
        ("Company-Name", StockProperty.COMPANY_NAME),
        ("price", StockProperty.VALUE),
        ("V", StockProperty.VALUE),
    ])
    def test_resolve_property(self, name, expected):
        assert Stock.resolve_property(name) is expected

    def test_unknown_property(self):
        with pytest.raises(InvalidInputError) as exc_info:
            Stock.resolve_property("colour")
        assert "colour" in str(exc_info.value)

    def test_set_value_parses_float(self):
        stock = Stock.from_ticker("FOO")
        stock.set_property(StockProperty.VALUE, "12.5")
        assert stock.value == 12.5

    def test_set_value_rejects_text(self):
        stock = Stock.from_ticker("FOO")
        with pytest.raises(ParseError) as exc_info:
            stock.set_property(StockProperty.VALUE, "cheap")
        assert exc_info.value.value == "cheap"
        assert exc_info.value.expected == "float"
        assert stock.value == 0.0

    @pytest.mark.parametrize("raw", ["nan", "NaN", "inf", "-Infinity", "1e400"])
    def test_set_value_rejects_non_finite(self, raw):
        stock = Stock.from_ticker("FOO")
        with pytest.raises(ParseError) as exc_info:
            stock.set_property(StockProperty.VALUE, raw)
        assert exc_info.value.value == raw
        assert stock.value == 0.0

    def test_non_finite_value_rejected_on_construction(self):
        with pytest.raises(ValidationError):
            Stock(ticker="FOO", value=float("inf"))

    def test_str(self):
        stock = Stock(ticker="FOO", company_name="Foo Inc", value=3.456)
        assert str(stock) == "FOO (Foo Inc): 3.46"


class TestStockUnit:

    def test_add_increments(self):
        unit = StockUnit(stock=Stock.from_ticker("FOO"), quantity=2)
        unit.add(3)
        assert unit.quantity == 5

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_add_rejects_non_positive(self, quantity):
        unit = StockUnit(stock=Stock.from_ticker("FOO"), quantity=2)
        with pytest.raises(InvalidInputError):
            unit.add(quantity)
        assert unit.quantity == 2

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            StockUnit(stock=Stock.from_ticker("FOO"), quantity=0)


class TestUser:

    def test_from_username_defaults(self):
        user = User.from_username("alice")
        assert user.username == "alice"
        assert user.first_name == user.last_name == user.middle_initial == ""
        assert user.portfolio is None

    def test_add_stock_accumulates(self):
        user = User.from_username("alice")
        foo = Stock(ticker="FOO", value=10.0)
        user.add_stock(foo, 5)
        user.add_stock(foo, 3)
        assert list(user.portfolio) == ["FOO"]
        assert user.portfolio["FOO"].quantity == 8

    def test_add_stock_keeps_snapshot(self):
        user = User.from_username("alice")
        foo = Stock(ticker="FOO", value=10.0)
        user.add_stock(foo, 1)
        foo.value = 99.0
        assert user.portfolio["FOO"].stock.value == 10.0

    @pytest.mark.parametrize("quantity", [0, -4])
    def test_add_stock_rejects_non_positive(self, quantity):
        user = User.from_username("alice")
        with pytest.raises(InvalidInputError):
            user.add_stock(Stock.from_ticker("FOO"), quantity)
        assert user.portfolio is None

    def test_rejected_increment_leaves_unit(self):
        user = User.from_username("alice")
        user.add_stock(Stock.from_ticker("FOO"), 5)
        with pytest.raises(InvalidInputError):
            user.add_stock(Stock.from_ticker("FOO"), 0)
        assert user.portfolio["FOO"].quantity == 5

    @pytest.mark.parametrize("name,expected", [
        ("fn", UserProperty.FIRST_NAME),
        ("First-Name", UserProperty.FIRST_NAME),
        ("first_name", UserProperty.FIRST_NAME),
        ("ln", UserProperty.LAST_NAME),
        ("MI", UserProperty.MIDDLE_INITIAL),
        ("username", UserProperty.USERNAME),
        ("u", UserProperty.USERNAME),
    ])
    def test_resolve_property(self, name, expected):
        assert User.resolve_property(name) is expected

    def test_unknown_property(self):
        with pytest.raises(InvalidInputError):
            User.resolve_property("portfolio")

    def test_empty_username_rejected(self):
        user = User.from_username("alice")
        with pytest.raises(InvalidInputError):
            user.set_property(UserProperty.USERNAME, "")
        assert user.username == "alice"

    def test_str(self):
        user = User(username="alice", first_name="Alice", middle_initial="B", last_name="Cole")
        assert str(user) == "alice: Alice B Cole"
        assert str(User.from_username("bob")) == "bob"

    def test_json_shape(self):
        user = User.from_username("alice")
        user.add_stock(Stock(ticker="FOO", company_name="Foo", value=1.5), 2)
        dumped = user.model_dump(mode="json")
        assert dumped["portfolio"]["FOO"] == {
            "stock": {"ticker": "FOO", "company_name": "Foo", "value": 1.5},
            "quantity": 2,
        }


class TestSessionState:

    def test_defaults_logged_out(self):
        state = SessionState()
        assert state.logged_in is False
        assert state.current_user is None

    def test_inconsistent_state_rejected(self):
        with pytest.raises(ValidationError):
            SessionState(logged_in=True)
        with pytest.raises(ValidationError):
            SessionState(logged_in=False, current_user="alice")
