"""
SQLAlchemy column types for Money, exercised against in-memory SQLite.

A small product catalogue stores one price per column flavour:
- price          MinorUnitMoney("EUR")   BigInteger minor units
- list_price     CanonicalMoney()        "CODE AMOUNT" text
- approx_price   MajorUnitMoney("USD")   float major units
"""

from collections.abc import Iterator

import pytest
from sqlalchemy import String, create_engine, select, text
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from money_kernel.db.types import CanonicalMoney, MajorUnitMoney, MinorUnitMoney
from money_kernel.domain.values import Currency, Money
from money_kernel.exceptions import CurrencyMismatchError, CurrencyNotFoundError


class Base(DeclarativeBase):
    pass


class Product(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(50))
    price: Mapped[Money] = mapped_column(MinorUnitMoney("EUR"))
    list_price: Mapped[Money | None] = mapped_column(CanonicalMoney(), nullable=True)
    approx_price: Mapped[Money | None] = mapped_column(MajorUnitMoney("USD"), nullable=True)


@pytest.fixture
def session() -> Iterator[Session]:
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as s:
        yield s
    engine.dispose()


def _reload(session: Session, product_id: int) -> Product:
    session.expire_all()
    return session.get(Product, product_id)


class TestMinorUnitMoney:
    """BigInteger column in a fixed currency."""

    def test_round_trip(self, session):
        session.add(Product(id=1, name="t-shirt", price=Money.forge(1999, "EUR")))
        session.commit()
        assert _reload(session, 1).price == Money.forge(1999, "EUR")

    def test_stores_plain_integer(self, session):
        session.add(Product(id=1, name="t-shirt", price=Money.forge(-250, "EUR")))
        session.commit()
        raw = session.execute(text("SELECT price FROM products WHERE id = 1")).scalar_one()
        assert raw == -250

    def test_int64_max(self, session):
        session.add(Product(id=1, name="gold", price=Money.forge(2**63 - 1, "EUR")))
        session.commit()
        assert _reload(session, 1).price.amount == 2**63 - 1

    def test_query_by_value(self, session):
        session.add_all(
            [
                Product(id=1, name="a", price=Money.forge(100, "EUR")),
                Product(id=2, name="b", price=Money.forge(200, "EUR")),
            ]
        )
        session.commit()
        stmt = select(Product.name).where(Product.price == Money.forge(200, "EUR"))
        assert session.execute(stmt).scalars().all() == ["b"]

    def test_foreign_currency_is_refused(self):
        column_type = MinorUnitMoney("EUR")
        with pytest.raises(CurrencyMismatchError):
            column_type.process_bind_param(Money.forge(1, "USD"), None)

    def test_non_money_is_refused(self):
        with pytest.raises(TypeError):
            MinorUnitMoney("EUR").process_bind_param(100, None)

    def test_accepts_currency_object(self):
        assert MinorUnitMoney(Currency.by_iso_code("JPY")).currency.code == "JPY"

    def test_unknown_column_currency(self):
        with pytest.raises(CurrencyNotFoundError):
            MinorUnitMoney("ZZZ")


class TestCanonicalMoney:
    """Text column carrying its own currency."""

    def test_round_trip_keeps_currency(self, session):
        session.add(
            Product(
                id=1,
                name="mug",
                price=Money.forge(900, "EUR"),
                list_price=Money.forge(1099, "GBP"),
            )
        )
        session.commit()
        assert _reload(session, 1).list_price == Money.forge(1099, "GBP")

    def test_stored_text(self, session):
        session.add(
            Product(id=1, name="mug", price=Money.forge(900, "EUR"), list_price=Money.forge(5, "JPY"))
        )
        session.commit()
        raw = session.execute(text("SELECT list_price FROM products WHERE id = 1")).scalar_one()
        assert raw == "JPY 5"

    def test_null(self, session):
        session.add(Product(id=1, name="mug", price=Money.forge(900, "EUR")))
        session.commit()
        assert _reload(session, 1).list_price is None

    def test_bare_integer_row_uses_default(self, session):
        session.execute(
            text("INSERT INTO products (id, name, price, list_price) VALUES (1, 'old', 1, '777')")
        )
        session.commit()
        assert _reload(session, 1).list_price == Money.forge(777, "EUR")

    def test_bare_integer_row_uses_fallback(self):
        column_type = CanonicalMoney(fallback_currency="USD")
        assert column_type.process_result_value("777", None) == Money.forge(777, "USD")


class TestMajorUnitMoney:
    """Float column in a fixed currency."""

    def test_round_trip(self, session):
        session.add(
            Product(
                id=1,
                name="cap",
                price=Money.forge(1, "EUR"),
                approx_price=Money.forge(12345, "USD"),
            )
        )
        session.commit()
        assert _reload(session, 1).approx_price == Money.forge(12345, "USD")

    def test_stores_major_units(self, session):
        session.add(
            Product(id=1, name="cap", price=Money.forge(1, "EUR"), approx_price=Money.forge(150, "USD"))
        )
        session.commit()
        raw = session.execute(text("SELECT approx_price FROM products WHERE id = 1")).scalar_one()
        assert raw == 1.5

    def test_foreign_currency_is_refused(self):
        with pytest.raises(CurrencyMismatchError):
            MajorUnitMoney("USD").process_bind_param(Money.forge(1, "EUR"), None)
