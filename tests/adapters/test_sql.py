import io
import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

from sqlalchemy import Column, String, create_engine, select
from sqlalchemy.orm import Session, declarative_base

from rapidid.adapters.sql import (
    IdentifierMixin,
    IdentifierType,
    id_column,
    register_asyncpg_codec,
    scan,
    to_db_value,
)
from rapidid.codec.identifier import Identifier, new
from rapidid.errors import (
    BytesSizeMismatchError,
    InvalidEncodingError,
    PrefixInvalidError,
    UnsupportedScanTypeError,
)
from tests.helpers import FIXED_TIME, ZERO_PAYLOAD

Base = declarative_base()


class Account(IdentifierMixin, Base):
    __tablename__ = "account"
    id_prefix = "acc"

    name = Column(String(50))


class Ledger(Base):
    __tablename__ = "ledger"

    id = id_column()
    owner_id = Column(IdentifierType(), nullable=True)


class TestScan(unittest.TestCase):
    def test_value(self):
        identifier = new("acc")
        self.assertEqual(to_db_value(identifier), identifier.bytes())

    def test_empty_values(self):
        self.assertIsNone(scan(None))
        self.assertIsNone(scan(b""))
        self.assertIsNone(scan(""))

    def test_binary_lengths(self):
        self.assertEqual(scan(ZERO_PAYLOAD), Identifier(ZERO_PAYLOAD))
        prefixed = b"acc-" + ZERO_PAYLOAD
        self.assertEqual(scan(bytearray(prefixed)).prefix, "acc")
        self.assertEqual(scan(memoryview(prefixed)).bytes(), prefixed)

    def test_buffered_bytes(self):
        identifier = new("acc")
        self.assertEqual(scan(io.BytesIO(identifier.bytes())), identifier)

    def test_text_lengths(self):
        plain = new(timestamp=FIXED_TIME)
        prefixed = new("rid", timestamp=FIXED_TIME)
        self.assertEqual(scan(plain.to_text()), plain)
        self.assertEqual(scan(prefixed.to_text()), prefixed)
        self.assertEqual(scan(prefixed.to_text().encode("ascii")), prefixed)

    def test_other_lengths(self):
        for value in [bytes(18), bytes(20), "1" * 24, "1" * 27, "1" * 31]:
            with self.subTest(length=len(value)):
                with self.assertRaises(BytesSizeMismatchError):
                    scan(value)

    def test_text_lengths_after_rollover(self):
        later = datetime(2026, 12, 1, tzinfo=timezone.utc)
        plain = new(timestamp=later)
        prefixed = new("acc", timestamp=later)

        self.assertEqual(len(plain.to_text()), 26)
        self.assertEqual(len(prefixed.to_text()), 30)
        self.assertEqual(scan(plain.to_text()), plain)
        self.assertEqual(scan(prefixed.to_text()), prefixed)
        self.assertEqual(scan(prefixed.to_text().encode("ascii")), prefixed)

    def test_non_ascii_text(self):
        with self.assertRaises(InvalidEncodingError):
            scan(b"\xff" * 25)

    def test_unsupported_type(self):
        for value in [123, 1.5, ["x"], object()]:
            with self.subTest(value=value):
                with self.assertRaises(UnsupportedScanTypeError) as ctx:
                    scan(value)
                self.assertIsInstance(ctx.exception, TypeError)


class TestAsyncpgCodec(unittest.IsolatedAsyncioTestCase):
    async def test_register(self):
        conn = AsyncMock()
        await register_asyncpg_codec(conn)

        conn.set_type_codec.assert_awaited_once()
        args, kwargs = conn.set_type_codec.call_args
        self.assertEqual(args, ("bytea",))
        self.assertEqual(kwargs["schema"], "pg_catalog")
        self.assertEqual(kwargs["format"], "binary")

        identifier = new("acc")
        encoded = kwargs["encoder"](identifier)
        self.assertEqual(encoded, identifier.bytes())
        self.assertEqual(kwargs["encoder"](bytearray(b"raw")), b"raw")
        self.assertEqual(kwargs["decoder"](encoded), identifier)
        self.assertEqual(kwargs["decoder"](b"not an id"), b"not an id")
        not_an_id = b"\xff" * 23
        self.assertEqual(kwargs["decoder"](not_an_id), not_an_id)


class TestSQLAlchemy(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine("sqlite://")
        Base.metadata.create_all(self.engine)
        self.addCleanup(self.engine.dispose)

    def test_default_id_is_generated(self):
        with Session(self.engine) as session:
            account = Account(name="alice")
            session.add(account)
            session.commit()
            account_id = account.id

        self.assertIsInstance(account_id, Identifier)
        self.assertEqual(account_id.prefix, "acc")

        with Session(self.engine) as session:
            loaded = session.get(Account, account_id)
            self.assertEqual(loaded.name, "alice")
            self.assertEqual(loaded.id, account_id)

    def test_filter_by_text(self):
        with Session(self.engine) as session:
            account = Account(name="bob")
            session.add(account)
            session.commit()
            text = str(account.id)

        with Session(self.engine) as session:
            loaded = session.scalars(select(Account).where(Account.id == text)).one()
            self.assertEqual(loaded.name, "bob")

    def test_rows_sort_by_creation_time(self):
        ids = [
            new("acc", timestamp=FIXED_TIME + timedelta(seconds=i)) for i in range(5)
        ]
        with Session(self.engine) as session:
            for index, identifier in enumerate(reversed(ids)):
                session.add(Account(id=identifier, name=f"user{index}"))
            session.commit()

            ordered = session.scalars(select(Account.id).order_by(Account.id)).all()
        self.assertEqual(ordered, ids)

    def test_unprefixed_column_and_nulls(self):
        with Session(self.engine) as session:
            ledger = Ledger()
            session.add(ledger)
            session.commit()
            self.assertEqual(ledger.id.prefix, "")
            self.assertIsNone(ledger.owner_id)

    def test_id_column_rejects_bad_prefix(self):
        with self.assertRaises(PrefixInvalidError):
            id_column("toolong")

    def test_python_type(self):
        self.assertIs(IdentifierType().python_type, Identifier)


if __name__ == "__main__":
    unittest.main()
