"""Durable, deduplicated storage of combination facts."""

from __future__ import annotations

import logging

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from core.errors import DuplicateError, StorageError
from graph.schemas import TripleRecord
from graph.stores.sql_store import SQLStore
from graph.types import Pair, Triple

logger = logging.getLogger("wg.store")


class TripleStore:
    """Stores triples keyed by canonical (unordered) pair.

    Every lookup and insert canonicalizes the pair first, so ``(a, b)`` and
    ``(b, a)`` address the same row. The unique index on the canonical pair
    decides which of several concurrent writers wins.
    """

    def __init__(self, sql_store: SQLStore) -> None:
        self.sql_store = sql_store
        try:
            self.sql_store.create_all()
        except SQLAlchemyError as exc:
            logger.error("cannot open %s: %s", sql_store.db_path, exc)
            raise StorageError(f"cannot open {sql_store.db_path}") from exc

    def find(self, a: str, b: str) -> str | None:
        """Return the stored result for the pair in either order, if any."""
        pair = Pair(a=a, b=b).canonical()
        stmt = select(TripleRecord.c).where(
            TripleRecord.a == pair.a, TripleRecord.b == pair.b
        )
        try:
            with self.sql_store.session() as sess:
                result = sess.execute(stmt).scalar_one_or_none()
        except (SQLAlchemyError, UnicodeEncodeError) as exc:
            logger.error("lookup failed for %s + %s: %s", pair.a, pair.b, exc)
            raise StorageError(f"lookup failed for {pair.a} + {pair.b}") from exc
        logger.debug("get: %s + %s -> %s", pair.a, pair.b, result)
        return result

    def insert(self, a: str, b: str, c: str) -> None:
        """Persist a new fact, raising DuplicateError if the pair is already stored."""
        pair = Pair(a=a, b=b).canonical()
        try:
            with self.sql_store.session() as sess:
                sess.add(TripleRecord(a=pair.a, b=pair.b, c=c))
                sess.flush()
        except IntegrityError as exc:
            logger.info("duplicate insert: %s + %s = %s", pair.a, pair.b, c)
            raise DuplicateError(pair.a, pair.b) from exc
        except (SQLAlchemyError, UnicodeEncodeError) as exc:
            logger.error("insert error for %s + %s = %s: %s", pair.a, pair.b, c, exc)
            raise StorageError(f"insert failed for {pair.a} + {pair.b}") from exc
        logger.info("inserted: %s + %s = %s", pair.a, pair.b, c)

    def all(self) -> list[Triple]:
        """Return every stored fact."""
        stmt = select(TripleRecord).order_by(TripleRecord.id)
        try:
            with self.sql_store.session() as sess:
                rows = sess.execute(stmt).scalars().all()
                return [self._to_triple(row) for row in rows]
        except SQLAlchemyError as exc:
            logger.error("failed to read triples: %s", exc)
            raise StorageError("failed to read triples") from exc

    def related(self, name: str, limit: int = 5) -> list[Triple]:
        """Return up to ``limit`` facts mentioning ``name`` in any position."""
        stmt = (
            select(TripleRecord)
            .where(
                or_(
                    TripleRecord.a == name,
                    TripleRecord.b == name,
                    TripleRecord.c == name,
                )
            )
            .order_by(TripleRecord.id)
            .limit(limit)
        )
        try:
            with self.sql_store.session() as sess:
                rows = sess.execute(stmt).scalars().all()
                return [self._to_triple(row) for row in rows]
        except (SQLAlchemyError, UnicodeEncodeError) as exc:
            logger.error("failed to read triples related to %s: %s", name, exc)
            raise StorageError(f"failed to read triples related to {name}") from exc

    def count(self) -> int:
        try:
            with self.sql_store.session() as sess:
                return int(sess.execute(select(func.count(TripleRecord.id))).scalar_one())
        except SQLAlchemyError as exc:
            raise StorageError("failed to count triples") from exc

    def clear(self) -> int:
        """Delete every stored fact. Administrative reset only."""
        try:
            with self.sql_store.session() as sess:
                removed = sess.execute(delete(TripleRecord)).rowcount
        except SQLAlchemyError as exc:
            logger.error("reset failed: %s", exc)
            raise StorageError("failed to clear triples") from exc
        logger.info("cleared %d triples", removed)
        return int(removed or 0)

    @staticmethod
    def _to_triple(row: TripleRecord) -> Triple:
        return Triple(a=row.a, b=row.b, c=row.c)
