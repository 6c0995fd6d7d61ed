"""SQLite word store for reviewed vocabulary."""

import datetime
import logging
import random
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from sqlalchemy import JSON, Integer, String, Text, TIMESTAMP, create_engine, func, or_, select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

from config import Config


logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


class WordRecord(Base):
    """A stored vocabulary card."""
    __tablename__ = "words"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    word: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)
    meaning: Mapped[str] = mapped_column(Text, nullable=False, default="")
    part_of_speech: Mapped[str] = mapped_column(String, nullable=False)
    forms: Mapped[dict[str, str]] = mapped_column(JSON, nullable=False, default=dict)
    stars: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
    import_date: Mapped[datetime.datetime] = mapped_column(
        TIMESTAMP, nullable=False, default=lambda: datetime.datetime.now(datetime.UTC), index=True
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "word": self.word,
            "meaning": self.meaning,
            "part_of_speech": self.part_of_speech,
            "forms": dict(self.forms or {}),
            "stars": self.stars,
            "import_date": self.import_date,
        }


class SortOrder(StrEnum):
    """Orderings for the review list."""

    IMPORT = auto()        # oldest first
    STARS = auto()         # most stars first
    ALPHABETICAL = auto()
    RANDOM = auto()


class DuplicateWordError(Exception):
    """The word is already stored."""


class UnknownWordIdError(KeyError):
    """No stored word has this id."""


@dataclass(frozen=True, slots=True)
class StoredWord:
    """Detached copy of a WordRecord row."""

    id: int
    word: str
    meaning: str
    part_of_speech: str
    forms: dict[str, str]
    stars: int
    import_date: datetime.datetime

    @classmethod
    def from_record(cls, record: WordRecord) -> "StoredWord":
        return cls(**record.to_dict())


def clamp_stars(stars: int) -> int:
    return max(Config.MIN_STARS, min(Config.MAX_STARS, stars))


class WordStore:
    """CRUD over the `words` table. Each call uses its own session."""

    def __init__(self, db_url: str | None = None) -> None:
        db_url = db_url or Config.db_url()
        kwargs: dict[str, Any] = {"echo": False}
        if db_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection so every session sees the same in-memory db
            kwargs.update(connect_args={"check_same_thread": False}, poolclass=StaticPool)
        self._engine = create_engine(db_url, **kwargs)
        Base.metadata.create_all(self._engine)
        self._Session = sessionmaker(bind=self._engine, expire_on_commit=False)

    def add_word(
        self,
        word: str,
        meaning: str,
        part_of_speech: str,
        forms: dict[str, str],
        stars: int = 0,
    ) -> StoredWord:
        """Insert a new word.

        Raises:
            DuplicateWordError: If the word is already stored.
        """
        with self._Session() as session:
            record = WordRecord(
                word=word,
                meaning=meaning or Config.NO_TRANSLATION,
                part_of_speech=part_of_speech,
                forms=dict(forms),
                stars=clamp_stars(stars),
            )
            session.add(record)
            try:
                session.commit()
            except IntegrityError as e:
                session.rollback()
                raise DuplicateWordError(f"Word '{word}' already exists") from e
            logger.info("Stored word %r (id=%s)", word, record.id)
            return StoredWord.from_record(record)

    def get_word(self, word_id: int) -> StoredWord:
        with self._Session() as session:
            record = session.get(WordRecord, word_id)
            if record is None:
                raise UnknownWordIdError(word_id)
            return StoredWord.from_record(record)

    def get_all_words(self) -> list[StoredWord]:
        """All words in insertion order."""
        with self._Session() as session:
            records = session.scalars(select(WordRecord).order_by(WordRecord.id)).all()
            return [StoredWord.from_record(r) for r in records]

    def list_words(self, sort: SortOrder | str = SortOrder.IMPORT) -> list[StoredWord]:
        """All words in review order."""
        words = self.get_all_words()
        match SortOrder(sort):
            case SortOrder.STARS:
                return sorted(words, key=lambda w: w.stars, reverse=True)
            case SortOrder.ALPHABETICAL:
                return sorted(words, key=lambda w: w.word)
            case SortOrder.RANDOM:
                shuffled = list(words)
                random.shuffle(shuffled)
                return shuffled
            case _:
                return sorted(words, key=lambda w: w.import_date)

    def search_words(self, query: str) -> list[StoredWord]:
        """Words whose spelling or meaning contains the query.

        An empty query returns every word.
        """
        query = query.strip().lower()
        if not query:
            return self.get_all_words()
        with self._Session() as session:
            stmt = (
                select(WordRecord)
                .where(or_(WordRecord.word.contains(query, autoescape=True),
                           WordRecord.meaning.contains(query, autoescape=True)))
                .order_by(WordRecord.id)
            )
            return [StoredWord.from_record(r) for r in session.scalars(stmt).all()]

    def existing_words(self) -> set[str]:
        with self._Session() as session:
            return {w.lower() for w in session.scalars(select(WordRecord.word)).all()}

    def update_stars(self, word_id: int, stars: int) -> StoredWord:
        """Set the star rating, clamped to MIN_STARS..MAX_STARS."""
        with self._Session() as session:
            record = session.get(WordRecord, word_id)
            if record is None:
                raise UnknownWordIdError(word_id)
            record.stars = clamp_stars(stars)
            session.commit()
            return StoredWord.from_record(record)

    def count(self) -> int:
        with self._Session() as session:
            return session.scalar(select(func.count()).select_from(WordRecord)) or 0

    def clear_all(self) -> int:
        """Delete every stored word; returns how many were removed."""
        with self._Session() as session:
            result = session.execute(delete(WordRecord))
            session.commit()
            logger.info("Cleared %d words", result.rowcount)
            return result.rowcount
