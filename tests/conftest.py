import random

import pytest

from kalidict import database
from kalidict.config import settings
from kalidict.models import Word

SAMPLE_WORDS = [
    ("Hund", "dog"),
    ("Katze", "cat"),
    ("Baum", "tree"),
    ("Haus", "house"),
    ("Wasser", "water"),
    ("Brot", "bread"),
]


def make_words(count=len(SAMPLE_WORDS)):
    return [
        Word(id=i + 1, word=word, meaning=meaning)
        for i, (word, meaning) in enumerate(SAMPLE_WORDS[:count])
    ]


@pytest.fixture
def words():
    return make_words()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def db(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DB_DIR", str(tmp_path / "db"))
    database.init_db()
    return database.db_path()
