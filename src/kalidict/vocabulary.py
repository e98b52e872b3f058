import glob
import logging
import os
from typing import Dict, List

import pandas as pd

from .repository import WordRepository

logger = logging.getLogger(__name__)

MEANING_COLUMNS = ("meaning", "translation")


class VocabularyLoader:
    """Seeds the word store from CSV files in a directory."""

    def __init__(self, directory: str, repository: WordRepository):
        self.directory = directory
        self.repository = repository

    def read_all(self) -> Dict[str, List[Dict[str, str]]]:
        vocab_sets: Dict[str, List[Dict[str, str]]] = {}
        if not os.path.isdir(self.directory):
            logger.warning(f"Vocabulary directory {self.directory} not found.")
            return vocab_sets

        csv_files = sorted(glob.glob(os.path.join(self.directory, "*.csv")))
        for file_path in csv_files:
            file_name = os.path.splitext(os.path.basename(file_path))[0]
            try:
                df = pd.read_csv(file_path, encoding="utf-8", dtype=str)
            except (OSError, ValueError) as e:
                logger.error(f"Failed to load {file_path}: {e}")
                continue

            meaning_column = next(
                (c for c in MEANING_COLUMNS if c in df.columns), None
            )
            if "word" not in df.columns or meaning_column is None:
                logger.error(f"Skipping {file_name}: Missing columns.")
                continue

            df = df.rename(columns={meaning_column: "meaning"})
            df = df[["word", "meaning"]].fillna("")
            vocab_sets[file_name] = df.to_dict("records")
            logger.info(f"Loaded {len(df)} words from {file_name}")

        return vocab_sets

    def seed(self) -> int:
        """Import every CSV word not already stored."""
        added = 0
        for words in self.read_all().values():
            added += self.repository.import_words(words, only_add_missing=True)
        return added
