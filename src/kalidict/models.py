from datetime import datetime
from enum import Enum
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


# --- Enums ---
class QuizMode(str, Enum):
    multiple_choice = "multiple-choice"
    written = "written"
    mixed = "mixed"


class QuestionType(str, Enum):
    multiple_choice = "multiple-choice"
    written = "written"


class Phase(str, Enum):
    initial = "initial"
    review = "review"


# --- Models ---
class Word(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Union[int, str]
    word: str
    meaning: str
    created_at: Optional[datetime] = None


class Option(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    is_correct: bool = False


class Prompt(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: QuestionType
    description: str
    question: str
    options: Tuple[Option, ...] = ()
    correct_response: str
    normalized_correct: Optional[str] = None
    source_word: Word


class SessionConfig(BaseModel):
    words: Tuple[Word, ...] = ()
    question_limit: int = Field(default=10, gt=0)
    mode: QuizMode = QuizMode.multiple_choice


class Session(BaseModel):
    """Immutable snapshot of a quiz session.

    Transitions build a new Session with ``model_copy(update=...)``; the
    input value is never changed.
    """

    model_config = ConfigDict(frozen=True)

    mode: QuizMode
    word_bank: Tuple[Word, ...] = ()
    remaining_words: Tuple[Word, ...] = ()
    total_questions: int = 0
    phase: Phase = Phase.initial
    missed_words: Tuple[Word, ...] = ()
    review_total: int = 0
    score: int = 0

    # Per-question state
    current_prompt: Optional[Prompt] = None
    correct_answer: str = ""
    question_answered: bool = False
    selected_option_id: Optional[str] = None
    similarity_score: Optional[int] = None
    is_correct: bool = False
    answer_feedback: str = ""

    test_complete: bool = False
