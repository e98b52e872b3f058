"""Quiz session state machine.

A session runs in two phases. The initial phase asks every selected word
once; the review phase re-asks the words missed during the initial phase,
once, before the session is marked complete. Every function here takes a
:class:`~kalidict.models.Session` and returns a new one. Calls that do not
apply to the current state (no prompt, wrong prompt type, already answered)
return the session unchanged.
"""

import logging
import math
import random
from typing import Any, Dict, Optional, Tuple, Union

from .models import Option, Phase, QuestionType, Session, SessionConfig, Word
from .prompts import create_prompt, resolve_question_type, shuffle
from .similarity import normalize, similarity

logger = logging.getLogger(__name__)

CORRECT_THRESHOLD = 0.95
CLOSE_THRESHOLD = 0.80

FEEDBACK_CHOICE_CORRECT = "Great job!"
FEEDBACK_CHOICE_WRONG = "Not quite. Keep practicing!"
FEEDBACK_PERFECT = "Perfect!"
FEEDBACK_CLOSE = "Close! Double-check the spelling."
FEEDBACK_SPELLING = "Keep practicing that spelling."

_QUESTION_RESET: Dict[str, Any] = {
    "question_answered": False,
    "selected_option_id": None,
    "similarity_score": None,
    "is_correct": False,
    "answer_feedback": "",
}


def start_session(
    config: Union[SessionConfig, Dict[str, Any], None] = None,
    rng: Optional[random.Random] = None,
    **options: Any,
) -> Session:
    """Create a session and load its first prompt.

    Accepts a :class:`SessionConfig`, a mapping of its fields, or the fields
    as keyword arguments (``words``, ``question_limit``, ``mode``).
    """
    if config is None:
        config = SessionConfig(**options)
    elif not isinstance(config, SessionConfig):
        config = SessionConfig(**config)

    total_questions = min(config.question_limit, len(config.words))
    selected = shuffle(config.words, rng)[:total_questions]

    session = Session(
        mode=config.mode,
        word_bank=tuple(config.words),
        remaining_words=tuple(selected),
        total_questions=total_questions,
        test_complete=total_questions == 0,
    )
    logger.info(
        f"Session started: {total_questions} questions from "
        f"{len(config.words)} words [mode={config.mode.value}]"
    )
    return load_next_prompt(session, rng)


def _with_prompt(
    session: Session, word: Word, rng: Optional[random.Random], **changes: Any
) -> Session:
    question_type = resolve_question_type(session.mode, rng)
    prompt = create_prompt(word, question_type, session.word_bank, rng)
    return session.model_copy(
        update={
            **changes,
            "current_prompt": prompt,
            "correct_answer": prompt.correct_response,
            "test_complete": False,
        }
    )


def load_next_prompt(
    session: Session, rng: Optional[random.Random] = None
) -> Session:
    """Advance to the next prompt, entering review or finishing as needed."""
    base = session.model_copy(update=_QUESTION_RESET)

    if base.remaining_words:
        # Words are consumed from the end of the shuffled sequence.
        return _with_prompt(
            base,
            base.remaining_words[-1],
            rng,
            remaining_words=base.remaining_words[:-1],
        )

    if base.phase == Phase.initial and base.missed_words:
        review_words = shuffle(base.missed_words, rng)
        logger.info(f"Entering review with {len(review_words)} missed words")
        return _with_prompt(
            base,
            review_words[-1],
            rng,
            phase=Phase.review,
            review_total=len(base.missed_words),
            remaining_words=tuple(review_words[:-1]),
        )

    if not base.test_complete:
        logger.info(f"Session complete: score {base.score}/{base.total_questions}")
    return base.model_copy(
        update={"current_prompt": None, "correct_answer": "", "test_complete": True}
    )


def _accepts_answer(session: Session, question_type: QuestionType) -> bool:
    prompt = session.current_prompt
    return (
        prompt is not None
        and prompt.type == question_type
        and not session.question_answered
    )


def _scored(session: Session, is_correct: bool) -> Dict[str, Any]:
    """Score and missed-word changes for an answer; both apply to the initial phase only."""
    if session.phase != Phase.initial:
        return {}
    if is_correct:
        return {"score": session.score + 1}

    word = session.current_prompt.source_word
    if any(missed.id == word.id for missed in session.missed_words):
        return {}
    return {"missed_words": session.missed_words + (word,)}


def answer_multiple_choice(session: Session, option: Option) -> Session:
    if not _accepts_answer(session, QuestionType.multiple_choice):
        return session

    is_correct = bool(option.is_correct)
    return session.model_copy(
        update={
            **_scored(session, is_correct),
            "question_answered": True,
            "selected_option_id": option.id,
            "is_correct": is_correct,
            "answer_feedback": (
                FEEDBACK_CHOICE_CORRECT if is_correct else FEEDBACK_CHOICE_WRONG
            ),
        }
    )


def _written_feedback(score: float) -> str:
    if score >= CORRECT_THRESHOLD:
        return FEEDBACK_PERFECT
    if score >= CLOSE_THRESHOLD:
        return FEEDBACK_CLOSE
    return FEEDBACK_SPELLING


def answer_written(session: Session, raw_answer: Optional[str]) -> Session:
    if not _accepts_answer(session, QuestionType.written):
        return session

    normalized_input = normalize(raw_answer)
    if not normalized_input:
        return session

    score = similarity(normalized_input, session.current_prompt.normalized_correct)
    is_correct = score >= CORRECT_THRESHOLD
    return session.model_copy(
        update={
            **_scored(session, is_correct),
            "question_answered": True,
            "is_correct": is_correct,
            # Half rounds up.
            "similarity_score": int(math.floor(score * 100 + 0.5)),
            "answer_feedback": _written_feedback(score),
        }
    )


def progress(session: Session) -> Tuple[int, int]:
    """Return ``(position, total)`` of the current prompt within its phase.

    The count restarts when the session enters review.
    """
    if session.phase == Phase.review:
        total = session.review_total
    else:
        total = session.total_questions
    if session.test_complete:
        return total, total
    return total - len(session.remaining_words), total
