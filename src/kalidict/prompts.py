"""Question builders for multiple-choice and written prompts."""

import random
from typing import List, Optional, Sequence, TypeVar, Union

from .models import Option, Prompt, QuestionType, QuizMode, Word
from .similarity import normalize

T = TypeVar("T")

NUM_DISTRACTORS = 3
MULTIPLE_CHOICE_DESCRIPTION = "What is the meaning of:"
WRITTEN_DESCRIPTION = "Type the word for this meaning:"


def shuffle(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a uniformly shuffled copy of ``items`` (Fisher-Yates)."""
    rng = rng or random
    copy = list(items)
    for i in range(len(copy) - 1, 0, -1):
        j = rng.randrange(i + 1)
        copy[i], copy[j] = copy[j], copy[i]
    return copy


def resolve_question_type(
    mode: Union[QuizMode, str], rng: Optional[random.Random] = None
) -> QuestionType:
    """Pick the question type for one prompt; ``mixed`` flips a coin each call."""
    mode = QuizMode(mode)
    if mode == QuizMode.mixed:
        rng = rng or random
        if rng.random() < 0.5:
            return QuestionType.multiple_choice
        return QuestionType.written
    return QuestionType(mode.value)


def create_multiple_choice_prompt(
    correct_word: Word,
    word_pool: Sequence[Word],
    rng: Optional[random.Random] = None,
) -> Prompt:
    candidates = [w for w in word_pool if w.id != correct_word.id]
    distractors = shuffle(candidates, rng)[:NUM_DISTRACTORS]

    options = [
        Option(
            id=f"correct-{correct_word.id}",
            label=correct_word.meaning,
            is_correct=True,
        )
    ]
    for index, word in enumerate(distractors):
        options.append(
            Option(
                id=f"incorrect-{correct_word.id}-{index}",
                label=word.meaning,
                is_correct=False,
            )
        )

    return Prompt(
        type=QuestionType.multiple_choice,
        description=MULTIPLE_CHOICE_DESCRIPTION,
        question=correct_word.word,
        options=tuple(shuffle(options, rng)),
        correct_response=correct_word.meaning,
        source_word=correct_word,
    )


def create_written_prompt(word: Word) -> Prompt:
    return Prompt(
        type=QuestionType.written,
        description=WRITTEN_DESCRIPTION,
        question=word.meaning,
        correct_response=word.word,
        normalized_correct=normalize(word.word),
        source_word=word,
    )


def create_prompt(
    word: Word,
    question_type: Union[QuestionType, str],
    word_pool: Sequence[Word],
    rng: Optional[random.Random] = None,
) -> Prompt:
    if QuestionType(question_type) == QuestionType.written:
        return create_written_prompt(word)
    return create_multiple_choice_prompt(word, word_pool, rng)
