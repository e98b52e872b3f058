"""Tests for prompt generation and shuffling."""

import random
from collections import Counter

import pytest

from conftest import make_words
from kalidict.models import QuestionType, QuizMode
from kalidict.prompts import (
    create_multiple_choice_prompt,
    create_prompt,
    create_written_prompt,
    resolve_question_type,
    shuffle,
)


class TestShuffle:
    def test_returns_permuted_copy(self, rng):
        items = [1, 2, 3, 4, 5]
        result = shuffle(items, rng)
        assert sorted(result) == items
        assert items == [1, 2, 3, 4, 5]

    def test_uniform_permutations(self):
        rng = random.Random(1)
        counts = Counter(tuple(shuffle([0, 1, 2], rng)) for _ in range(6000))
        assert len(counts) == 6
        for count in counts.values():
            assert 850 <= count <= 1150

    def test_empty(self, rng):
        assert shuffle([], rng) == []


class TestResolveQuestionType:
    def test_fixed_modes(self):
        assert resolve_question_type("written") == QuestionType.written
        assert resolve_question_type(QuizMode.multiple_choice) == (
            QuestionType.multiple_choice
        )

    def test_mixed_picks_both(self, rng):
        picks = {resolve_question_type(QuizMode.mixed, rng) for _ in range(100)}
        assert picks == {QuestionType.multiple_choice, QuestionType.written}


class TestMultipleChoicePrompt:
    @pytest.mark.parametrize("pool_size, expected", [(1, 1), (2, 2), (3, 3), (4, 4), (6, 4)])
    def test_option_count(self, rng, pool_size, expected):
        pool = make_words(pool_size)
        prompt = create_multiple_choice_prompt(pool[0], pool, rng)
        assert len(prompt.options) == expected
        assert sum(o.is_correct for o in prompt.options) == 1

    def test_prompt_fields(self, words, rng):
        target = words[2]
        prompt = create_multiple_choice_prompt(target, words, rng)
        assert prompt.type == QuestionType.multiple_choice
        assert prompt.description == "What is the meaning of:"
        assert prompt.question == "Baum"
        assert prompt.correct_response == "tree"
        assert prompt.source_word == target
        assert prompt.normalized_correct is None

        correct = next(o for o in prompt.options if o.is_correct)
        assert correct.id == "correct-3"
        assert correct.label == "tree"

    def test_distractors_exclude_target(self, words, rng):
        target = words[0]
        for _ in range(20):
            prompt = create_multiple_choice_prompt(target, words, rng)
            wrong = [o for o in prompt.options if not o.is_correct]
            assert all(o.label != target.meaning for o in wrong)
            assert {o.id for o in wrong} == {
                f"incorrect-{target.id}-{i}" for i in range(3)
            }
            assert len({o.label for o in prompt.options}) == 4

    def test_correct_option_position_varies(self, words):
        rng = random.Random(7)
        positions = Counter()
        for _ in range(400):
            prompt = create_multiple_choice_prompt(words[0], words, rng)
            positions[next(i for i, o in enumerate(prompt.options) if o.is_correct)] += 1
        assert set(positions) == {0, 1, 2, 3}


class TestWrittenPrompt:
    def test_prompt_fields(self, words):
        prompt = create_written_prompt(words[0])
        assert prompt.type == QuestionType.written
        assert prompt.description == "Type the word for this meaning:"
        assert prompt.question == "dog"
        assert prompt.correct_response == "Hund"
        assert prompt.normalized_correct == "hund"
        assert prompt.options == ()

    def test_create_prompt_dispatch(self, words, rng):
        assert create_prompt(words[0], "written", words, rng).type == QuestionType.written
        assert (
            create_prompt(words[0], QuestionType.multiple_choice, words, rng).type
            == QuestionType.multiple_choice
        )
