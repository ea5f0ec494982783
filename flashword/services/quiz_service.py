"""
Quiz Service - builds flashcard decks, multiple-choice quizzes and
matching rounds from the vocabulary store.

Holds only game state; rendering and user feedback belong to the caller.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..config import Config
from ..models import Word
from .vocabulary_store import VocabularyStore

logger = logging.getLogger(__name__)


class MatchKind(Enum):
    """Side of a matching pair."""
    WORD = "word"
    TRANSLATION = "translation"


@dataclass
class QuizQuestion:
    """Multiple-choice question for one word."""

    word: Word
    options: List[str]
    correct_answer: str

    def is_correct(self, answer: str) -> bool:
        return answer == self.correct_answer


class MultipleChoiceSession:
    """
    Walks through a list of questions, one answer per question.

    Usage:
        session = MultipleChoiceSession(quiz.build_multiple_choice())
        session.answer(session.current.options[0])
        session.next()
    """

    def __init__(self, questions: List[QuizQuestion]):
        self.questions = list(questions)
        self.index = 0
        self.score = 0
        self._answers: Dict[int, str] = {}

    @property
    def current(self) -> Optional[QuizQuestion]:
        if self.index >= len(self.questions):
            return None
        return self.questions[self.index]

    @property
    def is_answered(self) -> bool:
        return self.index in self._answers

    @property
    def is_finished(self) -> bool:
        """True once the last question has been answered."""
        if not self.questions:
            return True
        return self.index == len(self.questions) - 1 and self.is_answered

    def answer(self, option: str) -> bool:
        """
        Answer the current question.

        Returns:
            True if correct. A second answer to the same question is
            ignored and returns False.
        """
        question = self.current
        if question is None or self.is_answered:
            return False
        self._answers[self.index] = option
        if question.is_correct(option):
            self.score += 1
            return True
        return False

    def next(self) -> bool:
        """Advance once the current question is answered. False at the end."""
        if not self.is_answered or self.index >= len(self.questions) - 1:
            return False
        self.index += 1
        return True


@dataclass
class MatchItem:
    """One tile of a matching round."""

    id: int
    text: str
    kind: MatchKind
    original_id: int
    is_matched: bool = False


@dataclass
class MatchingRound:
    """Shuffled word and translation tiles to be paired up."""

    items: List[MatchItem] = field(default_factory=list)
    total_pairs: int = 0
    matched_pairs: int = 0

    @property
    def is_completed(self) -> bool:
        return self.matched_pairs == self.total_pairs

    def get_item(self, item_id: int) -> Optional[MatchItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def try_match(self, first_id: int, second_id: int) -> bool:
        """
        Try to pair two tiles.

        A match needs two distinct unmatched tiles of different kinds that
        come from the same word. Both are marked matched on success.
        """
        first = self.get_item(first_id)
        second = self.get_item(second_id)
        if first is None or second is None or first.id == second.id:
            return False
        if first.is_matched or second.is_matched:
            return False
        if first.original_id != second.original_id or first.kind == second.kind:
            return False

        first.is_matched = True
        second.is_matched = True
        self.matched_pairs += 1
        return True


class QuizService:
    """
    Builds study material from a VocabularyStore.

    Args:
        store: Vocabulary store to draw words from
        rng: Random source for option and tile order
        matching_pairs: Default number of pairs in a matching round
        distractor_count: Incorrect options per multiple-choice question
    """

    def __init__(
        self,
        store: VocabularyStore,
        rng: Optional[random.Random] = None,
        matching_pairs: int = Config.MATCHING_PAIRS,
        distractor_count: int = Config.CHOICE_OPTIONS,
    ):
        self.store = store
        self._rng = rng or random.Random()
        self.matching_pairs = matching_pairs
        self.distractor_count = distractor_count

    @classmethod
    def from_config(
        cls,
        store: VocabularyStore,
        config: Config,
        rng: Optional[random.Random] = None,
    ) -> "QuizService":
        return cls(
            store,
            rng=rng,
            matching_pairs=config.MATCHING_PAIRS,
            distractor_count=config.CHOICE_OPTIONS,
        )

    def flashcard_deck(self, module_id: Optional[int] = None, shuffle: bool = False) -> List[Word]:
        """
        Words to review as flashcards.

        Args:
            module_id: Module to study; the first module when None
            shuffle: Randomize card order

        Returns:
            Words of the module (empty if it does not exist)
        """
        if module_id is None:
            modules = self.store.get_all_modules()
            if not modules:
                return []
            module_id = modules[0].id

        words = self.store.get_words_by_module_id(module_id)
        if shuffle:
            self._rng.shuffle(words)
        return words

    def build_question(self, word: Word) -> QuizQuestion:
        """
        Question for one word with shuffled distractor translations.

        Distractors never repeat each other or the correct translation, so
        a small or repetitive vocabulary can yield fewer options.
        """
        options = [word.translation]
        if self.distractor_count > 0:
            # draw the whole pool in random order, keep the first distinct translations
            for candidate in self.store.get_random_words_excluding(self.store.word_count, word.id):
                if candidate.translation not in options:
                    options.append(candidate.translation)
                    if len(options) > self.distractor_count:
                        break
        self._rng.shuffle(options)
        return QuizQuestion(word=word, options=options, correct_answer=word.translation)

    def build_multiple_choice(self, words: Optional[List[Word]] = None) -> List[QuizQuestion]:
        """
        One question per word.

        Args:
            words: Words to ask about; every word in the store when None

        Returns:
            Questions in the order of words
        """
        if words is None:
            words = self.store.get_all_words()
        questions = [self.build_question(word) for word in words]
        logger.debug("Built %d multiple-choice questions", len(questions))
        return questions

    def build_matching_round(self, pairs: Optional[int] = None) -> MatchingRound:
        """
        Draw random words and lay out their word and translation tiles.

        Args:
            pairs: Number of words (defaults to matching_pairs); fewer if the
                store holds fewer words

        Returns:
            MatchingRound with shuffled tiles
        """
        words = self.store.get_random_words(self.matching_pairs if pairs is None else pairs)
        count = len(words)

        items = [
            MatchItem(id=i, text=w.word, kind=MatchKind.WORD, original_id=w.id)
            for i, w in enumerate(words)
        ]
        items += [
            MatchItem(id=i + count, text=w.translation, kind=MatchKind.TRANSLATION, original_id=w.id)
            for i, w in enumerate(words)
        ]
        self._rng.shuffle(items)

        logger.debug("Built matching round with %d pairs", count)
        return MatchingRound(items=items, total_pairs=count)
