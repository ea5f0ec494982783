"""
FlashWord: Vocabulary Trainer
-----------------------------

Composition root: builds the store from configuration, reports what was
loaded and prints a sample multiple-choice question.
"""

import random
import sys

from flashword import Config, QuizService, create_store
from flashword.services import SeedDataError, get_statistics
from flashword.utils import setup_logger


def main() -> bool:
    """Main entry point."""
    config = Config.from_env()
    logger = setup_logger("flashword", config.LOG_LEVEL)
    # one generator for sampling and option order
    rng = random.Random(config.RANDOM_SEED)

    try:
        store = create_store(config, rng=rng)
    except SeedDataError as e:
        logger.error("Could not load seed data: %s", e)
        return False

    stats = get_statistics(store)
    logger.info(
        "Store ready: %d folders, %d modules, %d words",
        stats["total_folders"], stats["total_modules"], stats["total_words"],
    )

    quiz = QuizService.from_config(store, config, rng=rng)
    words = store.get_random_words(1)
    if not words:
        print("No words available.")
        return True

    question = quiz.build_question(words[0])
    print(f"What does '{question.word.word}' mean?")
    for number, option in enumerate(question.options, start=1):
        print(f"  {number}. {option}")
    print(f"Answer: {question.correct_answer}")
    return True


if __name__ == "__main__":
    try:
        sys.exit(0 if main() else 1)
    except KeyboardInterrupt:
        print("\n[!] Aborted by user.")
        sys.exit(1)
