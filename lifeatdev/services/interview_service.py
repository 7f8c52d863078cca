# services/interview_service.py
"""
Interview Generator.

Builds multiple-choice questions from the offline template bank:
filter by path + difficulty ceiling, pick a template, fill each
{{placeholder}} independently, attach the difficulty tier's option pool
in shuffled order. A session is three such questions and passes at 2/3.
"""
from __future__ import annotations

import logging
import random
import re
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..data.interview_templates import (
    DIFFICULTY_NAMES,
    FILLERS,
    INTERVIEW_TEMPLATES,
    OPTION_POOLS,
    PATH_KEYED_FILLERS,
)
from ..errors import CatalogIntegrityError, InterviewStateError
from ..models import CareerPath, InterviewQuestion, Job
from ..utils.constants import InterviewRules
from .base_service import make_rng

logger = logging.getLogger("lifeatdev.services.interview")

PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")


def difficulty_for_level(level: int) -> int:
    return InterviewRules.difficulty_ceiling(level)


def filter_templates(path: CareerPath, level: int) -> List[dict]:
    """
    Templates for a path up to the level's difficulty ceiling.
    Falls back to every template for the path, then to every easy template.
    """
    path = CareerPath(path).value
    ceiling = difficulty_for_level(level)

    matched = [t for t in INTERVIEW_TEMPLATES if path in t["paths"] and t["difficulty"] <= ceiling]
    if matched:
        return matched

    matched = [t for t in INTERVIEW_TEMPLATES if path in t["paths"]]
    if matched:
        logger.debug(f"No templates for {path} at difficulty <= {ceiling}; using all {path} templates")
        return matched

    logger.debug(f"No templates for {path}; using all easy templates")
    return [t for t in INTERVIEW_TEMPLATES if t["difficulty"] == 1]


def _filler_vocabulary(name: str, path: CareerPath) -> Sequence[str]:
    vocab = FILLERS[name]
    if name in PATH_KEYED_FILLERS:
        return vocab[CareerPath(path).value]
    return vocab


def fill_template(template: str, path: CareerPath, rng: random.Random) -> str:
    """Replace every {{placeholder}}, drawing a fresh filler per occurrence."""

    def _draw(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name not in FILLERS:
            return match.group(0)
        return rng.choice(_filler_vocabulary(name, path))

    return PLACEHOLDER_RE.sub(_draw, template)


def generate_options(difficulty: int, rng: random.Random) -> Tuple[Tuple[str, ...], int, str]:
    """(options, correct_index, explanation) in a fresh random order."""
    pool = list(OPTION_POOLS[difficulty])
    rng.shuffle(pool)

    correct_index = next(i for i, option in enumerate(pool) if option["correct"])
    options = tuple(option["text"] for option in pool)
    return options, correct_index, pool[correct_index]["explanation"]


def generate_offline_interview(
    path: CareerPath,
    level: int,
    rng: Optional[random.Random] = None,
) -> InterviewQuestion:
    rng = rng if rng is not None else make_rng()

    template = rng.choice(filter_templates(path, level))
    question = fill_template(template["template"], path, rng)
    options, correct_index, explanation = generate_options(template["difficulty"], rng)

    return InterviewQuestion(
        question=question,
        options=options,
        correct_index=correct_index,
        explanation=explanation,
    )


def generate_offline_interview_set(
    path: CareerPath,
    level: int,
    rng: Optional[random.Random] = None,
    count: int = InterviewRules.QUESTIONS_PER_SESSION,
) -> List[InterviewQuestion]:
    """`count` independent questions; the same template may come up twice."""
    rng = rng if rng is not None else make_rng()
    return [generate_offline_interview(path, level, rng) for _ in range(count)]


def is_passing_score(correct_count: int) -> bool:
    return correct_count >= InterviewRules.PASS_THRESHOLD


def validate_template_bank() -> None:
    """Raise CatalogIntegrityError when the offline bank could leave the generator empty-handed."""
    problems: List[str] = []

    if not any(t["difficulty"] == 1 for t in INTERVIEW_TEMPLATES):
        problems.append("no difficulty-1 template to fall back on")

    known_paths = {p.value for p in CareerPath}
    for template in INTERVIEW_TEMPLATES:
        for name in PLACEHOLDER_RE.findall(template["template"]):
            if name not in FILLERS:
                problems.append(f"template '{template['id']}' uses unknown placeholder '{name}'")
        if template["difficulty"] not in OPTION_POOLS:
            problems.append(f"template '{template['id']}' has no option pool for difficulty {template['difficulty']}")
        for path in template["paths"]:
            if path not in known_paths:
                problems.append(f"template '{template['id']}' names unknown path '{path}'")

    for name in PATH_KEYED_FILLERS:
        missing = known_paths - set(FILLERS.get(name, {}))
        if missing:
            problems.append(f"filler '{name}' has no vocabulary for {sorted(missing)}")

    for difficulty, pool in OPTION_POOLS.items():
        if len(pool) != InterviewRules.OPTIONS_PER_QUESTION:
            problems.append(f"{DIFFICULTY_NAMES.get(difficulty, difficulty)} pool has {len(pool)} options")
        if sum(1 for option in pool if option["correct"]) != 1:
            problems.append(f"{DIFFICULTY_NAMES.get(difficulty, difficulty)} pool needs exactly one correct option")

    if problems:
        for problem in problems:
            logger.error(f"Template bank integrity: {problem}")
        raise CatalogIntegrityError("; ".join(problems))

    logger.debug(f"Template bank validated: {len(INTERVIEW_TEMPLATES)} templates")


# ==================== SESSION ====================

class InterviewPhase(str, Enum):
    ASKING = "asking"
    FEEDBACK = "feedback"
    RESULTS = "results"
    CANCELLED = "cancelled"


class InterviewSession:
    """
    One interview for one target job.

    asking(i) -> answer() -> feedback(i) -> advance() -> asking(i+1)
    feedback(last) -> advance() -> results

    cancel() only from asking; a cancelled session has no verdict.
    """

    def __init__(self, job: Job, questions: Sequence[InterviewQuestion]):
        if not questions:
            raise InterviewStateError("An interview needs at least one question")
        self.job = job
        self.questions: Tuple[InterviewQuestion, ...] = tuple(questions)
        self.phase = InterviewPhase.ASKING
        self.index = 0
        self.answers: List[bool] = []

    @classmethod
    def for_job(cls, job: Job, rng: Optional[random.Random] = None) -> "InterviewSession":
        questions = generate_offline_interview_set(job.path, job.level, rng)
        logger.info(f"Interview for {job.id}: {len(questions)} questions")
        return cls(job, questions)

    @property
    def current_question(self) -> InterviewQuestion:
        if self.phase not in (InterviewPhase.ASKING, InterviewPhase.FEEDBACK):
            raise InterviewStateError(f"No current question while {self.phase.value}")
        return self.questions[self.index]

    @property
    def score(self) -> int:
        return sum(1 for correct in self.answers if correct)

    @property
    def is_finished(self) -> bool:
        return self.phase in (InterviewPhase.RESULTS, InterviewPhase.CANCELLED)

    def answer(self, option_index: int) -> bool:
        """Lock in an answer for the current question; returns whether it was correct."""
        if self.phase != InterviewPhase.ASKING:
            raise InterviewStateError(f"Cannot answer while {self.phase.value}")

        question = self.questions[self.index]
        if not 0 <= option_index < len(question.options):
            raise InterviewStateError(f"Option {option_index} out of range")

        correct = option_index == question.correct_index
        self.answers.append(correct)
        self.phase = InterviewPhase.FEEDBACK
        return correct

    def advance(self) -> InterviewPhase:
        if self.phase != InterviewPhase.FEEDBACK:
            raise InterviewStateError(f"Cannot advance while {self.phase.value}")

        if self.index + 1 < len(self.questions):
            self.index += 1
            self.phase = InterviewPhase.ASKING
        else:
            self.phase = InterviewPhase.RESULTS
        return self.phase

    def cancel(self) -> None:
        if self.phase != InterviewPhase.ASKING:
            raise InterviewStateError(f"Cannot cancel while {self.phase.value}")
        self.phase = InterviewPhase.CANCELLED
        logger.info(f"Interview for {self.job.id} cancelled at question {self.index + 1}")

    @property
    def passed(self) -> bool:
        """Pass/fail verdict; only available once results are in."""
        if self.phase != InterviewPhase.RESULTS:
            raise InterviewStateError(f"No verdict while {self.phase.value}")
        return is_passing_score(self.score)
