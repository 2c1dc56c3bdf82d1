"""
codequest/games/engine.py

Quiz session engine shared by every game:
  1. Session selector:  draws a random, duplicate-free subset of a bank.
  2. Session state:     an immutable value; every transition returns a
                       new state and never touches the one it was given.
  3. Answer matching:   whitespace-insensitive comparison so a snippet
                       typed with different indentation still counts.
                       Games may also ask for case-insensitive matching.

Calling a transition in the wrong phase is a no-op: the same state comes
back unchanged, so double clicks and stale UI events are harmless.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterable, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class QuestionBankError(ValueError):
    """Raised when a static question bank is malformed."""


class Phase(str, Enum):
    LOADING   = "loading"
    ANSWERING = "answering"
    FEEDBACK  = "feedback"
    FINISHED  = "finished"


@dataclass(frozen=True)
class Question:
    id: str
    task: str
    snippet: str
    options: Tuple[str, ...]
    correct_answer: str
    explanation: str
    placeholder: str = ""
    markup: str = ""            # HTML shown beside the snippet
    code_after: str = ""        # code that follows the blank
    trigger: str = ""           # user action that fires the snippet
    hint: str = ""
    expected_output: str = ""   # what the finished snippet prints or writes
    difficulty: str = ""

    @property
    def free_text(self) -> bool:
        """Typed-answer question (no options to pick from)."""
        return not self.options

    @staticmethod
    def from_dict(d: Dict) -> "Question":
        return Question(
            id=str(d["id"]),
            task=d.get("task", ""),
            snippet=d.get("snippet", ""),
            options=tuple(d.get("options", ())),
            correct_answer=d["correct_answer"],
            explanation=d.get("explanation", ""),
            placeholder=d.get("placeholder", ""),
            markup=d.get("markup", ""),
            code_after=d.get("code_after", ""),
            trigger=d.get("trigger", ""),
            hint=d.get("hint", ""),
            expected_output=d.get("expected_output", ""),
            difficulty=d.get("difficulty", ""),
        )


@dataclass(frozen=True)
class SessionState:
    pool:            Tuple[Question, ...]
    size:            int
    case_sensitive:  bool = True
    questions:       Tuple[Question, ...] = ()
    current_index:   int = 0
    score:           int = 0
    selected_option: Optional[str] = None
    was_correct:     Optional[bool] = None
    phase:           Phase = Phase.LOADING
    session_id:      int = field(default=0, compare=False)

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def is_empty(self) -> bool:
        return not self.questions

    @property
    def is_last(self) -> bool:
        if not self.questions:
            return False
        return self.current_index >= len(self.questions) - 1


# ── Answer matching ───────────────────────────────────────────────────────────

def normalize_answer(text: str, fold_case: bool = False) -> str:
    """Trim, then collapse every run of whitespace (newlines too) to one space."""
    text = " ".join(text.split())
    return text.lower() if fold_case else text


def answers_match(given: str, expected: str, case_sensitive: bool = True) -> bool:
    fold = not case_sensitive
    return normalize_answer(given, fold) == normalize_answer(expected, fold)


def validate_bank(questions: Iterable[Question],
                  case_sensitive: bool = True) -> Tuple[Question, ...]:
    """
    Check a bank before it is handed to the engine.
    Ids must be unique and, for multiple-choice questions, the correct
    answer must match exactly one option once normalized the way the
    game will compare answers.
    Returns the bank as a tuple.
    """
    bank = tuple(questions)
    seen = set()
    for q in bank:
        if q.id in seen:
            raise QuestionBankError(f"Duplicate question id: {q.id}")
        seen.add(q.id)

        if q.free_text:
            if not normalize_answer(q.correct_answer):
                raise QuestionBankError(f"{q.id}: empty correct answer")
            continue

        hits = sum(1 for o in q.options
                   if answers_match(o, q.correct_answer, case_sensitive))
        if hits != 1:
            raise QuestionBankError(
                f"{q.id}: correct answer matches {hits} options, expected exactly 1"
            )
    return bank


# ── Session selector ──────────────────────────────────────────────────────────

def select_session(pool: Sequence[Question], size: int,
                   rng: Optional[random.Random] = None) -> Tuple[Question, ...]:
    """
    Random, duplicate-free ordered subset of ``pool`` with
    ``min(size, len(pool))`` questions. ``pool`` itself is left untouched.
    """
    if size <= 0 or not pool:
        return ()
    shuffled = list(pool)
    (rng or random).shuffle(shuffled)
    return tuple(shuffled[:size])


# ── Transitions ───────────────────────────────────────────────────────────────

def new_session(pool: Sequence[Question], size: int,
                case_sensitive: bool = True) -> SessionState:
    """A session that has not drawn its questions yet."""
    return SessionState(pool=tuple(pool), size=size, case_sensitive=case_sensitive)


def initialize(pool: Sequence[Question], size: int,
               rng: Optional[random.Random] = None,
               case_sensitive: bool = True) -> SessionState:
    pool = tuple(pool)
    questions = select_session(pool, size, rng)
    session_id = (rng or random).getrandbits(32)

    if not questions:
        logger.info("Session started with an empty question set (pool=%d, size=%d)",
                    len(pool), size)
        return SessionState(pool=pool, size=size, case_sensitive=case_sensitive,
                            phase=Phase.FINISHED, session_id=session_id)

    logger.debug("Session %08x drew %s", session_id, [q.id for q in questions])
    return SessionState(
        pool=pool,
        size=size,
        case_sensitive=case_sensitive,
        questions=questions,
        phase=Phase.ANSWERING,
        session_id=session_id,
    )


def current_question(state: SessionState) -> Optional[Question]:
    if state.phase is Phase.LOADING or state.is_empty:
        return None
    return state.questions[state.current_index]


def submit_answer(state: SessionState, option: str) -> SessionState:
    question = current_question(state)
    if state.phase is not Phase.ANSWERING or question is None:
        logger.debug("Ignoring answer in phase %s", state.phase.value)
        return state

    correct = answers_match(option, question.correct_answer, state.case_sensitive)
    return replace(
        state,
        selected_option=option,
        was_correct=correct,
        score=state.score + 1 if correct else state.score,
        phase=Phase.FEEDBACK,
    )


def advance(state: SessionState) -> SessionState:
    if state.phase is not Phase.FEEDBACK:
        logger.debug("Ignoring advance in phase %s", state.phase.value)
        return state

    if state.is_last:
        logger.info("Session %08x finished: %d/%d",
                    state.session_id, state.score, state.total)
        return replace(state, phase=Phase.FINISHED)

    return replace(
        state,
        current_index=state.current_index + 1,
        selected_option=None,
        was_correct=None,
        phase=Phase.ANSWERING,
    )


def restart(state: SessionState, rng: Optional[random.Random] = None) -> SessionState:
    return initialize(state.pool, state.size, rng, state.case_sensitive)
