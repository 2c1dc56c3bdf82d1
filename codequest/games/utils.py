from __future__ import annotations

from typing import Dict, Optional, Sequence

from codequest.games.data import Game
from codequest.games.engine import (
    Phase, Question, SessionState, current_question,
)


# ── Payloads ──────────────────────────────────────────────────────────────────

def _question_payload(question: Question) -> Dict:
    # correct_answer stays server-side until feedback
    return {
        "id":          question.id,
        "task":        question.task,
        "snippet":     question.snippet,
        "options":     list(question.options),
        "placeholder": question.placeholder,
        "free_text":   question.free_text,
        "markup":      question.markup,
        "code_after":  question.code_after,
        "trigger":     question.trigger,
        "hint":        question.hint,
        "difficulty":  question.difficulty,
    }


def _summary_payload(state: SessionState) -> Dict:
    if state.is_empty:
        return {
            "score":   0,
            "total":   0,
            "pct":     0,
            "message": "No questions are available for this game yet.",
        }
    return {
        "score":   state.score,
        "total":   state.total,
        "pct":     round(state.score / state.total * 100),
        "message": f"You scored {state.score} out of {state.total} questions.",
    }


def state_payload(game: Game, state: SessionState) -> Dict:
    """Everything the client needs to re-render the game from scratch."""
    question = current_question(state)
    payload = {
        "game_id":         game.id,
        "name":            game.name,
        "phase":           state.phase.value,
        "current_index":   state.current_index,
        "question_number": state.current_index + 1 if question else 0,
        "total":           state.total,
        "score":           state.score,
        "is_last":         state.is_last,
        "question":        None,
        "feedback":        None,
        "summary":         None,
    }

    if state.phase in (Phase.ANSWERING, Phase.FEEDBACK) and question is not None:
        payload["question"] = _question_payload(question)

    if state.phase is Phase.FEEDBACK and question is not None:
        payload["feedback"] = {
            "selected":       state.selected_option,
            "correct":        state.was_correct,
            "message":        game.feedback_message(state.was_correct, question),
            "correct_answer":  question.correct_answer,
            "explanation":     question.explanation,
            "expected_output": question.expected_output,
        }

    if state.phase is Phase.FINISHED:
        payload["summary"] = _summary_payload(state)

    return payload


def answer_error(answer, max_length: int) -> Optional[str]:
    """Reason a submitted answer is unusable, or None when it is fine."""
    if not isinstance(answer, str):
        return "Field 'answer' must be a string."
    if len(answer) > max_length:
        return f"Field 'answer' must be at most {max_length} characters."
    return None


# ── Cookie-session storage ────────────────────────────────────────────────────

def dump_state(state: SessionState) -> Dict:
    """Compact, JSON-safe form: question ids plus counters."""
    return {
        "ids":        [q.id for q in state.questions],
        "index":      state.current_index,
        "score":      state.score,
        "selected":   state.selected_option,
        "correct":    state.was_correct,
        "phase":      state.phase.value,
        "session_id": state.session_id,
    }


def load_state(data: Optional[Dict], pool: Sequence[Question], size: int,
               case_sensitive: bool = True) -> Optional[SessionState]:
    """
    Rebuild a state from ``dump_state`` output.
    Returns None when the payload is missing, corrupt, or refers to
    questions no longer in the bank, so the caller starts fresh.
    """
    if not isinstance(data, dict):
        return None

    by_id = {q.id: q for q in pool}
    try:
        questions = tuple(by_id[qid] for qid in data["ids"])
        phase = Phase(data["phase"])
        index = int(data["index"])
        score = int(data["score"])
        session_id = int(data.get("session_id") or 0)
    except (KeyError, TypeError, ValueError):
        return None

    if len(set(q.id for q in questions)) != len(questions):
        return None
    if not questions and (phase is not Phase.FINISHED or index != 0 or score != 0):
        return None
    if questions and not 0 <= index < len(questions):
        return None
    if not 0 <= score <= index + 1 or phase is Phase.LOADING:
        return None

    selected = data.get("selected")
    correct = data.get("correct")
    if phase is Phase.FEEDBACK and (not isinstance(selected, str) or not isinstance(correct, bool)):
        return None
    if phase is Phase.ANSWERING:
        selected, correct = None, None

    return SessionState(
        pool=tuple(pool),
        size=size,
        case_sensitive=case_sensitive,
        questions=questions,
        current_index=index,
        score=score,
        selected_option=selected,
        was_correct=correct,
        phase=phase,
        session_id=session_id,
    )
