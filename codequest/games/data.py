"""
codequest/games/data.py
Game catalogue binding each static question bank to a game.
Banks are validated once at import; a malformed bank fails loudly here
rather than mid-session.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from codequest.games.banks import arduino, cpp, javascript, python
from codequest.games.engine import Question, SessionState, initialize, validate_bank

DEFAULT_CORRECT   = "Correct!"
DEFAULT_INCORRECT = "Incorrect. Review the explanation to learn more."
SHOW_ANSWER       = "Incorrect. The correct answer was: '{correct_answer}'"
SHOW_EXPECTED     = "Incorrect. Expected: '{correct_answer}'"


@dataclass(frozen=True)
class Game:
    id: str
    name: str
    description: str
    language: str
    bank: Tuple[Question, ...]
    questions_per_game: Optional[int] = None     # None → app config default
    case_sensitive: bool = True
    correct_feedback: str = DEFAULT_CORRECT
    incorrect_feedback: str = DEFAULT_INCORRECT

    def session_size(self, default: int) -> int:
        return self.questions_per_game if self.questions_per_game is not None else default

    def start(self, default_size: int, rng: Optional[random.Random] = None) -> SessionState:
        """Deal a fresh session from this game's bank with its own matching rules."""
        return initialize(self.bank, self.session_size(default_size), rng,
                          case_sensitive=self.case_sensitive)

    def feedback_message(self, correct: bool, question: Question) -> str:
        if correct:
            return self.correct_feedback
        return self.incorrect_feedback.format(correct_answer=question.correct_answer)

    def summary(self) -> Dict:
        return {
            "id":          self.id,
            "name":        self.name,
            "description": self.description,
            "language":    self.language,
            "questions":   len(self.bank),
        }


def _bank(records: List[Dict], case_sensitive: bool = True) -> Tuple[Question, ...]:
    return validate_bank((Question.from_dict(r) for r in records), case_sensitive)


# ── Catalogue ─────────────────────────────────────────────────────────────────

GAMES: Dict[str, Game] = {
    g.id: g for g in [
        # JavaScript
        Game(
            id="guess-the-output",
            name="Guess the Output",
            description="Predict the output of short JavaScript code snippets.",
            language="JavaScript",
            bank=_bank(javascript.GUESS_THE_OUTPUT),
            questions_per_game=10,
        ),
        Game(
            id="fill-in-the-blanks",
            name="Fill in the Blanks",
            description="Complete missing parts of code snippets.",
            language="JavaScript",
            bank=_bank(javascript.FILL_IN_THE_BLANKS),
            incorrect_feedback=SHOW_ANSWER,
        ),
        # Python
        Game(
            id="python-list-dict-wrangler",
            name="List/Dictionary Wrangler",
            description="Practice manipulating lists and dictionaries in Python.",
            language="Python",
            bank=_bank(python.LIST_DICT_WRANGLER),
            incorrect_feedback=SHOW_ANSWER,
        ),
        Game(
            id="python-function-flow",
            name="Function Flow Fun",
            description="Trace function execution and predict outputs in Python.",
            language="Python",
            bank=_bank(python.FUNCTION_FLOW_FUN),
        ),
        Game(
            id="python-file-io",
            name="File I/O Frontier",
            description="Learn to read and write files in Python.",
            language="Python",
            bank=_bank(python.FILE_IO_FRONTIER),
            incorrect_feedback=SHOW_EXPECTED,
        ),
        # C++
        Game(
            id="cpp-pointer-path-puzzle",
            name="Pointer Path Puzzle",
            description="Navigate memory and pointers in C++.",
            language="C++",
            bank=_bank(cpp.POINTER_PATH_PUZZLE),
            incorrect_feedback=SHOW_ANSWER,
        ),
        Game(
            id="cpp-memory-manager",
            name="Memory Manager Maze",
            description="Identify and fix memory errors in C++.",
            language="C++",
            bank=_bank(cpp.MEMORY_MANAGER_MAZE),
            incorrect_feedback=SHOW_ANSWER,
        ),
        Game(
            id="cpp-template-type-trooper",
            name="Template Type Trooper",
            description="Understand C++ templates and generic programming.",
            language="C++",
            bank=_bank(cpp.TEMPLATE_TYPE_TROOPER, case_sensitive=False),
            case_sensitive=False,
            correct_feedback="Correct! You've mastered template types.",
            incorrect_feedback=SHOW_ANSWER,
        ),
        # JavaScript
        Game(
            id="js-event-listener",
            name="Event Listener Labyrinth",
            description="Master DOM events and event propagation in JavaScript.",
            language="JavaScript",
            bank=_bank(javascript.EVENT_LISTENER_LABYRINTH),
        ),
        Game(
            id="js-callback-conundrum",
            name="Callback Conundrum",
            description="Untangle asynchronous JavaScript with callbacks.",
            language="JavaScript",
            bank=_bank(javascript.CALLBACK_CONUNDRUM),
        ),
        Game(
            id="js-modern-makeover",
            name="Modern JS Makeover",
            description="Refactor old JavaScript code to modern standards.",
            language="JavaScript",
            bank=_bank(javascript.MODERN_JS_MAKEOVER),
            questions_per_game=5,
            correct_feedback="Correct! This is a modern and concise way.",
            incorrect_feedback="Incorrect. Keep learning about modern JS features!",
        ),
        # Arduino
        Game(
            id="arduino-pin-power-up",
            name="Pin Power-Up",
            description="Learn to control Arduino pins for LEDs and basic I/O.",
            language="Arduino",
            bank=_bank(arduino.PIN_POWER_UP),
            incorrect_feedback=SHOW_ANSWER,
        ),
        Game(
            id="arduino-serial-communication",
            name="Serial Communication Saga",
            description="Practice serial communication between Arduino and PC.",
            language="Arduino",
            bank=_bank(arduino.SERIAL_COMMUNICATION_SAGA),
            incorrect_feedback=SHOW_ANSWER,
        ),
        Game(
            id="arduino-sensor-scavenger",
            name="Sensor Scavenger Hunt",
            description="Interact with various sensors using Arduino code.",
            language="Arduino",
            bank=_bank(arduino.SENSOR_SCAVENGER_HUNT),
            incorrect_feedback=SHOW_ANSWER,
        ),
    ]
}


def get_game(game_id: str) -> Game | None:
    return GAMES.get(game_id)


def games_by_language() -> Dict[str, List[Dict]]:
    """Catalogue grouped by language; languages sorted, games in catalogue order."""
    grouped: Dict[str, List[Dict]] = {}
    for game in GAMES.values():
        grouped.setdefault(game.language, []).append(game.summary())
    return {lang: grouped[lang] for lang in sorted(grouped)}
