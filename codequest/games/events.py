"""
codequest/games/events.py

Socket adapter for the quiz engine. Each connection plays its own session;
nothing is shared between sids. The hub only maps sid → (game, state) and
forwards events to the engine, emitting the re-rendered state back.
"""
from __future__ import annotations

from threading import Lock
from typing import Dict, Optional, Tuple

from flask import current_app, request
from flask_socketio import emit

from codequest import socketio
from codequest.games.data import Game, get_game
from codequest.games.engine import (
    SessionState, advance, restart, submit_answer,
)
from codequest.games.utils import answer_error, state_payload


class GameHub:
    def __init__(self) -> None:
        self._lock = Lock()
        self.sessions: Dict[str, Tuple[Game, SessionState]] = {}

    def _emit_state(self, sid: str) -> None:
        game, state = self.sessions[sid]
        emit("game_state", state_payload(game, state), to=sid)

    def _get(self, sid: str) -> Optional[Tuple[Game, SessionState]]:
        entry = self.sessions.get(sid)
        if entry is None:
            emit("game_error", {"message": "No game in progress. Start a game first."}, to=sid)
        return entry

    def start(self, sid: str, game_id: str, default_size: int) -> None:
        game = get_game(game_id)
        if not game:
            emit("game_error", {"message": f"Unknown game: {game_id}"}, to=sid)
            return
        with self._lock:
            state = game.start(default_size)
            self.sessions[sid] = (game, state)
            self._emit_state(sid)

    def submit_answer(self, sid: str, answer: str) -> None:
        with self._lock:
            entry = self._get(sid)
            if entry is None:
                return
            game, state = entry
            self.sessions[sid] = (game, submit_answer(state, answer))
            self._emit_state(sid)

    def advance(self, sid: str) -> None:
        with self._lock:
            entry = self._get(sid)
            if entry is None:
                return
            game, state = entry
            self.sessions[sid] = (game, advance(state))
            self._emit_state(sid)

    def restart(self, sid: str) -> None:
        with self._lock:
            entry = self._get(sid)
            if entry is None:
                return
            game, state = entry
            self.sessions[sid] = (game, restart(state))
            self._emit_state(sid)

    def disconnect(self, sid: str) -> None:
        with self._lock:
            self.sessions.pop(sid, None)


# ── Singleton ─────────────────────────────────────────────────────────────────

hub = GameHub()


# ── SocketIO event handlers ───────────────────────────────────────────────────

@socketio.on("start_game")
def handle_start_game(data):
    game_id = data.get("game_id", "") if isinstance(data, dict) else ""
    current_app.logger.debug("sid %s starting %s", request.sid, game_id)
    hub.start(request.sid, game_id, current_app.config["QUESTIONS_PER_GAME"])


@socketio.on("submit_answer")
def handle_submit_answer(data):
    answer = data.get("answer") if isinstance(data, dict) else None
    error = answer_error(answer, current_app.config["MAX_ANSWER_LENGTH"])
    if error:
        emit("game_error", {"message": error})
        return
    hub.submit_answer(request.sid, answer)


@socketio.on("next_question")
def handle_next_question():
    hub.advance(request.sid)


@socketio.on("restart_game")
def handle_restart_game():
    hub.restart(request.sid)


@socketio.on("disconnect")
def handle_disconnect(*args):
    hub.disconnect(request.sid)
