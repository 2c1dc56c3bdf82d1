from __future__ import annotations

from flask import current_app, jsonify, request, session

from codequest.games import games
from codequest.games.data import Game, get_game, games_by_language
from codequest.games.engine import (
    SessionState, advance, restart, submit_answer,
)
from codequest.games.utils import answer_error, dump_state, load_state, state_payload


# ── Helpers ───────────────────────────────────────────────────────────────────

def _session_key(game_id: str) -> str:
    return f"game_{game_id}"


def _session_size(game: Game) -> int:
    return game.session_size(current_app.config["QUESTIONS_PER_GAME"])


def _load_or_start(game: Game) -> SessionState:
    """Restore this browser's session for ``game`` or deal a fresh one."""
    size = _session_size(game)
    state = load_state(session.get(_session_key(game.id)), game.bank, size,
                       case_sensitive=game.case_sensitive)
    if state is None:
        state = game.start(current_app.config["QUESTIONS_PER_GAME"])
        current_app.logger.info("New %s session (%d questions)", game.id, state.total)
    return state


def _save(game: Game, state: SessionState):
    session[_session_key(game.id)] = dump_state(state)
    return jsonify(state_payload(game, state))


def _not_found(game_id: str):
    return jsonify({"error": f"Unknown game: {game_id}"}), 404


# ── Routes ────────────────────────────────────────────────────────────────────

@games.route('/games')
def index():
    """Catalogue grouped by language."""
    return jsonify({"languages": games_by_language()})


@games.route('/games/<game_id>')
def play(game_id):
    game = get_game(game_id)
    if not game:
        return _not_found(game_id)
    return _save(game, _load_or_start(game))


@games.route('/games/<game_id>/answer', methods=['POST'])
def answer(game_id):
    game = get_game(game_id)
    if not game:
        return _not_found(game_id)

    data = request.get_json(silent=True) or {}
    chosen = data.get("answer")
    error = answer_error(chosen, current_app.config["MAX_ANSWER_LENGTH"])
    if error:
        return jsonify({"error": error}), 400

    return _save(game, submit_answer(_load_or_start(game), chosen))


@games.route('/games/<game_id>/next', methods=['POST'])
def next_question(game_id):
    game = get_game(game_id)
    if not game:
        return _not_found(game_id)
    return _save(game, advance(_load_or_start(game)))


@games.route('/games/<game_id>/restart', methods=['POST'])
def restart_game(game_id):
    game = get_game(game_id)
    if not game:
        return _not_found(game_id)
    return _save(game, restart(_load_or_start(game)))
