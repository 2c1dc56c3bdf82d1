"""
tests/test_codequest.py
=======================
Unit-test suite for the CodeQuest quiz engine and its adapters.

Run with:
    pytest tests/test_codequest.py -v
"""

from __future__ import annotations

import os
import random
from unittest.mock import patch

import pytest

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("SOCKETIO_ASYNC_MODE", "threading")

from codequest import create_app, socketio
from codequest.games.data import GAMES, Game, get_game, games_by_language, SHOW_ANSWER, SHOW_EXPECTED
from codequest.games.engine import (
    Phase, Question, QuestionBankError,
    advance, answers_match, current_question, initialize, new_session,
    normalize_answer, restart, select_session, submit_answer, validate_bank,
)
from codequest.games.utils import dump_state, load_state, state_payload


# ══════════════════════════════════════════════════════════════════════════════
# Fixtures / base helpers
# ══════════════════════════════════════════════════════════════════════════════

class TestConfig:
    TESTING = True
    SECRET_KEY = "test-secret-key"
    QUESTIONS_PER_GAME = 5
    MAX_ANSWER_LENGTH = 200
    LOG_LEVEL = "DEBUG"
    SOCKETIO_ASYNC_MODE = "threading"


@pytest.fixture(scope="function")
def app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    sc = socketio.test_client(app)
    yield sc
    if sc.is_connected():
        sc.disconnect()


# ── Helpers ────────────────────────────────────────────────────────────────────

def _question(n, correct=None, options=None):
    answer = correct if correct is not None else f"let x{n} = {n};"
    return Question(
        id=f"q-{n:03d}",
        task=f"Task {n}",
        snippet=f"var x{n} = {n};",
        options=tuple(options) if options is not None else (answer, f"var x{n} = {n};", "Error"),
        correct_answer=answer,
        explanation=f"Explanation {n}",
    )


def _make_pool(n=6):
    return tuple(_question(i) for i in range(1, n + 1))


def _wrong_option(question):
    return next(o for o in question.options if not answers_match(o, question.correct_answer))


def _correct_for(game_id, question_id):
    return next(q.correct_answer for q in GAMES[game_id].bank if q.id == question_id)


def _last_state(received):
    states = [r for r in received if r["name"] == "game_state"]
    assert states, f"no game_state event in {received}"
    return states[-1]["args"][0]


# ══════════════════════════════════════════════════════════════════════════════
# 1. SESSION SELECTOR
# ══════════════════════════════════════════════════════════════════════════════

class TestSelectSession:

    def test_returns_requested_size(self):
        pool = _make_pool(6)
        selected = select_session(pool, 5)
        assert len(selected) == 5

    def test_no_duplicates_and_subset_of_pool(self):
        pool = _make_pool(10)
        pool_ids = {q.id for q in pool}
        rng = random.Random(42)
        for size in range(0, 13):
            selected = select_session(pool, size, rng)
            ids = [q.id for q in selected]
            assert len(ids) == min(size, len(pool))
            assert len(set(ids)) == len(ids)
            assert set(ids) <= pool_ids

    def test_full_coverage_when_size_exceeds_pool(self):
        pool = _make_pool(4)
        selected = select_session(pool, 10)
        assert sorted(q.id for q in selected) == sorted(q.id for q in pool)

    def test_size_equal_to_pool_is_permutation(self):
        pool = _make_pool(5)
        selected = select_session(pool, 5)
        assert sorted(q.id for q in selected) == sorted(q.id for q in pool)

    def test_does_not_mutate_pool(self):
        pool = list(_make_pool(6))
        snapshot = list(pool)
        select_session(pool, 3, random.Random(1))
        assert pool == snapshot

    def test_every_question_can_be_selected(self):
        pool = _make_pool(6)
        rng = random.Random(7)
        seen = set()
        for _ in range(300):
            seen.update(q.id for q in select_session(pool, 1, rng))
        assert seen == {q.id for q in pool}

    def test_order_varies_between_calls(self):
        """Run 30 times; the first question must differ at least once."""
        pool = _make_pool(6)
        firsts = {select_session(pool, 6)[0].id for _ in range(30)}
        assert len(firsts) > 1

    def test_zero_or_negative_size_returns_empty(self):
        pool = _make_pool(3)
        assert select_session(pool, 0) == ()
        assert select_session(pool, -2) == ()

    def test_empty_pool_returns_empty(self):
        assert select_session((), 5) == ()

    def test_seeded_rng_is_reproducible(self):
        pool = _make_pool(8)
        a = select_session(pool, 4, random.Random(99))
        b = select_session(pool, 4, random.Random(99))
        assert [q.id for q in a] == [q.id for q in b]


# ══════════════════════════════════════════════════════════════════════════════
# 2. ANSWER NORMALIZATION
# ══════════════════════════════════════════════════════════════════════════════

class TestNormalization:

    def test_trims_and_collapses_whitespace(self):
        assert normalize_answer("  let x = 1;\n") == "let x = 1;"
        assert normalize_answer("const a = 1;\n\n   const b = 2;") == "const a = 1; const b = 2;"

    def test_tabs_and_newlines_collapse(self):
        assert normalize_answer("a\t\tb\r\nc") == "a b c"

    def test_idempotent(self):
        for text in ["  x  ", "a\n  b", "", "   ", "const add = (a, b) => {\n  return a + b;\n};"]:
            once = normalize_answer(text)
            assert normalize_answer(once) == once

    def test_reindented_snippets_match(self):
        a = "const add = (a, b) => {\n  return a + b;\n};"
        b = "const add = (a, b) => {\n        return a + b;\n};"
        assert answers_match(a, b)

    def test_different_tokens_do_not_match(self):
        assert not answers_match("let x = 1;", "let x = 2;")

    def test_internal_spacing_matters_only_as_whitespace(self):
        # Removing whitespace entirely is a different answer
        assert not answers_match("let x=1;", "let x = 1;")

    def test_case_matters_by_default(self):
        assert not answers_match("OUTPUT", "output")

    def test_case_folding(self):
        assert normalize_answer("  Memory\n  LEAK ", fold_case=True) == "memory leak"
        assert answers_match("<DOUBLE>", "<double>", case_sensitive=False)
        assert not answers_match("<float>", "<double>", case_sensitive=False)


# ══════════════════════════════════════════════════════════════════════════════
# 3. SESSION STATE MACHINE
# ══════════════════════════════════════════════════════════════════════════════

class TestStateMachine:

    def test_new_session_is_loading(self):
        state = new_session(_make_pool(), 5)
        assert state.phase is Phase.LOADING
        assert current_question(state) is None

    def test_submit_in_loading_is_noop(self):
        state = new_session(_make_pool(), 5)
        assert submit_answer(state, "anything") is state

    def test_initialize(self):
        state = initialize(_make_pool(6), 5)
        assert state.total == 5
        assert state.phase is Phase.ANSWERING
        assert state.current_index == 0
        assert state.score == 0
        assert state.selected_option is None
        assert current_question(state) is state.questions[0]

    def test_correct_answer_scores(self):
        state = initialize(_make_pool(6), 5)
        q = current_question(state)
        after = submit_answer(state, q.correct_answer)
        assert after.score == 1
        assert after.phase is Phase.FEEDBACK
        assert after.selected_option == q.correct_answer
        assert after.was_correct is True

    def test_wrong_answer_does_not_score(self):
        state = initialize(_make_pool(6), 5)
        q = current_question(state)
        after = submit_answer(state, _wrong_option(q))
        assert after.score == 0
        assert after.phase is Phase.FEEDBACK
        assert after.was_correct is False

    def test_whitespace_variant_counts_as_correct(self):
        pool = (_question(1, correct="let x = 1;", options=["let x = 1;", "var x = 1;"]),)
        state = initialize(pool, 5)
        after = submit_answer(state, "  let x = 1;\n")
        assert after.score == 1

    def test_repeated_submit_in_feedback_does_not_rescore(self):
        state = initialize(_make_pool(6), 5)
        q = current_question(state)
        once = submit_answer(state, q.correct_answer)
        twice = submit_answer(once, q.correct_answer)
        assert twice is once
        assert twice.score == 1

    def test_submit_leaves_original_state_untouched(self):
        state = initialize(_make_pool(6), 5)
        submit_answer(state, current_question(state).correct_answer)
        assert state.phase is Phase.ANSWERING
        assert state.score == 0

    def test_advance_in_answering_is_noop(self):
        state = initialize(_make_pool(6), 5)
        assert advance(state) is state

    def test_advance_moves_to_next_question(self):
        state = initialize(_make_pool(6), 5)
        state = submit_answer(state, current_question(state).correct_answer)
        state = advance(state)
        assert state.current_index == 1
        assert state.phase is Phase.ANSWERING
        assert state.selected_option is None
        assert state.was_correct is None

    def test_full_scenario(self):
        pool = _make_pool(6)
        state = initialize(pool, 5)
        assert state.total == 5
        expected = 0
        for i in range(5):
            assert state.current_index == i
            q = current_question(state)
            if i % 2 == 0:
                state = submit_answer(state, q.correct_answer)
                expected += 1
            else:
                state = submit_answer(state, _wrong_option(q))
            assert state.score == expected
            assert state.score <= state.current_index + 1
            state = advance(state)
        assert state.phase is Phase.FINISHED
        assert state.score == expected == 3
        assert state.score <= state.total

    def test_finished_is_terminal(self):
        pool = _make_pool(1)
        state = initialize(pool, 5)
        state = advance(submit_answer(state, current_question(state).correct_answer))
        assert state.phase is Phase.FINISHED
        assert submit_answer(state, "x") is state
        assert advance(state) is state
        assert state.score == 1

    def test_score_never_decreases(self):
        state = initialize(_make_pool(6), 6, random.Random(3))
        previous = state.score
        while state.phase is not Phase.FINISHED:
            q = current_question(state)
            state = submit_answer(state, random.choice(q.options))
            assert state.score in (previous, previous + 1)
            previous = state.score
            state = advance(state)

    @pytest.mark.parametrize("phase_steps", [0, 1, 2, 99])
    def test_restart_resets_from_any_phase(self, phase_steps):
        state = initialize(_make_pool(6), 3)
        for _ in range(phase_steps):
            if state.phase is Phase.ANSWERING:
                state = submit_answer(state, current_question(state).correct_answer)
            elif state.phase is Phase.FEEDBACK:
                state = advance(state)
        fresh = restart(state)
        assert fresh.score == 0
        assert fresh.current_index == 0
        assert fresh.selected_option is None
        assert fresh.was_correct is None
        assert fresh.phase is Phase.ANSWERING
        assert fresh.total == 3
        assert fresh.pool == state.pool

    def test_restart_draws_new_selection(self):
        state = initialize(_make_pool(6), 6, random.Random(1))
        orders = {tuple(q.id for q in restart(state).questions) for _ in range(20)}
        assert len(orders) > 1

    def test_empty_pool_gives_terminal_state(self):
        state = initialize((), 5)
        assert state.is_empty
        assert state.phase is Phase.FINISHED
        assert current_question(state) is None
        assert submit_answer(state, "x") is state
        assert advance(state) is state

    def test_zero_size_gives_terminal_state(self):
        state = initialize(_make_pool(), 0)
        assert state.is_empty
        assert state.phase is Phase.FINISHED

    def test_empty_session_has_no_last_question(self):
        assert initialize((), 5).is_last is False
        assert new_session(_make_pool(), 5).is_last is False

    def test_is_last_only_on_final_question(self):
        state = initialize(_make_pool(2), 2)
        assert state.is_last is False
        state = advance(submit_answer(state, current_question(state).correct_answer))
        assert state.is_last is True

    def test_restart_keeps_case_rule(self):
        pool = (_question(1, correct="Memory Leak", options=[]),)
        state = initialize(pool, 1, case_sensitive=False)
        fresh = restart(advance(submit_answer(state, "memory leak")))
        assert fresh.case_sensitive is False
        assert submit_answer(fresh, "MEMORY LEAK").score == 1

    def test_pool_shorter_than_size(self):
        state = initialize(_make_pool(3), 5)
        assert state.total == 3


# ══════════════════════════════════════════════════════════════════════════════
# 4. BANK VALIDATION & CATALOGUE
# ══════════════════════════════════════════════════════════════════════════════

class TestBanks:

    def test_valid_bank_returns_tuple(self):
        bank = validate_bank(list(_make_pool(3)))
        assert isinstance(bank, tuple)
        assert len(bank) == 3

    def test_duplicate_ids_rejected(self):
        q = _question(1)
        with pytest.raises(QuestionBankError):
            validate_bank([q, q])

    def test_correct_answer_must_match_an_option(self):
        q = _question(1, correct="missing", options=["a", "b"])
        with pytest.raises(QuestionBankError):
            validate_bank([q])

    def test_correct_answer_matching_two_options_rejected(self):
        q = _question(1, correct="let x = 1;", options=["let x = 1;", "let  x = 1;\n"])
        with pytest.raises(QuestionBankError):
            validate_bank([q])

    def test_free_text_question_needs_answer(self):
        q = _question(1, correct="   ", options=[])
        with pytest.raises(QuestionBankError):
            validate_bank([q])

    def test_question_bank_error_is_value_error(self):
        assert issubclass(QuestionBankError, ValueError)

    def test_from_dict(self):
        q = Question.from_dict({
            "id": 7, "task": "t", "snippet": "s",
            "correct_answer": "delay", "placeholder": "delay / millis",
        })
        assert q.id == "7"
        assert q.options == ()
        assert q.free_text
        assert q.placeholder == "delay / millis"

    def test_every_game_bank_is_non_empty(self):
        assert GAMES
        for game in GAMES.values():
            assert len(game.bank) > 0
            validate_bank(game.bank)

    def test_get_game(self):
        assert get_game("js-modern-makeover").name == "Modern JS Makeover"
        assert get_game("does-not-exist") is None

    def test_games_by_language_order(self):
        grouped = games_by_language()
        assert list(grouped) == ["Arduino", "C++", "JavaScript", "Python"]
        assert [g["id"] for g in grouped["JavaScript"]] == [
            "guess-the-output", "fill-in-the-blanks", "js-event-listener",
            "js-callback-conundrum", "js-modern-makeover",
        ]
        assert grouped["Arduino"][0]["questions"] == 10
        assert sum(len(games) for games in grouped.values()) == len(GAMES) == 14

    def test_catalogue_has_every_game(self):
        assert set(GAMES) == {
            "guess-the-output", "fill-in-the-blanks", "js-event-listener",
            "js-callback-conundrum", "js-modern-makeover",
            "python-list-dict-wrangler", "python-function-flow", "python-file-io",
            "cpp-pointer-path-puzzle", "cpp-memory-manager", "cpp-template-type-trooper",
            "arduino-pin-power-up", "arduino-serial-communication", "arduino-sensor-scavenger",
        }

    def test_session_size_falls_back_to_default(self):
        assert get_game("js-modern-makeover").session_size(9) == 5
        assert get_game("guess-the-output").session_size(9) == 10
        assert get_game("arduino-pin-power-up").session_size(9) == 9

    def test_guess_the_output_deals_ten(self):
        state = get_game("guess-the-output").start(5)
        assert state.total == 10
        assert len({q.id for q in state.questions}) == 10

    def test_template_trooper_ignores_case(self):
        game = get_game("cpp-template-type-trooper")
        assert game.case_sensitive is False
        state = game.start(5)
        q = current_question(state)
        after = submit_answer(state, "  " + q.correct_answer.upper() + "\n")
        assert after.was_correct is True
        assert after.score == 1

    def test_other_games_stay_case_sensitive(self):
        state = get_game("cpp-pointer-path-puzzle").start(5)
        assert state.case_sensitive is True
        game = get_game("arduino-pin-power-up")
        q = next(q for q in game.bank if q.correct_answer == "OUTPUT")
        pin = initialize((q,), 1, case_sensitive=game.case_sensitive)
        assert submit_answer(pin, "output").was_correct is False

    def test_file_io_reports_expected_answer(self):
        game = get_game("python-file-io")
        q = game.bank[0]
        assert game.feedback_message(False, q) == SHOW_EXPECTED.format(correct_answer=q.correct_answer)
        assert all(q.free_text and q.expected_output for q in game.bank)

    def test_event_listener_questions_carry_markup(self):
        game = get_game("js-event-listener")
        for q in game.bank:
            assert q.markup.startswith("<")
            assert "addEventListener" in q.snippet
            assert q.trigger

    def test_fill_in_the_blanks_has_code_after_blank(self):
        game = get_game("fill-in-the-blanks")
        assert all(q.free_text and q.hint for q in game.bank)
        q = next(q for q in game.bank if q.id == "fitb-4")
        assert q.snippet.endswith("array.")
        assert q.code_after.startswith("();")

    def test_feedback_message_reveals_answer_when_configured(self):
        game = get_game("python-list-dict-wrangler")
        q = game.bank[0]
        assert game.feedback_message(False, q) == SHOW_ANSWER.format(correct_answer=q.correct_answer)
        assert game.feedback_message(True, q) == "Correct!"


# ══════════════════════════════════════════════════════════════════════════════
# 5. PAYLOAD & SESSION STORAGE
# ══════════════════════════════════════════════════════════════════════════════

class TestPayloads:

    def setup_method(self):
        self.game = Game(
            id="test-game", name="Test Game", description="d",
            language="Python", bank=_make_pool(6),
        )

    def test_answering_payload_hides_answer(self):
        state = initialize(self.game.bank, 5)
        payload = state_payload(self.game, state)
        assert payload["phase"] == "answering"
        assert payload["question_number"] == 1
        assert payload["total"] == 5
        assert payload["feedback"] is None
        assert payload["summary"] is None
        assert "correct_answer" not in payload["question"]

    def test_feedback_payload(self):
        state = initialize(self.game.bank, 5)
        q = current_question(state)
        state = submit_answer(state, _wrong_option(q))
        payload = state_payload(self.game, state)
        assert payload["phase"] == "feedback"
        assert payload["feedback"]["correct"] is False
        assert payload["feedback"]["correct_answer"] == q.correct_answer
        assert payload["feedback"]["message"] == self.game.incorrect_feedback
        assert payload["question"]["id"] == q.id

    def test_finished_payload_summary(self):
        state = initialize(self.game.bank, 2)
        while state.phase is not Phase.FINISHED:
            state = advance(submit_answer(state, current_question(state).correct_answer))
        payload = state_payload(self.game, state)
        assert payload["question"] is None
        assert payload["summary"]["score"] == 2
        assert payload["summary"]["pct"] == 100
        assert "2 out of 2" in payload["summary"]["message"]

    def test_empty_payload_summary(self):
        state = initialize((), 5)
        payload = state_payload(self.game, state)
        assert payload["phase"] == "finished"
        assert payload["total"] == 0
        assert payload["is_last"] is False
        assert payload["summary"]["total"] == 0

    def test_extra_question_fields_in_payload(self):
        game = get_game("js-event-listener")
        state = game.start(5)
        question = state_payload(game, state)["question"]
        assert question["markup"]
        assert question["trigger"]
        assert "correct_answer" not in question

    def test_expected_output_shown_with_feedback(self):
        game = get_game("python-file-io")
        state = game.start(5)
        q = current_question(state)
        payload = state_payload(game, submit_answer(state, "open()"))
        assert payload["feedback"]["expected_output"] == q.expected_output
        assert payload["feedback"]["message"].startswith("Incorrect. Expected:")

    def test_dump_and_load_mid_feedback(self):
        state = initialize(self.game.bank, 5)
        state = submit_answer(state, current_question(state).correct_answer)
        restored = load_state(dump_state(state), self.game.bank, 5)
        assert restored == state

    def test_load_rejects_garbage(self):
        assert load_state(None, self.game.bank, 5) is None
        assert load_state({"ids": 3}, self.game.bank, 5) is None
        assert load_state({"ids": ["nope"], "phase": "answering", "index": 0, "score": 0},
                          self.game.bank, 5) is None

    def test_load_rejects_out_of_range_index(self):
        state = initialize(self.game.bank, 2)
        data = dump_state(state)
        data["index"] = 5
        assert load_state(data, self.game.bank, 2) is None

    def test_load_rejects_inflated_score(self):
        data = dump_state(initialize(self.game.bank, 3))
        data["score"] = 3
        assert load_state(data, self.game.bank, 3) is None

    def test_load_rejects_score_on_empty_state(self):
        data = dump_state(initialize((), 5))
        assert load_state(data, self.game.bank, 5) is not None
        data["score"] = 1
        assert load_state(data, self.game.bank, 5) is None

    def test_load_rejects_index_on_empty_state(self):
        data = dump_state(initialize((), 5))
        data["index"] = 3
        assert load_state(data, self.game.bank, 5) is None

    def test_load_keeps_case_rule(self):
        data = dump_state(initialize(self.game.bank, 3))
        restored = load_state(data, self.game.bank, 3, case_sensitive=False)
        assert restored.case_sensitive is False

    def test_load_clears_selection_while_answering(self):
        data = dump_state(initialize(self.game.bank, 3))
        data["selected"] = "sneaky"
        restored = load_state(data, self.game.bank, 3)
        assert restored.selected_option is None


# ══════════════════════════════════════════════════════════════════════════════
# 6. HTTP ROUTES
# ══════════════════════════════════════════════════════════════════════════════

class TestGameRoutes:

    def test_catalogue(self, client):
        resp = client.get("/games")
        assert resp.status_code == 200
        data = resp.get_json()
        assert "JavaScript" in data["languages"]

    def test_unknown_game_404(self, client):
        assert client.get("/games/nope").status_code == 404
        assert client.post("/games/nope/answer", json={"answer": "x"}).status_code == 404
        assert client.post("/games/nope/next").status_code == 404
        assert client.post("/games/nope/restart").status_code == 404

    def test_play_starts_session(self, client):
        resp = client.get("/games/js-modern-makeover")
        data = resp.get_json()
        assert resp.status_code == 200
        assert data["phase"] == "answering"
        assert data["total"] == 5
        assert data["score"] == 0

    def test_play_is_stable_across_reloads(self, client):
        first = client.get("/games/js-modern-makeover").get_json()
        second = client.get("/games/js-modern-makeover").get_json()
        assert first["question"]["id"] == second["question"]["id"]

    def test_answer_requires_string(self, client):
        client.get("/games/js-modern-makeover")
        assert client.post("/games/js-modern-makeover/answer", json={}).status_code == 400
        assert client.post("/games/js-modern-makeover/answer", json={"answer": 3}).status_code == 400

    def test_oversized_answer_rejected_and_not_stored(self, client):
        client.get("/games/js-modern-makeover")
        resp = client.post("/games/js-modern-makeover/answer", json={"answer": "x" * 4500})
        assert resp.status_code == 400
        assert "200" in resp.get_json()["error"]
        assert "Set-Cookie" not in resp.headers
        data = client.get("/games/js-modern-makeover").get_json()
        assert data["phase"] == "answering"

    def test_longest_allowed_answer_keeps_cookie_small(self, client):
        client.get("/games/fill-in-the-blanks")
        resp = client.post("/games/fill-in-the-blanks/answer",
                           json={"answer": os.urandom(100).hex()})
        assert resp.status_code == 200
        assert resp.get_json()["phase"] == "feedback"
        assert len(resp.headers["Set-Cookie"]) < 4093

    def test_case_insensitive_game_over_http(self, client):
        data = client.get("/games/cpp-template-type-trooper").get_json()
        answer = _correct_for("cpp-template-type-trooper", data["question"]["id"]).upper()
        data = client.post("/games/cpp-template-type-trooper/answer", json={"answer": answer}).get_json()
        assert data["feedback"]["correct"] is True
        assert data["feedback"]["message"] == "Correct! You've mastered template types."
        # reload keeps the case rule for the rest of the session
        data = client.post("/games/cpp-template-type-trooper/next").get_json()
        answer = _correct_for("cpp-template-type-trooper", data["question"]["id"]).lower()
        data = client.post("/games/cpp-template-type-trooper/answer", json={"answer": answer}).get_json()
        assert data["score"] == 2

    def test_guess_the_output_plays_ten(self, client):
        data = client.get("/games/guess-the-output").get_json()
        assert data["total"] == 10

    def test_correct_answer_then_next(self, client):
        data = client.get("/games/js-modern-makeover").get_json()
        answer = _correct_for("js-modern-makeover", data["question"]["id"])
        data = client.post("/games/js-modern-makeover/answer", json={"answer": answer}).get_json()
        assert data["phase"] == "feedback"
        assert data["score"] == 1
        assert data["feedback"]["message"] == "Correct! This is a modern and concise way."

        data = client.post("/games/js-modern-makeover/next").get_json()
        assert data["phase"] == "answering"
        assert data["current_index"] == 1
        assert data["feedback"] is None

    def test_double_submit_is_harmless(self, client):
        data = client.get("/games/js-modern-makeover").get_json()
        answer = _correct_for("js-modern-makeover", data["question"]["id"])
        client.post("/games/js-modern-makeover/answer", json={"answer": answer})
        data = client.post("/games/js-modern-makeover/answer", json={"answer": answer}).get_json()
        assert data["score"] == 1

    def test_next_before_answer_is_noop(self, client):
        client.get("/games/js-modern-makeover")
        data = client.post("/games/js-modern-makeover/next").get_json()
        assert data["phase"] == "answering"
        assert data["current_index"] == 0

    def test_full_playthrough_and_restart(self, client):
        data = client.get("/games/arduino-pin-power-up").get_json()
        assert data["total"] == 5
        while data["phase"] != "finished":
            qid = data["question"]["id"]
            answer = "  " + _correct_for("arduino-pin-power-up", qid) + "\n"
            client.post("/games/arduino-pin-power-up/answer", json={"answer": answer})
            data = client.post("/games/arduino-pin-power-up/next").get_json()
        assert data["summary"]["score"] == 5
        assert data["summary"]["pct"] == 100

        data = client.post("/games/arduino-pin-power-up/restart").get_json()
        assert data["phase"] == "answering"
        assert data["score"] == 0
        assert data["current_index"] == 0

    def test_games_keep_independent_sessions(self, client):
        js = client.get("/games/js-modern-makeover").get_json()
        answer = _correct_for("js-modern-makeover", js["question"]["id"])
        client.post("/games/js-modern-makeover/answer", json={"answer": answer})
        py = client.get("/games/python-function-flow").get_json()
        assert py["phase"] == "answering"
        assert py["score"] == 0

    def test_corrupt_cookie_starts_fresh(self, client):
        with client.session_transaction() as sess:
            sess["game_js-modern-makeover"] = {"ids": ["bogus"], "phase": "feedback"}
        data = client.get("/games/js-modern-makeover").get_json()
        assert data["phase"] == "answering"
        assert data["total"] == 5


# ══════════════════════════════════════════════════════════════════════════════
# 7. SOCKET HUB  (pure unit tests, mocked emit)
# ══════════════════════════════════════════════════════════════════════════════

class TestGameHub:

    def setup_method(self):
        from codequest.games.events import GameHub
        self.hub = GameHub()

    @patch("codequest.games.events.emit")
    def test_start_creates_session(self, mock_emit):
        self.hub.start("sid_1", "python-function-flow", 5)
        game, state = self.hub.sessions["sid_1"]
        assert game.id == "python-function-flow"
        assert state.phase is Phase.ANSWERING
        name, payload = mock_emit.call_args[0]
        assert name == "game_state"
        assert payload["total"] == 5

    @patch("codequest.games.events.emit")
    def test_start_unknown_game(self, mock_emit):
        self.hub.start("sid_1", "nope", 5)
        assert "sid_1" not in self.hub.sessions
        assert mock_emit.call_args[0][0] == "game_error"

    @patch("codequest.games.events.emit")
    def test_answer_without_game(self, mock_emit):
        self.hub.submit_answer("sid_1", "x")
        assert mock_emit.call_args[0][0] == "game_error"

    @patch("codequest.games.events.emit")
    def test_answer_and_advance(self, mock_emit):
        self.hub.start("sid_1", "python-function-flow", 5)
        _, state = self.hub.sessions["sid_1"]
        self.hub.submit_answer("sid_1", current_question(state).correct_answer)
        _, state = self.hub.sessions["sid_1"]
        assert state.score == 1
        self.hub.advance("sid_1")
        _, state = self.hub.sessions["sid_1"]
        assert state.current_index == 1

    @patch("codequest.games.events.emit")
    def test_sessions_are_independent(self, mock_emit):
        self.hub.start("sid_1", "python-function-flow", 5)
        self.hub.start("sid_2", "python-function-flow", 5)
        _, state = self.hub.sessions["sid_1"]
        self.hub.submit_answer("sid_1", current_question(state).correct_answer)
        assert self.hub.sessions["sid_1"][1].score == 1
        assert self.hub.sessions["sid_2"][1].score == 0

    @patch("codequest.games.events.emit")
    def test_restart_and_disconnect(self, mock_emit):
        self.hub.start("sid_1", "python-function-flow", 5)
        _, state = self.hub.sessions["sid_1"]
        self.hub.submit_answer("sid_1", current_question(state).correct_answer)
        self.hub.restart("sid_1")
        assert self.hub.sessions["sid_1"][1].score == 0
        self.hub.disconnect("sid_1")
        assert "sid_1" not in self.hub.sessions

    def test_disconnect_unknown_sid_ignored(self):
        self.hub.disconnect("ghost")
        assert self.hub.sessions == {}


# ══════════════════════════════════════════════════════════════════════════════
# 8. SOCKET EVENTS  (Flask-SocketIO test client)
# ══════════════════════════════════════════════════════════════════════════════

class TestSocketEvents:

    def test_start_game_emits_state(self, socket_client):
        socket_client.emit("start_game", {"game_id": "js-callback-conundrum"})
        payload = _last_state(socket_client.get_received())
        assert payload["game_id"] == "js-callback-conundrum"
        assert payload["phase"] == "answering"

    def test_answer_flow(self, socket_client):
        socket_client.emit("start_game", {"game_id": "js-callback-conundrum"})
        payload = _last_state(socket_client.get_received())
        answer = _correct_for("js-callback-conundrum", payload["question"]["id"])

        socket_client.emit("submit_answer", {"answer": answer})
        payload = _last_state(socket_client.get_received())
        assert payload["phase"] == "feedback"
        assert payload["score"] == 1

        socket_client.emit("next_question")
        payload = _last_state(socket_client.get_received())
        assert payload["current_index"] == 1

        socket_client.emit("restart_game")
        payload = _last_state(socket_client.get_received())
        assert payload["score"] == 0
        assert payload["current_index"] == 0

    def test_bad_answer_payload(self, socket_client):
        socket_client.emit("start_game", {"game_id": "js-callback-conundrum"})
        socket_client.get_received()
        socket_client.emit("submit_answer", {"answer": None})
        received = socket_client.get_received()
        assert [r["name"] for r in received] == ["game_error"]

    def test_oversized_answer_emits_error(self, socket_client):
        socket_client.emit("start_game", {"game_id": "js-callback-conundrum"})
        socket_client.get_received()
        socket_client.emit("submit_answer", {"answer": "x" * 201})
        received = socket_client.get_received()
        assert [r["name"] for r in received] == ["game_error"]
        assert "200" in received[0]["args"][0]["message"]

        socket_client.emit("next_question")
        payload = _last_state(socket_client.get_received())
        assert payload["phase"] == "answering"
        assert payload["feedback"] is None

    def test_disconnect_drops_session(self, app):
        from codequest.games.events import hub
        sc = socketio.test_client(app)
        sc.emit("start_game", {"game_id": "js-callback-conundrum"})
        before = len(hub.sessions)
        sc.disconnect()
        assert len(hub.sessions) == before - 1
