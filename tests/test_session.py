"""Tests for the round state machine."""

import random

import pytest

from typemaster.actions import Action, InsertChar
from typemaster.session import Phase, Session
from typemaster.timer import CountdownTimer


def type_text(session, text):
    for ch in text:
        session.handle(InsertChar(ch))


def expire(session):
    """Wait for the clock to run out, then let the redraw loop see it."""
    assert session.timer.join(timeout=5)
    session.poll()


class TestStart:
    def test_starts_idle(self, session):
        snap = session.snapshot()
        assert snap.phase is Phase.IDLE
        assert snap.wpm == 0
        assert snap.words_text == ""

    def test_start_resets_round(self, session):
        session.handle(Action.START)
        assert session.phase is Phase.PLAYING
        assert len(session.word_queue) == 6
        assert session.score.matched_chars == 0
        assert session.timer.remaining == 60
        assert session.timer.running

    def test_start_while_playing_is_noop(self, session):
        session.handle(Action.START)
        words = list(session.word_queue)
        type_text(session, "he")
        session.handle(Action.START)
        assert list(session.word_queue) == words
        assert session.input.text == "he"

    def test_typing_in_idle_is_ignored(self, session):
        type_text(session, "abc")
        assert session.phase is Phase.IDLE
        assert session.input.text == ""

    def test_start_on_keystroke(self, timer):
        session = Session(["hello"], sample_size=3, timer=timer, start_on_keystroke=True)
        session.handle(InsertChar("h"))
        assert session.phase is Phase.PLAYING
        assert session.input.text == "h"


class TestCommit:
    def test_exact_word_advances(self, session):
        session.handle(Action.START)
        target = session.word_queue.front()
        before = len(session.word_queue)
        type_text(session, target)
        session.handle(Action.COMMIT_WORD)
        assert len(session.word_queue) == before - 1
        assert session.score.matched_chars == len(target) + 1
        assert session.input.text == ""
        assert session.input.cursor == 0

    def test_wrong_word_does_not_advance(self, session):
        session.handle(Action.START)
        words = list(session.word_queue)
        type_text(session, "xyz")
        session.handle(Action.COMMIT_WORD)
        assert list(session.word_queue) == words
        assert session.score.matched_chars == 0
        assert session.input.text == "xyz"

    def test_fix_then_commit(self, session):
        session.handle(Action.START)
        target = session.word_queue.front()
        type_text(session, target + "x")
        session.handle(Action.COMMIT_WORD)
        assert session.input.text == target + "x"
        session.handle(Action.DELETE_BEFORE)
        session.handle(Action.COMMIT_WORD)
        assert session.score.matched_chars == len(target) + 1

    def test_edit_actions(self, session):
        session.handle(Action.START)
        type_text(session, "abc")
        session.handle(Action.MOVE_LEFT)
        session.handle(Action.MOVE_LEFT)
        session.handle(Action.DELETE_AT)
        assert session.input.text == "ac"
        session.handle(Action.MOVE_RIGHT)
        session.handle(Action.CLEAR_LINE)
        assert session.input.text == ""


class TestExpiry:
    def test_partial_credit(self, short_timer):
        session = Session(["hello"], sample_size=3, timer=short_timer)
        session.handle(Action.START)
        type_text(session, "hel")
        expire(session)
        assert session.phase is Phase.RESULT
        assert session.score.matched_chars == 3
        assert session.input.text == ""

    def test_partial_credit_stops_at_mismatch(self, short_timer):
        session = Session(["world"], sample_size=3, timer=short_timer)
        session.handle(Action.START)
        type_text(session, "wozld")
        expire(session)
        assert session.score.matched_chars == 2

    def test_credit_applied_once(self, short_timer):
        session = Session(["hello"], sample_size=3, timer=short_timer)
        session.handle(Action.START)
        type_text(session, "hello")
        session.handle(Action.COMMIT_WORD)
        type_text(session, "he")
        expire(session)
        session.poll()
        session.poll()
        assert session.score.matched_chars == 6 + 2

    def test_no_input_after_clock_hits_zero(self, short_timer):
        session = Session(["hello"], sample_size=3, timer=short_timer)
        session.handle(Action.START)
        type_text(session, "hello")
        # the clock has hit zero but the redraw loop has not polled yet
        assert short_timer.join(timeout=5)
        assert session.phase is Phase.PLAYING
        session.handle(InsertChar("x"))
        session.handle(Action.COMMIT_WORD)
        assert session.input.text == "hello"
        assert session.score.matched_chars == 0

    def test_result_snapshot(self, short_timer):
        session = Session(["hello"], sample_size=30, timer=short_timer)
        session.handle(Action.START)
        for _ in range(5):
            type_text(session, "hello")
            session.handle(Action.COMMIT_WORD)
        expire(session)
        snap = session.snapshot()
        assert snap.phase is Phase.RESULT
        assert snap.clock == "00:00"
        assert snap.matched_chars == 30
        assert snap.word_count == 6
        # the whole one-second round elapsed: 6 * (60 // 1)
        assert snap.wpm == 360
        assert snap.words_completed == 5
        assert snap.words_text.startswith("hello")

    def test_restart_from_result(self, short_timer):
        session = Session(["hello"], sample_size=3, timer=short_timer)
        session.handle(Action.START)
        type_text(session, "hello")
        session.handle(Action.COMMIT_WORD)
        expire(session)
        session.handle(Action.START)
        assert session.phase is Phase.PLAYING
        assert session.score.matched_chars == 0
        assert session.timer.remaining == 1
        assert len(session.word_queue) == 3

    def test_real_countdown(self):
        timer = CountdownTimer(duration=2, interval=0.01)
        session = Session(["hello"], sample_size=3, timer=timer)
        session.handle(Action.START)
        assert timer.join(timeout=5)
        session.poll()
        assert session.phase is Phase.RESULT


class TestExhaustion:
    def test_last_word_finishes_round(self, timer):
        session = Session(["hi"], sample_size=2, timer=timer)
        session.handle(Action.START)
        for _ in range(2):
            type_text(session, "hi")
            session.handle(Action.COMMIT_WORD)
        assert session.phase is Phase.RESULT
        assert not timer.running
        assert timer.remaining == 60
        assert session.score.matched_chars == 6
        type_text(session, "hi")
        assert session.input.text == ""


class TestCancel:
    def test_cancel_stops_timer(self, session):
        session.handle(Action.START)
        target = session.word_queue.front()
        type_text(session, target)
        session.handle(Action.COMMIT_WORD)
        session.handle(Action.CANCEL_ROUND)
        state = session.timer.state()
        assert session.phase is Phase.IDLE
        assert not state.running
        assert state.remaining == 0
        assert session.score.matched_chars == 0
        assert session.input.text == ""
        assert not session.word_queue

    def test_cancel_then_restart(self, session):
        for _ in range(5):
            session.handle(Action.START)
            session.handle(Action.CANCEL_ROUND)
            assert not session.timer.running
        session.handle(Action.START)
        assert session.timer.running
        assert session.timer.remaining == 60
        session.poll()
        assert session.phase is Phase.PLAYING

    def test_cancel_outside_round_is_noop(self, session):
        session.handle(Action.CANCEL_ROUND)
        assert session.phase is Phase.IDLE
        assert session.timer.remaining == 60

    def test_quit_is_left_to_caller(self, session):
        session.handle(Action.QUIT)
        assert session.phase is Phase.IDLE

    def test_edits_ignored_when_idle(self, session):
        session.handle(Action.DELETE_BEFORE)
        session.handle(Action.MOVE_RIGHT)
        assert session.input.cursor == 0


def test_seeded_queue_is_reproducible(timer):
    a = Session(["a", "b", "c", "d"], sample_size=8, timer=timer, rng=random.Random(5))
    a.start_round()
    first = list(a.word_queue)
    a.cancel_round()
    b = Session(["a", "b", "c", "d"], sample_size=8, timer=timer, rng=random.Random(5))
    b.start_round()
    assert list(b.word_queue) == first
    b.cancel_round()


def test_non_positive_sample_size_rejected(timer):
    with pytest.raises(ValueError):
        Session(["hello"], sample_size=0, timer=timer)
