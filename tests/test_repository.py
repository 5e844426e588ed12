# tests/test_repository.py
from simon.config import Timing
from simon.repository import DBGameStore

def test_repository_flow(db_session, clock, colors):
    repo = DBGameStore(db_session, draw_color=colors, clock=clock, timing=Timing(), initial_high_score=0)

    # Create
    state = repo.create()
    gid = state.game_id
    assert state.in_progress is False
    assert state.message == "Simon"

    # Start -> playback of one color
    state = repo.start(gid)
    assert state.playback.sequence == ["red"]
    assert repo.choose(gid, "red").outcome == "ignored"

    # Playback over -> player's turn
    clock.advance(2.0)
    assert repo.get(gid).player_turn is True
    assert repo.choose(gid, "red").outcome == "round_complete"

    # Post-match pause, then round two (JSON sequence grew in the DB)
    clock.advance(1.0)
    state = repo.get(gid)
    assert state.score == 1
    assert state.playback.sequence == ["red", "blue"]

    clock.advance(2.0)
    assert repo.choose(gid, "red").outcome == "accepted"
    result = repo.choose(gid, "yellow")
    assert result.outcome == "game_over"
    assert result.state.message == "Game Over!"
    assert result.state.score == 0
    assert result.state.last_score == 1

    # Scoreboard reflects the game
    board = repo.get_scoreboard()
    assert board.high_score == 1
    assert board.games_played == 1

def test_repository_state_survives_new_session(engine, db_session, clock, colors):
    from sqlalchemy.orm import sessionmaker

    repo = DBGameStore(db_session, draw_color=colors, clock=clock, timing=Timing())
    gid = repo.create().game_id
    repo.start(gid)
    clock.advance(2.0)
    repo.choose(gid, "red")

    other = sessionmaker(bind=engine, future=True)()
    try:
        state = DBGameStore(other, draw_color=colors, clock=clock, timing=Timing()).get(gid)
        assert state.in_progress is True
        assert state.next_round_at is not None
        assert state.high_score == 6
    finally:
        other.close()

def test_repository_quit_idle_and_reset(db_session, clock, colors):
    repo = DBGameStore(db_session, draw_color=colors, clock=clock, timing=Timing(), initial_high_score=3)
    gid = repo.create().game_id

    state = repo.quit(gid)
    assert state.in_progress is False
    assert state.last_score is None

    assert repo.get("missing") is None
    repo.reset_scoreboard()
    assert repo.get_scoreboard().high_score == 3
