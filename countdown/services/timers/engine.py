"""Timer lifecycle state machine.

States
------
RUNNING    ``is_running`` is set and ``anchor_time`` marks when the current
           running interval began.
PAUSED     ``is_running`` is clear, ``anchor_time`` is null and
           ``baseline_seconds`` holds the frozen remaining time.
FINISHED   Not stored. A timer whose live remaining time is zero reports
           ``is_finished``; its stored flags only change on an explicit
           pause or reset.

Transitions
-----------
create               -> RUNNING
RUNNING -> PAUSED    (pause / stop, folds elapsed time into the baseline)
PAUSED  -> PAUSED    (pause / stop, no-op)
PAUSED  -> RUNNING   (resume, refused when the baseline is zero)
any     -> PAUSED    (reset, baseline back to the original duration)

Writes are serialized per row: the row is read ``FOR UPDATE`` and every
UPDATE is guarded by the ``version`` column. A write that loses the race
is rolled back and the transition is evaluated again against the fresh
row, so two concurrent pauses can never subtract the same interval twice.
"""

from datetime import datetime
from typing import Callable, List, Optional

from flask import current_app
from sqlalchemy.orm.exc import StaleDataError

from countdown import db
from countdown.models import Timer
from . import clock
from .errors import AlreadyFinished, AlreadyRunning, ConcurrentUpdate, InvalidInput, NotFound
from .status import elapsed_seconds, status_of

# Integer columns are 32-bit on PostgreSQL
MAX_COLUMN_INT = 2**31 - 1


def _require_positive_int(value, name: str) -> int:
    # bool is an int subclass; True must not pass as a duration of 1
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidInput(f'{name} must be a positive integer, got {value!r}')
    if value > MAX_COLUMN_INT:
        raise InvalidInput(f'{name} must be at most {MAX_COLUMN_INT}, got {value}')
    return value


def _require_id(timer_id) -> int:
    if isinstance(timer_id, bool) or not isinstance(timer_id, int) or timer_id <= 0:
        raise InvalidInput(f'id must be a positive integer, got {timer_id!r}')
    # No row can carry an id wider than the column
    if timer_id > MAX_COLUMN_INT:
        raise NotFound(timer_id)
    return timer_id


def _fetch(timer_id: int) -> Timer:
    timer = Timer.query.populate_existing().filter_by(id=timer_id).first()
    if timer is None:
        raise NotFound(timer_id)
    return timer


def _fetch_for_update(timer_id: int) -> Timer:
    timer = Timer.query.populate_existing().filter_by(id=timer_id).with_for_update().first()
    if timer is None:
        raise NotFound(timer_id)
    return timer


def _mutate(timer_id: int, transition: Callable[[Timer], bool]) -> Timer:
    """Apply ``transition`` to the row atomically.

    ``transition`` edits the loaded row in place and returns whether it
    changed anything; a falsy return skips the write.
    """
    _require_id(timer_id)
    attempts = max(1, int(current_app.config.get('TIMER_MAX_WRITE_ATTEMPTS', 3)))
    for attempt in range(1, attempts + 1):
        try:
            timer = _fetch_for_update(timer_id)
            changed = transition(timer)
        except Exception:
            db.session.rollback()
            raise
        if not changed:
            # Nothing to write; end the transaction to release the row lock
            db.session.rollback()
            return timer
        try:
            db.session.commit()
        except StaleDataError:
            db.session.rollback()
            current_app.logger.warning(
                f"[timer-conflict] timer={timer_id} attempt={attempt}/{attempts} row changed underneath, re-evaluating"
            )
            continue
        except Exception:
            db.session.rollback()
            raise
        return timer
    raise ConcurrentUpdate(timer_id, attempts)


def create_timer(duration_seconds, now: Optional[datetime] = None) -> Timer:
    """Insert a new timer that starts counting down immediately."""
    _require_positive_int(duration_seconds, 'duration_seconds')
    now = now or clock.utcnow()
    timer = Timer(
        baseline_seconds=duration_seconds,
        original_duration_seconds=duration_seconds,
        is_running=True,
        anchor_time=now,
        created_at=now,
    )
    db.session.add(timer)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    current_app.logger.info(f"[timer-create] timer={timer.id} duration={duration_seconds}s")
    return timer


def pause_timer(timer_id, now: Optional[datetime] = None) -> Timer:
    """Freeze a running timer. Pausing a paused timer is a no-op.

    This is the only place where elapsed running time is folded into
    ``baseline_seconds``.
    """
    now = now or clock.utcnow()

    def _pause(timer: Timer) -> bool:
        if not timer.is_running:
            current_app.logger.info(f"[timer-pause-noop] timer={timer.id} already paused at {timer.baseline_seconds}s")
            return False
        elapsed = elapsed_seconds(timer.anchor_time, now) if timer.anchor_time else 0
        before = timer.baseline_seconds
        timer.baseline_seconds = max(0, before - elapsed)
        timer.is_running = False
        timer.anchor_time = None
        current_app.logger.info(
            f"[timer-pause] timer={timer.id} elapsed={elapsed}s baseline {before}s -> {timer.baseline_seconds}s"
        )
        return True

    return _mutate(timer_id, _pause)


# "stop" is what the original client calls pausing
stop_timer = pause_timer


def resume_timer(timer_id, now: Optional[datetime] = None) -> Timer:
    now = now or clock.utcnow()

    def _resume(timer: Timer) -> bool:
        if timer.is_running:
            raise AlreadyRunning(timer.id)
        if timer.baseline_seconds <= 0:
            raise AlreadyFinished(timer.id)
        timer.is_running = True
        timer.anchor_time = now
        current_app.logger.info(f"[timer-resume] timer={timer.id} remaining={timer.baseline_seconds}s")
        return True

    return _mutate(timer_id, _resume)


def reset_timer(timer_id) -> Timer:
    """Stop the timer and restore its own original duration."""

    def _reset(timer: Timer) -> bool:
        timer.baseline_seconds = timer.original_duration_seconds
        timer.is_running = False
        timer.anchor_time = None
        current_app.logger.info(f"[timer-reset] timer={timer.id} baseline={timer.baseline_seconds}s")
        return True

    return _mutate(timer_id, _reset)


def compute_status(timer_id, now: Optional[datetime] = None) -> dict:
    """Live status of a timer. Never writes, even once the timer has run out."""
    _require_id(timer_id)
    timer = _fetch(timer_id)
    return status_of(timer, now or clock.utcnow())


def get_timer(timer_id) -> Timer:
    _require_id(timer_id)
    return _fetch(timer_id)


def list_timers() -> List[Timer]:
    return Timer.query.order_by(Timer.created_at.desc(), Timer.id.desc()).all()
