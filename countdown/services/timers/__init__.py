"""Timer domain services: lifecycle state machine and status computation.

This package contains the domain logic imported by HTTP routes, keeping
transport concerns separated from timer mechanics. Nothing here ticks in
the background; every value is derived from the stored record and the
current wall-clock instant.
"""

from .engine import (
    create_timer,
    pause_timer,
    stop_timer,
    resume_timer,
    reset_timer,
    compute_status,
    get_timer,
    list_timers,
)
from .errors import (
    TimerError,
    InvalidInput,
    NotFound,
    AlreadyRunning,
    AlreadyFinished,
    ConcurrentUpdate,
)
