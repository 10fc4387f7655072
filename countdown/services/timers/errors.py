class TimerError(Exception):
    """Base class for failures reported to timer callers."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(TimerError):
    status_code = 400


class NotFound(TimerError):
    status_code = 404

    def __init__(self, timer_id: int):
        super().__init__(f'Timer with id {timer_id} not found')
        self.timer_id = timer_id


class AlreadyRunning(TimerError):
    status_code = 409

    def __init__(self, timer_id: int):
        super().__init__(f'Timer with id {timer_id} is already running')
        self.timer_id = timer_id


class AlreadyFinished(TimerError):
    status_code = 409

    def __init__(self, timer_id: int):
        super().__init__(f'Timer with id {timer_id} has already finished')
        self.timer_id = timer_id


class ConcurrentUpdate(TimerError):
    status_code = 409

    def __init__(self, timer_id: int, attempts: int):
        super().__init__(f'Timer with id {timer_id} changed concurrently {attempts} times, try again')
        self.timer_id = timer_id
        self.attempts = attempts
