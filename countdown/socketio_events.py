from flask_socketio import join_room, leave_room, emit
from countdown import socketio


def _timer_room(data):
    """Resolve the room for ``data['timer_id']``, or None if it is unusable."""
    timer_id = (data or {}).get('timer_id')
    if isinstance(timer_id, bool) or not isinstance(timer_id, int) or timer_id <= 0:
        return None
    return f"timer:{timer_id}"


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_timer(data):
    room = _timer_room(data)
    if room is None:
        emit('error', {'message': 'timer_id must be a positive integer'})
        return
    join_room(room)
    emit('joined', {'room': room})


def handle_leave_timer(data):
    room = _timer_room(data)
    if room is None:
        emit('error', {'message': 'timer_id must be a positive integer'})
        return
    leave_room(room)
    emit('left', {'room': room})


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on namespace '/ws'.

    Clients join ``timer:<id>`` to receive ``state_update`` pushes whenever
    that timer is paused, resumed or reset. Nothing is pushed on a clock
    tick; clients poll the status route for live remaining time.
    """
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('join_timer', handle_join_timer, namespace='/ws')
    socketio.on_event('leave_timer', handle_leave_timer, namespace='/ws')
