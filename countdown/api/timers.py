from flask import Blueprint, jsonify, request, current_app
from countdown import socketio
from countdown.services.timers import (
    TimerError,
    create_timer,
    pause_timer,
    resume_timer,
    reset_timer,
    compute_status,
    get_timer,
    list_timers,
)


timers = Blueprint('timers', __name__)


def _room(timer_id: int) -> str:
    return f"timer:{timer_id}"


def _broadcast(timer) -> None:
    payload = timer.to_dict()
    socketio.emit('state_update', payload, to=_room(timer.id), namespace='/ws')


@timers.errorhandler(TimerError)
def handle_timer_error(exc: TimerError):
    current_app.logger.warning(f"[timer-error] {request.method} {request.path} -> {exc.status_code}: {exc.message}")
    return jsonify({'error': exc.message}), exc.status_code


@timers.route('', methods=['POST'])
def start_timer():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    if 'duration_seconds' in data:
        duration = data['duration_seconds']
    else:
        duration = int(current_app.config.get('DEFAULT_DURATION_SEC', 240))
    timer = create_timer(duration)
    return jsonify(timer.to_dict()), 201


@timers.route('', methods=['GET'])
def get_all_timers():
    return jsonify([t.to_dict() for t in list_timers()])


@timers.route('/<int:timer_id>', methods=['GET'])
def get_timer_record(timer_id):
    return jsonify(get_timer(timer_id).to_dict())


@timers.route('/<int:timer_id>/status', methods=['GET'])
def get_timer_status(timer_id):
    return jsonify(compute_status(timer_id))


@timers.route('/<int:timer_id>/pause', methods=['POST'])
@timers.route('/<int:timer_id>/stop', methods=['POST'])
def pause(timer_id):
    timer = pause_timer(timer_id)
    _broadcast(timer)
    return jsonify(timer.to_dict())


@timers.route('/<int:timer_id>/resume', methods=['POST'])
def resume(timer_id):
    timer = resume_timer(timer_id)
    _broadcast(timer)
    return jsonify(timer.to_dict())


@timers.route('/<int:timer_id>/reset', methods=['POST'])
def reset(timer_id):
    timer = reset_timer(timer_id)
    _broadcast(timer)
    return jsonify(timer.to_dict())
