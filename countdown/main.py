from flask import Blueprint, jsonify
from countdown.services.timers import clock

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the countdown timer server!'})

@main.route('/healthcheck')
def healthcheck():
    return jsonify({'status': 'ok', 'timestamp': clock.utcnow().isoformat() + 'Z'})
