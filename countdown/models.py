from countdown import db


def _isoformat(value):
    return value.isoformat() if value is not None else None


class Timer(db.Model):
    __tablename__ = 'timers'
    id = db.Column(db.Integer, primary_key=True)
    # Remaining seconds as of the last transition (create, pause, reset)
    baseline_seconds = db.Column(db.Integer, nullable=False)
    original_duration_seconds = db.Column(db.Integer, nullable=False)
    is_running = db.Column(db.Boolean, default=False, nullable=False)
    # Start of the current running interval; set iff is_running
    anchor_time = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, index=True)
    version = db.Column(db.Integer, nullable=False)

    __mapper_args__ = {'version_id_col': version}

    def to_dict(self):
        return {
            'id': self.id,
            'remaining_seconds': self.baseline_seconds,
            'original_duration_seconds': self.original_duration_seconds,
            'is_running': self.is_running,
            'anchor_time': _isoformat(self.anchor_time),
            'created_at': _isoformat(self.created_at),
        }

    def __repr__(self):
        return f'<Timer {self.id} baseline={self.baseline_seconds} running={self.is_running}>'
