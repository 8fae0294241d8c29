from datetime import datetime, timezone

from flask import Blueprint, jsonify

from gamenight.services.games.registry import get_registry

main = Blueprint('main', __name__)

@main.route('/health')
def health():
    return jsonify({
        'status': 'ok',
        'rooms': len(get_registry()),
        'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
    })

@main.route('/rooms')
def list_rooms():
    """Debug view of live rooms."""
    return jsonify([room.to_dict() for room in get_registry().rooms()])
