import logging
import os
from functools import wraps
from hmac import compare_digest

from flask import Flask, Blueprint, current_app, g, jsonify, request
from flask_cors import CORS
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from config import BASE_DIR, DEFAULT_ADMIN_KEY, get_config
from constants import DEFAULT_PROFILE, MAX_LENGTHS, TOKEN_HEADER, TOKEN_QUERY_PARAM
from models import db, isoformat, utcnow
from services import (
    generate_token, list_tokens, find_active_token, record_usage, deactivate_token,
    settings_key, save_settings, load_settings,
    get_profiles, is_valid_profile,
)
from services.storage import storage_operation
from utils.errors import ApiError, BadRequest, Unauthorized, Forbidden, NotFound, InternalError
from utils.logger import setup_logging
from utils.sanitizer import sanitize_user_id

logger = logging.getLogger(__name__)

migrate = Migrate(directory=os.path.join(BASE_DIR, 'migrations'))

api = Blueprint('api', __name__)


def get_json_body():
    """Request body as a dict; anything else (missing, malformed, a list) counts as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def require_user_id(value):
    """The request's userId, or BadRequest when it is missing or too long."""
    user_id = sanitize_user_id(value)
    if not user_id:
        raise BadRequest('userId required')
    if len(user_id) > MAX_LENGTHS['user_id']:
        raise BadRequest('userId too long')
    return user_id


# ============================================
# AUTH CHECKS
# ============================================

def check_admin_key(admin_key):
    """Raise Unauthorized unless `admin_key` matches the configured secret."""
    expected = current_app.config['ADMIN_KEY']
    if not isinstance(admin_key, str) or not compare_digest(admin_key.encode(), expected.encode()):
        logger.warning("Rejected admin request from %s", request.remote_addr)
        raise Unauthorized('Unauthorized')


def require_token(view):
    """
    Require a valid, active site token on the request.

    The token comes from the X-API-Token header or the `token` query
    parameter. On success usage counters are updated and the token is
    available as `g.api_token`.
    """
    @wraps(view)
    def wrapped(*args, **kwargs):
        token_string = request.headers.get(TOKEN_HEADER) or request.args.get(TOKEN_QUERY_PARAM)
        if not token_string:
            raise Unauthorized('API token required')

        with storage_operation('Token validation failed'):
            token = find_active_token(token_string)
        if token is None:
            raise Forbidden('Invalid or inactive token')

        g.api_token = record_usage(token)
        return view(*args, **kwargs)
    return wrapped


# ============================================
# ROUTES - HEALTH
# ============================================

@api.route('/health')
def health():
    return jsonify({'status': 'ok', 'timestamp': isoformat(utcnow())})


# ============================================
# ROUTES - TOKENS (admin)
# ============================================

@api.route('/tokens/generate', methods=['POST'])
def tokens_generate():
    data = get_json_body()
    check_admin_key(data.get('adminKey'))

    token = generate_token(data.get('domain'), data.get('description'))
    return jsonify({
        'success': True,
        'token': token.token,
        'message': 'Token generated successfully',
        'tokenData': token.to_dict(),
    })


@api.route('/tokens/list')
def tokens_list():
    check_admin_key(request.args.get('adminKey'))
    return jsonify({'tokens': [t.to_dict() for t in list_tokens()]})


@api.route('/tokens/deactivate', methods=['POST'])
def tokens_deactivate():
    data = get_json_body()
    check_admin_key(data.get('adminKey'))

    token_string = data.get('token')
    if not isinstance(token_string, str) or not deactivate_token(token_string):
        raise NotFound('Token not found')

    return jsonify({'success': True, 'message': 'Token deactivated'})


# ============================================
# ROUTES - TOKENS (widget)
# ============================================

@api.route('/tokens/validate')
@require_token
def tokens_validate():
    return jsonify({
        'valid': True,
        'domain': g.api_token.domain,
        'message': 'Token is valid',
    })


# ============================================
# ROUTES - SETTINGS
# ============================================

@api.route('/settings/save', methods=['POST'])
@require_token
def settings_save():
    data = get_json_body()

    user_id = require_user_id(data.get('userId'))

    profile = data.get('profile') or DEFAULT_PROFILE
    if not isinstance(profile, str) or not is_valid_profile(profile):
        raise BadRequest(f'Unknown profile: {profile}')

    custom_settings = data.get('customSettings')
    if custom_settings is None:
        custom_settings = {}
    if not isinstance(custom_settings, dict):
        raise BadRequest('customSettings must be an object')

    save_settings(settings_key(g.api_token.token, user_id), profile, custom_settings)
    return jsonify({'success': True, 'message': 'Settings saved successfully'})


@api.route('/settings/load')
@require_token
def settings_load():
    user_id = require_user_id(request.args.get('userId'))

    record = load_settings(settings_key(g.api_token.token, user_id))
    if record is None:
        return jsonify({'profile': DEFAULT_PROFILE, 'customSettings': {}})
    return jsonify(record.to_dict())


# ============================================
# ROUTES - PROFILES
# ============================================

@api.route('/profiles')
@require_token
def profiles():
    return jsonify({'profiles': get_profiles()})


# ============================================
# ERROR HANDLERS
# ============================================

def handle_api_error(error):
    if error.status_code >= 500:
        logger.error("%s: %s", request.path, error.message)
    return jsonify(error.to_dict()), error.status_code


def handle_http_error(error):
    return jsonify({'error': error.description}), error.code


def handle_unexpected_error(error):
    logger.exception("Unhandled error on %s", request.path)
    return handle_api_error(InternalError())


# ============================================
# APPLICATION FACTORY
# ============================================

def create_app(env=None):
    """Build the Flask app for the given environment name (defaults to FLASK_ENV)."""
    app = Flask(__name__)
    app.config.from_object(get_config(env))
    app.json.sort_keys = False

    setup_logging(app.config['LOG_LEVEL'], app.config['LOG_FILE'])

    if app.config['ADMIN_KEY'] == DEFAULT_ADMIN_KEY:
        logger.warning("ADMIN_KEY is not set; using the default admin key. Override it in production.")

    db.init_app(app)
    migrate.init_app(app, db)

    prefix = app.config['API_PREFIX']
    CORS(app, resources={prefix + '/*': {'origins': '*'}})
    app.register_blueprint(api, url_prefix=prefix)

    app.register_error_handler(ApiError, handle_api_error)
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected_error)

    init_db(app)
    return app


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db(app):
    """Create the token and settings tables if they don't exist yet."""
    with app.app_context():
        db.create_all()
    logger.info("Database initialized successfully")


app = create_app()


if __name__ == '__main__':
    logger.info("COMRADE backend running on port %s, API at %s", app.config['PORT'], app.config['API_PREFIX'])
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=app.config['PORT'], use_reloader=False)
