from shortcutter.utils.config import app_env, project_root, load_config, redis_kwargs
from shortcutter.utils.helpers import join_short_link, guarantee_500_response
from shortcutter.utils.shortener import generate_shortcut, checksum_shortcut
from shortcutter.utils.validators import validate_url, validate_path, has_scheme, normalize_url
from shortcutter.utils.logging import initialize_logging


__all__ = [
    'generate_shortcut',
    'checksum_shortcut',
    'validate_url',
    'validate_path',
    'has_scheme',
    'normalize_url',
    'app_env',
    'project_root',
    'load_config',
    'redis_kwargs',
    'join_short_link',
    'guarantee_500_response',
    'initialize_logging',
]
