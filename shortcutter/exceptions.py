class ShortcutterError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:shortcutter_error'


class ConfigurationError(ShortcutterError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class ValidationError(ShortcutterError):
    """Base exception for rejected user input."""

    error_code = 'input:validation_error'


class InvalidURLError(ValidationError):
    """Raised when a submitted URL doesn't match the accepted URL pattern."""

    error_code = 'input:invalid_url'


class InvalidPathError(ValidationError):
    """Raised when a requested short path doesn't match the shortcut path pattern."""

    error_code = 'input:invalid_path'
