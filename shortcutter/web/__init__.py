from shortcutter.web.app import create_app


__all__ = ['create_app']
