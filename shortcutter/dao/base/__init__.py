from shortcutter.dao.base.shortcut_base_dao import ShortcutBaseDAO


__all__ = ['ShortcutBaseDAO']
