"""Common literal values used across bookpath.

Setting names are the keys read through ``BookSource.get_setting`` and the
keys of the ``settings`` mapping in a book YAML file, so loaders, resolvers
and tests import the same values without drifting. Intended for internal use
within the bookpath package.

Examples
--------
>>> from bookpath import _constants
>>> _constants.SETTING_TITLE_PAGE
'title_page'
>>> _constants.PUBLISHED_STATUS
'publish'
"""

PUBLISHED_STATUS = "publish"

SETTING_TOC_MENU = "toc_menu"
SETTING_CHAPTER_IS_PAGE = "chapter_is_page"
SETTING_SPECIAL_PAGES = "special_pages"
SETTING_TITLE_PAGE = "title_page"
SETTING_PAGE_ON_FRONT = "page_on_front"
SETTING_START_NUMBER = "start_number"
SETTING_PAGE_NAV_ENABLED = "page_nav_enabled"
SETTING_DETECT_LOGIN_PAGE = "detect_login_page"

LOGIN_PAGE_SLUG = "login"
LOGIN_PAGE_SHORTCODE = "[theme-my-login]"

ROMAN_MAX = 4999
ROMAN_ZERO = "N"
