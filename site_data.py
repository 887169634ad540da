"""
Static data shown on the site pages.
Built once at import time and only read afterwards.
"""

from collections import namedtuple

Link = namedtuple('Link', ['href', 'text'])

GREETING = 'Oh my! Amazing! '

LINKS = (
    Link('/', 'Home'),
    Link('/about', 'About'),
)

USERS = ('Rick', 'Morty', 'Roy')

ABOUT = None
