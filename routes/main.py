"""
Main routes for the site.
Handles the home page, the about page and the shared navigation links.
"""

from flask import Blueprint, render_template

from site_data import ABOUT, GREETING, LINKS, USERS

main_bp = Blueprint('main', __name__)


def build_index_context():
    """Return a fresh render context for the home page."""
    return {
        'message': GREETING,
        'users': USERS,
    }


@main_bp.app_context_processor
def inject_links():
    # layout.html draws the navigation on every page
    return {'links': LINKS}


@main_bp.route('/')
def index():
    """Home page route."""
    return render_template('index.html', **build_index_context())


@main_bp.route('/about')
def about():
    """About page route."""
    return render_template('about.html', about=ABOUT)
