#!/usr/bin/env python3
"""
Site Flask Application
Main Flask application entry point with modular routing structure.
"""

from flask import Flask
from jinja2 import TemplateNotFound
from werkzeug.serving import make_server
import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

HOST = 'localhost'
PORT = 3000


def create_app(test_config=None):
    """Create and configure the Flask application."""
    settings = {
        'SEND_FILE_MAX_AGE_DEFAULT': 0,  # Disable caching
        'TEMPLATE_FOLDER': os.path.join(BASE_DIR, 'views'),
        'STATIC_FOLDER': os.path.join(BASE_DIR, 'public'),
    }
    if test_config is not None:
        settings.update(test_config)

    # Static assets are served from the URL root, e.g. /css/style.css
    app = Flask(
        __name__,
        template_folder=settings['TEMPLATE_FOLDER'],
        static_folder=settings['STATIC_FOLDER'],
        static_url_path='',
    )
    app.config.update(settings)

    # Register blueprints
    from routes.main import main_bp

    app.register_blueprint(main_bp)

    @app.errorhandler(TemplateNotFound)
    def template_not_found(error):
        app.logger.error('Template not found: %s', error.name)
        return f'Template not found: {error.name}', 500, {'Content-Type': 'text/plain; charset=utf-8'}

    return app


def main():
    app = create_app()
    server = make_server(HOST, PORT, app)
    print('Flask app now listening on port', PORT)
    server.serve_forever()


if __name__ == '__main__':
    main()
