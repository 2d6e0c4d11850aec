"""
Entrypoint script for running the Flask development server.

For production use gunicorn: gunicorn -c gunicorn_config.py "flightbook:create_app()"
"""
from flightbook import create_app
from flightbook.config.settings import get_config

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(get_config().PORT), debug=app.config.get("DEBUG", False))
