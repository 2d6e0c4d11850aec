"""Gunicorn configuration for production.

Run with: gunicorn -c gunicorn_config.py "flightbook:create_app()"
"""
import os

# Server socket
port = os.getenv("PORT", "3000")
bind = f"0.0.0.0:{port}"
backlog = 2048

# Worker processes
# The flight store serialises writes with an in-process lock only, so a single
# worker process is the default; concurrency comes from threads.
workers = int(os.getenv("GUNICORN_WORKERS", "1"))
threads = int(os.getenv("GUNICORN_THREADS", "4"))
worker_class = "gthread"
timeout = 30
keepalive = 5
graceful_timeout = 30

# Logging
accesslog = "-"  # stdout
errorlog = "-"  # stdout
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

capture_output = True

# Process naming
proc_name = "flights-api"

# Server mechanics
daemon = False
pidfile = None
umask = 0
user = None
group = None
tmp_upload_dir = None
