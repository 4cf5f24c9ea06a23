"""
Gunicorn configuration for the user registry API
"""
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '5000')}"

# Users live in process memory, so a single worker serves every request
workers = 1
worker_class = 'gthread'
threads = int(os.environ.get('GUNICORN_THREADS', '4'))
# Worker recycling would drop the in-memory users
max_requests = 0
timeout = 30
graceful_timeout = 30

accesslog = '-'  # Log to stdout
errorlog = '-'   # Log to stderr
loglevel = os.environ.get('LOG_LEVEL', 'info').lower()

proc_name = 'user-registry-api'


def when_ready(server):
    server.log.info(f"User registry API is ready. Listening on {bind}")


def on_exit(server):
    server.log.info("Shutting down user registry API...")
