# Gunicorn configuration for the bracket name service
# Run with: gunicorn -c gunicorn_config.py app:application

import multiprocessing
import os

# Get the application directory
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
LOG_DIR = os.path.join(BASE_DIR, "logs")
os.makedirs(LOG_DIR, exist_ok=True)

# Server socket
bind = os.environ.get("BIND", "127.0.0.1:8000")
backlog = 2048

# Worker processes. Each request does at most one registry query,
# so plain sync workers are enough.
workers = int(os.environ.get("WEB_CONCURRENCY", multiprocessing.cpu_count() * 2 + 1))
worker_class = "sync"
timeout = 30
keepalive = 2

# Logging - using local logs directory
accesslog = os.path.join(LOG_DIR, "access.log")
errorlog = os.path.join(LOG_DIR, "error.log")
loglevel = os.environ.get("LOG_LEVEL", "info").lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)sus'

# Process naming
proc_name = "bracket_names"

# Server mechanics
daemon = False
pidfile = os.path.join(LOG_DIR, "gunicorn.pid")
