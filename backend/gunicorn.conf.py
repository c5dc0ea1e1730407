import os

from dotenv import load_dotenv

# Same .env the app reads, so the store choice below matches create_app()
load_dotenv()

# App entrypoint
wsgi_app = "exercise_library:create_app()"

# Bind & workers
bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8000")
workers = int(os.getenv("GUNICORN_WORKERS", "2"))
threads = int(os.getenv("GUNICORN_THREADS", "1"))

# The in-memory catalog lives inside one process; extra workers would each
# hand out their own ids. Scale with threads instead.
if os.getenv("EXERCISE_STORE", "sqlalchemy").strip().lower() == "memory":
    workers = 1

timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr; the app itself emits JSON lines
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

# Trust X-Forwarded-* from the fronting proxy
forwarded_allow_ips = "*"
proxy_protocol = False
