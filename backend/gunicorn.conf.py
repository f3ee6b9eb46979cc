import os

# Entrypoint
wsgi_app = "portfolio_api:create_app()"

# Bind & workers
bind = f"0.0.0.0:{os.getenv('PORT', '5000')}"
workers = int(os.getenv("GUNICORN_WORKERS", "2"))
threads = 1
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr (collected by Docker)
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

# Honour proxy headers
forwarded_allow_ips = "*"
proxy_protocol = False
