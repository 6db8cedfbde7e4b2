# gunicorn.conf.py
import os
import logging
import sys
import multiprocessing
from dotenv import load_dotenv

load_dotenv()

wsgi_app = 'app:create_app()'

accesslog = '-'
errorlog = '-'
loglevel = 'info'

port = os.getenv('API_PORT', '8080')
bind = f"0.0.0.0:{port}"

workers = min(multiprocessing.cpu_count() * 2 + 1, 6)
threads = 4
worker_class = "gthread"
timeout = 60
keepalive = 5
graceful_timeout = 30
proc_name = "bible_verses_api"


def on_starting(server):
    logger = logging.getLogger('gunicorn.error')
    logger.setLevel(logging.INFO)
    logger.addHandler(logging.StreamHandler(sys.stdout))
    logger.info(f"Starting bible verses API with {workers} workers on port {port}")
