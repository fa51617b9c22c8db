"""
Service context extraction for logging.

Identifies the running simulator process on every log line so output from
several concurrent runs (e.g. parallel test workers) can be told apart.
"""

from functools import lru_cache
import os

from src.platform.config.core_setting import settings


@lru_cache(maxsize=1)
def get_service_context() -> str:
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # pytest-xdist workers share a pid namespace but not a worker id
    worker_id = os.getenv('PYTEST_XDIST_WORKER')
    task_id = f'{worker_id}-{os.getpid()}' if worker_id else str(os.getpid())

    return f'{settings.SERVICE_NAME}@{deploy_env}:{task_id}'
