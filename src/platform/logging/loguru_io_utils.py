from inspect import getfile, getsourcelines
from os.path import basename
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import call_depth_var, chain_start_time_var


MAX_CONTENT_LENGTH = 300


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    lineno = getsourcelines(func)[1]
    return f'{basename(getfile(getattr(func, "__func__", func)))}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def truncate_content(data: Any, max_length: int = MAX_CONTENT_LENGTH) -> Any:
    text = repr(data)
    if len(text) <= max_length:
        return data
    return f'{text[:max_length]}... ({len(text) - max_length} more chars)'
