import logging
from functools import wraps
from typing import Callable, Optional, TypeVar

from selenium.common.exceptions import WebDriverException

logger = logging.getLogger(__name__)


T = TypeVar('T')

def page_script(func: Callable[..., T]) -> Callable[..., Optional[T]]:
    """Run a best-effort page script; driver errors mid-navigation yield None."""
    @wraps(func)
    def wrapper(*args, **kwargs) -> Optional[T]:
        try:
            return func(*args, **kwargs)
        except WebDriverException as e:
            logger.debug(f"Page script {func.__name__} skipped: {e.msg or e}")
            return None
    return wrapper
