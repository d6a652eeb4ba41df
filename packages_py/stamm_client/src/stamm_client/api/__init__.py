from .persons_api import PersonsApi

__all__ = ["PersonsApi"]
