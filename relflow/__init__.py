"""Release, plan, admission and service-config models with status-condition tracking."""

__version__ = "0.1.0"
__all__ = ["collectors", "conditions", "config", "meta", "plans", "release"]