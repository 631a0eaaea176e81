from .demo import configured_dialect, detect_dialect, run_demo  # noqa: F401

__all__ = ["configured_dialect", "detect_dialect", "run_demo"]
