from cligen.cli.progress.rich import RichRunProgress

__all__ = ["RichRunProgress"]
