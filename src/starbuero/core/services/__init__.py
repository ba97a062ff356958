from starbuero.core.services.pipeline import run_operation

__all__ = ["run_operation"]
